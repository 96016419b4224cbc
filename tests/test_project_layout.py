"""Tests for project/layout.py: layout detection and locale file discovery.

Python 3.13+.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from rtextmerge.enums import ProjectLayout
from rtextmerge.locale_utils import LOCALE_TABLE
from rtextmerge.project import (
    LocaleFile,
    ProjectConfig,
    detect_layout,
    discover_locale_files,
    locale_file_path,
)


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{}", encoding="utf-8")
    return path


class TestDetectLayout:
    """FLAT versus PER_LOCALE_FOLDER."""

    def test_flat_when_locale_file_present(self, tmp_path: Path) -> None:
        """One direct locale file makes the folder flat."""
        _touch(tmp_path / "US.json")
        assert detect_layout(tmp_path, ".json", LOCALE_TABLE) is ProjectLayout.FLAT

    def test_per_locale_folder_otherwise(self, tmp_path: Path) -> None:
        """Without direct locale files the folder is per-locale."""
        _touch(tmp_path / "US" / "rtext.json")
        _touch(tmp_path / "readme.json")
        assert detect_layout(tmp_path, ".json", LOCALE_TABLE) is ProjectLayout.PER_LOCALE_FOLDER

    def test_suffix_must_match(self, tmp_path: Path) -> None:
        """A locale-named file with another suffix does not count."""
        _touch(tmp_path / "US.txt")
        assert detect_layout(tmp_path, ".json", LOCALE_TABLE) is ProjectLayout.PER_LOCALE_FOLDER

    def test_stem_match_is_case_sensitive(self, tmp_path: Path) -> None:
        """Lowercase codes are not locale files."""
        _touch(tmp_path / "us.json")
        assert detect_layout(tmp_path, ".json", LOCALE_TABLE) is ProjectLayout.PER_LOCALE_FOLDER


class TestDiscoverLocaleFiles:
    """Listing locale files per layout."""

    def test_flat_files_sorted_and_filtered(self, tmp_path: Path) -> None:
        """Only known stems are listed, in name order."""
        for name in ("US.json", "FR.json", "XX.json", "notes.json"):
            _touch(tmp_path / name)
        layout, files = discover_locale_files(
            tmp_path, suffix=".json", payload_name="rtext", table=LOCALE_TABLE
        )
        assert layout is ProjectLayout.FLAT
        assert files == (
            LocaleFile("FR", tmp_path / "FR.json"),
            LocaleFile("US", tmp_path / "US.json"),
        )

    def test_per_locale_folders_need_payload(self, tmp_path: Path) -> None:
        """Folders without the payload file or with unknown names are ignored."""
        _touch(tmp_path / "US" / "rtext.json")
        _touch(tmp_path / "DE" / "rtext.json")
        _touch(tmp_path / "FR" / "other.json")
        _touch(tmp_path / "misc" / "rtext.json")
        layout, files = discover_locale_files(
            tmp_path, suffix=".json", payload_name="rtext", table=LOCALE_TABLE
        )
        assert layout is ProjectLayout.PER_LOCALE_FOLDER
        assert [f.locale_code for f in files] == ["DE", "US"]
        assert files[0].path == tmp_path / "DE" / "rtext.json"

    def test_empty_folder(self, tmp_path: Path) -> None:
        """An empty folder yields no locale files."""
        _, files = discover_locale_files(
            tmp_path, suffix=".json", payload_name="rtext", table=LOCALE_TABLE
        )
        assert files == ()


class TestLocaleFilePath:
    """Destination paths per layout."""

    def test_flat(self) -> None:
        """Flat: <folder>/<CODE><suffix>."""
        path = locale_file_path(
            Path("common"), "US", ProjectLayout.FLAT, suffix=".json", payload_name="rtext"
        )
        assert path == Path("common/US.json")

    def test_per_locale_folder(self) -> None:
        """Per-locale folder: <folder>/<CODE>/<payload><suffix>."""
        path = locale_file_path(
            Path("arcade"),
            "GB",
            ProjectLayout.PER_LOCALE_FOLDER,
            suffix=".json",
            payload_name="strings",
        )
        assert path == Path("arcade/GB/strings.json")


class TestProjectConfig:
    """Configuration validation."""

    def test_defaults(self) -> None:
        """Default config uses the built-in table and the rtext payload."""
        config = ProjectConfig()
        assert config.payload_name == "rtext"
        assert config.display_locale == "en"
        assert "US" in config.locale_table

    @pytest.mark.parametrize("payload_name", ["", "a/b", "a\\b"])
    def test_invalid_payload_name(self, payload_name: str) -> None:
        """Payload names must be plain stems."""
        with pytest.raises(ValueError, match="payload_name"):
            ProjectConfig(payload_name=payload_name)

    def test_empty_table_rejected(self) -> None:
        """A project needs at least one known locale."""
        with pytest.raises(ValueError, match="locale_table"):
            ProjectConfig(locale_table={})

"""On-disk layout detection for folder projects.

A folder is FLAT when at least one file directly inside it is named after a
known locale code and carries the codec suffix (``common/US.json``).
Otherwise every subfolder named after a known locale code that holds the
payload file is a locale (``arcade/US/rtext.json``). The layout is decided
once per folder and never mixed.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from rtextmerge.enums import ProjectLayout
from rtextmerge.store.types import LocaleCode

__all__ = [
    "LocaleFile",
    "detect_layout",
    "discover_locale_files",
    "locale_file_path",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleFile:
    """A locale file found in a project folder.

    Attributes:
        locale_code: Locale code taken from the file stem or folder name
        path: Full path of the locale file
    """

    locale_code: LocaleCode
    path: Path


def _flat_candidates(folder: Path, suffix: str, table: Mapping[str, str]) -> list[Path]:
    return sorted(
        (
            path
            for path in folder.iterdir()
            if path.is_file() and path.suffix == suffix and path.stem in table
        ),
        key=lambda path: path.name,
    )


def detect_layout(folder: Path, suffix: str, table: Mapping[str, str]) -> ProjectLayout:
    """Decide the layout of ``folder``.

    Args:
        folder: Project folder
        suffix: Locale file extension of the codec, including the dot
        table: Locale table; stems must match a key exactly

    Returns:
        ProjectLayout.FLAT if any direct child is a locale file, otherwise
        ProjectLayout.PER_LOCALE_FOLDER

    Raises:
        OSError: If the folder cannot be listed
    """
    if _flat_candidates(folder, suffix, table):
        return ProjectLayout.FLAT
    return ProjectLayout.PER_LOCALE_FOLDER


def locale_file_path(
    folder: Path,
    locale_code: LocaleCode,
    layout: ProjectLayout,
    *,
    suffix: str,
    payload_name: str,
) -> Path:
    """Return where a locale lives under ``folder`` for a given layout.

    Example:
        >>> locale_file_path(Path("common"), "US", ProjectLayout.FLAT,
        ...                  suffix=".json", payload_name="rtext")
        PosixPath('common/US.json')
    """
    match layout:
        case ProjectLayout.FLAT:
            return folder / f"{locale_code}{suffix}"
        case ProjectLayout.PER_LOCALE_FOLDER:
            return folder / locale_code / f"{payload_name}{suffix}"


def discover_locale_files(
    folder: Path,
    *,
    suffix: str,
    payload_name: str,
    table: Mapping[str, str],
) -> tuple[ProjectLayout, tuple[LocaleFile, ...]]:
    """Detect the layout of ``folder`` and list its locale files in name order.

    Raises:
        OSError: If the folder cannot be listed
    """
    layout = detect_layout(folder, suffix, table)
    if layout is ProjectLayout.FLAT:
        found = tuple(
            LocaleFile(locale_code=path.stem, path=path)
            for path in _flat_candidates(folder, suffix, table)
        )
    else:
        payload = f"{payload_name}{suffix}"
        found = tuple(
            LocaleFile(locale_code=child.name, path=child / payload)
            for child in sorted(folder.iterdir(), key=lambda path: path.name)
            if child.is_dir() and child.name in table and (child / payload).is_file()
        )
    logger.debug("Folder %s: %s layout, %d locale files", folder, layout, len(found))
    return layout, found

"""Tests for store/locale_store.py and store/codec.py.

Python 3.13+.
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from rtextmerge.diagnostics import (
    CategoryNotFoundError,
    DiagnosticCode,
    StoreFormatError,
    StoreIOError,
)
from rtextmerge.store import Category, JsonStoreCodec, LocaleStore
from rtextmerge.store.codec import FORMAT_TAG
from tests.helpers.stores import make_category, make_store, rows_of


class TestLocaleStore:
    """Category access on a LocaleStore."""

    def test_pages_view_is_read_only(self) -> None:
        """get_pages returns a mapping that cannot be mutated."""
        store = make_store("US", {"MenuText": [(1, "a", "A")]})
        pages = store.get_pages()
        assert list(pages) == ["MenuText"]
        with pytest.raises(TypeError):
            pages["Other"] = Category("Other")  # type: ignore[index]

    def test_category_lookup(self) -> None:
        """category() returns the named category."""
        store = make_store("US", {"MenuText": [], "Credits": []})
        assert store.category("Credits").name == "Credits"
        assert store.category_names == ("MenuText", "Credits")

    def test_missing_category_raises(self) -> None:
        """Unknown category raises CategoryNotFoundError (a KeyError)."""
        store = make_store("FR", {"MenuText": []})
        with pytest.raises(KeyError) as exc_info:
            store.category("Nope")
        assert isinstance(exc_info.value, CategoryNotFoundError)
        assert exc_info.value.code is DiagnosticCode.CATEGORY_NOT_FOUND
        assert str(exc_info.value) == "Category 'Nope' not found in locale 'FR'"

    def test_duplicate_category_rejected(self) -> None:
        """Two categories with one name raise ValueError."""
        with pytest.raises(ValueError, match="Duplicate category"):
            LocaleStore("US", [Category("A"), Category("A")])

    def test_add_category_inherits_id_variant(self) -> None:
        """New categories share the store's implicit-id flag."""
        store = make_store("US", {}, implicit=True)
        page = store.add_category("Fresh")
        assert page.uses_implicit_sequential_id
        with pytest.raises(ValueError, match="already exists"):
            store.add_category("Fresh")

    def test_save_without_codec(self, tmp_path: Path) -> None:
        """A store without codec cannot be saved."""
        store = LocaleStore("US")
        with pytest.raises(StoreIOError) as exc_info:
            store.save(tmp_path / "US.json")
        assert exc_info.value.code is DiagnosticCode.IO_FAILURE

    def test_save_into_missing_directory(self, tmp_path: Path) -> None:
        """OSError from the codec is wrapped as StoreIOError."""
        store = make_store("US", {"MenuText": []})
        target = tmp_path / "missing" / "US.json"
        with pytest.raises(StoreIOError) as exc_info:
            store.save(target)
        assert exc_info.value.path == str(target)


class TestJsonStoreCodec:
    """Reading and writing locale files."""

    def test_round_trip_explicit_ids(self, tmp_path: Path) -> None:
        """Written file reads back with identical ids and order."""
        codec = JsonStoreCodec()
        store = make_store(
            "US", {"MenuText": [(4, "quit", "Quit"), (1, "start", "Start, \"now\"")]}
        )
        path = tmp_path / "US.json"
        codec.write(store, path)

        loaded = codec.read(path, "US")
        assert loaded.locale_code == "US"
        assert loaded.codec is codec
        assert rows_of(loaded.category("MenuText")) == [
            (4, "quit", "Quit"),
            (1, "start", "Start, \"now\""),
        ]

    def test_implicit_ids_not_persisted(self, tmp_path: Path) -> None:
        """Implicit-id stores write label/value pairs and renumber on read."""
        codec = JsonStoreCodec()
        store = make_store("JP", {"Page": [(7, "a", "A"), (9, "b", "B")]}, implicit=True)
        path = tmp_path / "JP.json"
        codec.write(store, path)

        document = json.loads(path.read_text(encoding="utf-8"))
        assert document["implicit_sequential_id"] is True
        assert document["categories"]["Page"] == [["a", "A"], ["b", "B"]]

        loaded = codec.read(path, "JP")
        assert loaded.uses_implicit_sequential_id
        assert rows_of(loaded.category("Page")) == [(1, "a", "A"), (2, "b", "B")]

    def test_non_ascii_written_verbatim(self, tmp_path: Path) -> None:
        """Localized text is stored as UTF-8, not escaped."""
        codec = JsonStoreCodec()
        path = tmp_path / "JP.json"
        codec.write(make_store("JP", {"Page": [(1, "start", "スタート")]}), path)
        assert "スタート" in path.read_text(encoding="utf-8")

    def test_missing_file(self, tmp_path: Path) -> None:
        """Reading a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            JsonStoreCodec().read(tmp_path / "nope.json", "US")

    @pytest.mark.parametrize(
        "content",
        [
            "not json",
            "[]",
            json.dumps({"format": "other"}),
            json.dumps({"format": FORMAT_TAG, "categories": []}),
            json.dumps({"format": FORMAT_TAG, "categories": {"P": {}}}),
            json.dumps({"format": FORMAT_TAG, "categories": {"P": [["a", "A"]]}}),
            json.dumps({"format": FORMAT_TAG, "categories": {"P": [[True, "a", "A"]]}}),
            json.dumps(
                {"format": FORMAT_TAG, "categories": {"P": [[1, "a", "A"], [2, "a", "B"]]}}
            ),
        ],
        ids=[
            "not-json",
            "not-object",
            "wrong-tag",
            "categories-not-object",
            "rows-not-list",
            "missing-id",
            "bool-id",
            "duplicate-label",
        ],
    )
    def test_invalid_documents(self, tmp_path: Path, content: str) -> None:
        """Structurally invalid files raise StoreFormatError."""
        path = tmp_path / "US.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(StoreFormatError) as exc_info:
            JsonStoreCodec().read(path, "US")
        assert exc_info.value.code is DiagnosticCode.STORE_FORMAT_INVALID

    def test_empty_category_round_trip(self, tmp_path: Path) -> None:
        """Categories without entries survive a round trip."""
        codec = JsonStoreCodec()
        path = tmp_path / "US.json"
        codec.write(LocaleStore("US", [make_category("Empty")], codec=codec), path)
        assert codec.read(path, "US").category_names == ("Empty",)

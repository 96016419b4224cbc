"""JSON locale-file codec.

Plain-text stand-in for the binary locale-file format, implementing the
StoreCodec protocol. One file holds one locale:

    {
      "format": "rtextmerge/1",
      "implicit_sequential_id": false,
      "categories": {"MenuText": [[1, "start", "Start"], [2, "quit", "Quit"]]}
    }

Rows are ``[label, value]`` pairs when ``implicit_sequential_id`` is true;
ids are then reassigned 1..n in file order on read.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rtextmerge.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    LabelExistsError,
    StoreFormatError,
)
from rtextmerge.store.category import Category, Entry
from rtextmerge.store.locale_store import LocaleStore
from rtextmerge.store.types import LocaleCode

__all__ = ["FORMAT_TAG", "JsonStoreCodec"]

logger = logging.getLogger(__name__)

FORMAT_TAG: str = "rtextmerge/1"


def _format_error(path: Path, locale_code: LocaleCode, detail: str) -> StoreFormatError:
    diagnostic = Diagnostic(
        code=DiagnosticCode.STORE_FORMAT_INVALID,
        message=f"Invalid locale file: {detail}",
        locale_code=locale_code,
        path=str(path),
    )
    return StoreFormatError(diagnostic)


def _is_entry_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True, slots=True)
class JsonStoreCodec:
    """Reads and writes locale stores as UTF-8 JSON documents.

    Attributes:
        suffix: File extension used for locale files
        indent: Indentation of written documents (None for compact output)
    """

    suffix: str = ".json"
    indent: int | None = 2

    def read(self, path: Path, locale_code: LocaleCode) -> LocaleStore:
        """Read one locale file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
            StoreFormatError: If the document is not a valid locale store
        """
        text = Path(path).read_text(encoding="utf-8")
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise _format_error(path, locale_code, f"not JSON ({e.msg})") from e

        if not isinstance(data, dict) or data.get("format") != FORMAT_TAG:
            raise _format_error(path, locale_code, f"missing format tag '{FORMAT_TAG}'")

        implicit = data.get("implicit_sequential_id", False)
        pages = data.get("categories", {})
        if not isinstance(implicit, bool) or not isinstance(pages, dict):
            raise _format_error(path, locale_code, "unexpected document structure")

        categories: list[Category] = []
        for name, rows in pages.items():
            if not isinstance(rows, list):
                raise _format_error(path, locale_code, f"category '{name}' is not a list")
            entries = self._read_rows(path, locale_code, name, rows, implicit=implicit)
            try:
                categories.append(
                    Category(name, entries, uses_implicit_sequential_id=implicit)
                )
            except LabelExistsError as e:
                raise _format_error(path, locale_code, str(e)) from e

        logger.debug("Read locale %s from %s (%d categories)", locale_code, path, len(categories))
        return LocaleStore(
            locale_code,
            categories,
            codec=self,
            uses_implicit_sequential_id=implicit,
        )

    def _read_rows(
        self,
        path: Path,
        locale_code: LocaleCode,
        name: str,
        rows: list[Any],
        *,
        implicit: bool,
    ) -> list[Entry]:
        entries: list[Entry] = []
        for position, row in enumerate(rows, start=1):
            match row:
                case [str() as label, str() as value] if implicit:
                    entries.append(Entry(id=position, label=label, value=value))
                case [entry_id, str() as label, str() as value] if (
                    not implicit and _is_entry_id(entry_id)
                ):
                    entries.append(Entry(id=entry_id, label=label, value=value))
                case _:
                    raise _format_error(
                        path, locale_code, f"malformed row {position} in category '{name}'"
                    )
        return entries

    def write(self, store: LocaleStore, path: Path) -> None:
        """Write one locale file, entries in display order.

        Raises:
            OSError: If the file cannot be written
        """
        implicit = store.uses_implicit_sequential_id
        pages: dict[str, list[list[Any]]] = {}
        for name, category in store.get_pages().items():
            if implicit:
                pages[name] = [[entry.label, entry.value] for entry in category]
            else:
                pages[name] = [[entry.id, entry.label, entry.value] for entry in category]

        document = {
            "format": FORMAT_TAG,
            "implicit_sequential_id": implicit,
            "categories": pages,
        }
        Path(path).write_text(
            json.dumps(document, ensure_ascii=False, indent=self.indent) + "\n",
            encoding="utf-8",
        )

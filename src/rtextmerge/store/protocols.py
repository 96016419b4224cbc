"""Structural contracts for entry stores and locale-file codecs.

The reconciliation engine and the project loader depend only on these
protocols, never on a concrete file encoding.

Components:
    EntryStore - Per-category entry operations (implemented by Category)
    PageSource - Whole-locale page access and persistence (implemented by LocaleStore)
    StoreCodec - Read/write of one locale file (implemented by JsonStoreCodec)

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from rtextmerge.store.types import CategoryName, EntryId, Label, LocaleCode

if TYPE_CHECKING:
    from rtextmerge.store.category import Category, Entry
    from rtextmerge.store.locale_store import LocaleStore

__all__ = [
    "EntryStore",
    "PageSource",
    "StoreCodec",
]


class EntryStore(Protocol):
    """Keyed collection of entries for one category in one locale.

    This is a Protocol (structural typing) rather than ABC so that stores
    backed by other encodings can be merged into without subclassing.
    """

    @property
    def name(self) -> CategoryName:
        """Category name."""
        ...

    def get(self, label: Label) -> Entry | None:
        """Return the entry for ``label``, or None."""
        ...

    def pair_exists(self, label: Label) -> bool:
        """Check whether ``label`` is present."""
        ...

    def get_last_id(self) -> EntryId:
        """Maximum id across current entries, or 0 when empty."""
        ...

    def add_row(self, entry_id: EntryId, label: Label, value: str) -> Entry:
        """Insert; raise LabelExistsError when ``label`` is present."""
        ...

    def edit_row(self, entry_id: EntryId, label: Label, value: str) -> Entry:
        """Upsert by label."""
        ...

    def rename_row(
        self, old_label: Label, entry_id: EntryId, new_label: Label, value: str
    ) -> Entry:
        """Atomically replace one entry, possibly under a new label."""
        ...

    def delete_row(self, label: Label) -> bool:
        """Remove ``label``; False when absent."""
        ...


class PageSource(Protocol):
    """One locale's categories plus whole-file persistence."""

    @property
    def locale_code(self) -> LocaleCode:
        """Locale code of the store."""
        ...

    def get_pages(self) -> Mapping[CategoryName, Category]:
        """Return the category mapping (read-only view)."""
        ...

    def save(self, path: str | Path) -> None:
        """Persist the whole store to ``path``."""
        ...


class StoreCodec(Protocol):
    """Reads and writes one locale file.

    Implementations must provide ``suffix`` (the file extension, including the
    dot), ``read()`` and ``write()``.

    Example:
        >>> class MemoryCodec:
        ...     suffix = ".mem"
        ...     def read(self, path, locale_code):
        ...         return LocaleStore(locale_code, codec=self)
        ...     def write(self, store, path):
        ...         pass
    """

    suffix: str

    def read(self, path: Path, locale_code: LocaleCode) -> LocaleStore:
        """Read a locale file.

        Args:
            path: File to read
            locale_code: Locale code to assign to the resulting store

        Returns:
            Populated LocaleStore bound to this codec

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
            StoreFormatError: If the content is not a valid store
        """
        ...

    def write(self, store: LocaleStore, path: Path) -> None:
        """Write a locale store.

        Raises:
            OSError: If the file cannot be written
        """
        ...

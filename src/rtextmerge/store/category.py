"""Entry and Category: the keyed entry collection of one locale page.

A Category maps labels to entries. Labels are unique at all times; ids are
assigned by callers through get_last_id() and never renumbered by edits.
Insertion order is preserved for display only.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from rtextmerge.constants import EMPTY_CATEGORY_LAST_ID
from rtextmerge.diagnostics import LabelExistsError
from rtextmerge.store.types import CategoryName, EntryId, Label

__all__ = ["Category", "Entry"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Entry:
    """One localization unit.

    Attributes:
        id: Locale-local stable sequence number
        label: Natural key, unique within its category
        value: Localized text
    """

    id: EntryId
    label: Label
    value: str


class Category:
    """Keyed collection of entries for one category in one locale.

    Implements the EntryStore protocol. Each mutating call is atomic: it
    either fully applies or raises before touching the collection.

    When ``uses_implicit_sequential_id`` is set, entries carry no persisted id
    and display order encodes the sequence: add_row ignores the caller's id
    and appends with ``get_last_id() + 1``, and edits keep the existing id.

    Example:
        >>> page = Category("MenuText")
        >>> page.add_row(page.get_last_id() + 1, "start", "Start")
        Entry(id=1, label='start', value='Start')
        >>> page.pair_exists("start")
        True
    """

    __slots__ = ("_entries", "_name", "_uses_implicit_sequential_id")

    def __init__(
        self,
        name: CategoryName,
        entries: Iterable[Entry] = (),
        *,
        uses_implicit_sequential_id: bool = False,
    ) -> None:
        """Initialize a category.

        Args:
            name: Category name
            entries: Initial entries in display order
            uses_implicit_sequential_id: Entries have no explicit id column

        Raises:
            LabelExistsError: If ``entries`` contains a label twice
        """
        self._name = name
        self._uses_implicit_sequential_id = uses_implicit_sequential_id
        self._entries: dict[Label, Entry] = {}
        for entry in entries:
            if entry.label in self._entries:
                raise LabelExistsError(entry.label, name)
            self._entries[entry.label] = entry

    @property
    def name(self) -> CategoryName:
        """Category name."""
        return self._name

    @property
    def uses_implicit_sequential_id(self) -> bool:
        """Whether ids are implied by display order instead of stored."""
        return self._uses_implicit_sequential_id

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(tuple(self._entries.values()))

    def __contains__(self, label: object) -> bool:
        return label in self._entries

    def __repr__(self) -> str:
        return f"Category(name={self._name!r}, entries={len(self._entries)})"

    def get(self, label: Label) -> Entry | None:
        """Return the entry for ``label``, or None."""
        return self._entries.get(label)

    def pair_exists(self, label: Label) -> bool:
        """Check whether ``label`` is present.

        Callers probe with this before inserting so they can report a
        duplicate to the user instead of relying on add_row's rejection.
        """
        return label in self._entries

    def get_last_id(self) -> EntryId:
        """Return the maximum id across current entries, or 0 if empty.

        Call it after every insert of a batch; a value read once and reused
        for several adds produces id collisions.
        """
        return max((entry.id for entry in self._entries.values()), default=EMPTY_CATEGORY_LAST_ID)

    def entries_by_id(self) -> tuple[Entry, ...]:
        """Return entries in ascending id order (stable for equal ids)."""
        return tuple(sorted(self._entries.values(), key=lambda entry: entry.id))

    def add_row(self, entry_id: EntryId, label: Label, value: str) -> Entry:
        """Insert a new entry.

        Args:
            entry_id: Id for the new entry (ignored for implicit-id categories)
            label: Label, must not be present yet
            value: Localized text

        Returns:
            The inserted Entry

        Raises:
            LabelExistsError: If ``label`` is already present; nothing changes
        """
        if label in self._entries:
            raise LabelExistsError(label, self._name)
        if self._uses_implicit_sequential_id:
            entry_id = self.get_last_id() + 1
        entry = Entry(id=entry_id, label=label, value=value)
        self._entries[label] = entry
        logger.debug("Added entry %d '%s' to category '%s'", entry_id, label, self._name)
        return entry

    def edit_row(self, entry_id: EntryId, label: Label, value: str) -> Entry:
        """Upsert by label.

        An existing entry gets the new value and the id the caller passes,
        keeping its display position. An absent label is inserted.

        Args:
            entry_id: Id to store (ignored for implicit-id categories)
            label: Label to match
            value: New localized text

        Returns:
            The stored Entry
        """
        existing = self._entries.get(label)
        if existing is None:
            return self.add_row(entry_id, label, value)
        if self._uses_implicit_sequential_id:
            entry_id = existing.id
        entry = Entry(id=entry_id, label=label, value=value)
        self._entries[label] = entry
        logger.debug("Edited entry %d '%s' in category '%s'", entry_id, label, self._name)
        return entry

    def rename_row(
        self, old_label: Label, entry_id: EntryId, new_label: Label, value: str
    ) -> Entry:
        """Replace the entry ``old_label`` with ``(entry_id, new_label, value)``.

        Same label: behaves as edit_row. Different label: removes the old
        entry and appends the new one. An absent ``old_label`` simply adds.

        Raises:
            LabelExistsError: If ``new_label`` belongs to another entry; the
                category is left unchanged
        """
        if new_label == old_label:
            return self.edit_row(entry_id, new_label, value)
        if new_label in self._entries:
            raise LabelExistsError(new_label, self._name)
        self._entries.pop(old_label, None)
        return self.add_row(entry_id, new_label, value)

    def delete_row(self, label: Label) -> bool:
        """Remove the entry for ``label``.

        Returns:
            True if an entry was removed, False if the label was absent
        """
        removed = self._entries.pop(label, None)
        if removed is None:
            return False
        logger.debug("Deleted entry %d '%s' from category '%s'", removed.id, label, self._name)
        return True

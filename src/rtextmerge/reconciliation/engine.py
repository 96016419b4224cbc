"""Apply decoded records and single-row edits to one or more targets.

The engine is stateless: every call takes its targets explicitly and returns
a MergeReport. Each target is processed independently, so a failure in one
locale never prevents the remaining locales from being updated, and each
target allocates new ids from its own highest id.

Merge rules per record, per target:
    - Label present: the value is replaced and the existing id is kept.
    - Label absent: appended with id ``get_last_id() + 1``.
    - Entries not named by the batch are left untouched.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from rtextmerge.diagnostics import RTextError
from rtextmerge.interchange.records import RawEntry
from rtextmerge.reconciliation.results import (
    MergeReport,
    MergeTarget,
    TargetFailure,
    TargetResolution,
    TargetResult,
)
from rtextmerge.store.protocols import EntryStore, PageSource
from rtextmerge.store.types import CategoryName, EntryId, Label

__all__ = ["ReconciliationEngine", "resolve_targets"]

logger = logging.getLogger(__name__)

# Errors a store may raise for one record; anything else propagates.
_RECORD_ERRORS = (RTextError, ValueError)


def resolve_targets(stores: Iterable[PageSource], category_name: CategoryName) -> TargetResolution:
    """Find ``category_name`` in each store.

    Stores lacking the category are reported in ``missing`` instead of
    raising, so a broadcast still reaches every locale that has it.
    """
    targets: list[MergeTarget] = []
    missing: list[TargetFailure] = []
    for store in stores:
        category = store.get_pages().get(category_name)
        if category is None:
            logger.warning(
                "Category '%s' not found in locale %s", category_name, store.locale_code
            )
            missing.append(
                TargetFailure(
                    locale_code=store.locale_code,
                    category_name=category_name,
                    reason=f"Category '{category_name}' not found in locale {store.locale_code}",
                )
            )
            continue
        targets.append(MergeTarget(store=store, category=category))
    return TargetResolution(targets=tuple(targets), missing=tuple(missing))


@dataclass(slots=True)
class _Tally:
    """Mutable counters for one target while a batch is applied."""

    target: MergeTarget
    updated: int = 0
    added: int = 0
    removed: int = 0
    failures: list[TargetFailure] = field(default_factory=list)

    def fail(self, label: Label, error: Exception) -> None:
        logger.warning(
            "Failed to apply '%s' to locale %s: %s", label, self.target.locale_code, error
        )
        self.failures.append(
            TargetFailure(
                locale_code=self.target.locale_code,
                category_name=self.target.category_name,
                reason=str(error),
                label=label,
                error=error,
            )
        )

    def result(self) -> TargetResult:
        return TargetResult(
            locale_code=self.target.locale_code,
            category_name=self.target.category_name,
            updated=self.updated,
            added=self.added,
            removed=self.removed,
            failures=tuple(self.failures),
        )


class ReconciliationEngine:
    """Merge records into categories across locales.

    Example:
        >>> engine = ReconciliationEngine()
        >>> report = engine.merge(decode(data).records, resolution.targets)
        >>> report.summary()
        '3 records updated, 2 records added'
    """

    __slots__ = ()

    def merge(
        self,
        records: Iterable[RawEntry],
        targets: Iterable[MergeTarget],
        *,
        unresolved: Iterable[TargetFailure] = (),
    ) -> MergeReport:
        """Upsert every record into every target.

        The ``rec_no`` of a record is never used as an id: existing labels keep
        their id and new labels receive the next free id of their target.

        Args:
            records: Decoded records, applied in order
            targets: Categories to update
            unresolved: Failures from target resolution, carried into the report

        Returns:
            MergeReport with one TargetResult per target
        """
        batch = tuple(records)
        results: list[TargetResult] = []
        for target in targets:
            tally = _Tally(target)
            for record in batch:
                try:
                    self._upsert(target.category, record, tally)
                except _RECORD_ERRORS as e:
                    tally.fail(record.label, e)
            results.append(tally.result())

        report = MergeReport(results=tuple(results), unresolved=tuple(unresolved))
        logger.info("Merge completed: %s", report.summary())
        return report

    @staticmethod
    def _upsert(category: EntryStore, record: RawEntry, tally: _Tally) -> None:
        if category.pair_exists(record.label):
            existing = category.get(record.label)
            assert existing is not None  # Type narrowing: pair_exists() confirmed the label
            category.edit_row(existing.id, record.label, record.text)
            tally.updated += 1
        else:
            category.add_row(category.get_last_id() + 1, record.label, record.text)
            tally.added += 1

    def add_entry(
        self,
        targets: Iterable[MergeTarget],
        label: Label,
        value: str,
        entry_id: EntryId | None = None,
    ) -> MergeReport:
        """Add one new row to each target.

        Args:
            targets: Categories to update (one for a single locale, all for
                a broadcast)
            label: New label; a target that already has it reports a failure
            value: Row text
            entry_id: Explicit id, or None to use each target's next free id

        Returns:
            MergeReport counting one addition per successful target
        """
        results: list[TargetResult] = []
        for target in targets:
            tally = _Tally(target)
            category = target.category
            try:
                new_id = entry_id if entry_id is not None else category.get_last_id() + 1
                category.add_row(new_id, label, value)
                tally.added += 1
            except _RECORD_ERRORS as e:
                tally.fail(label, e)
            results.append(tally.result())
        return MergeReport(results=tuple(results))

    def edit_entry(
        self,
        targets: Iterable[MergeTarget],
        label: Label,
        value: str,
        *,
        new_label: Label | None = None,
        entry_id: EntryId | None = None,
    ) -> MergeReport:
        """Change one row in each target, optionally renaming it.

        A target lacking ``label`` gets the row added, matching the upsert
        behaviour of a merge.

        Args:
            targets: Categories to update
            label: Current label of the row
            value: New row text
            new_label: Replacement label, or None to keep ``label``
            entry_id: Id to store, or None to keep each target's existing id

        Returns:
            MergeReport counting updates and additions per target
        """
        target_label = new_label if new_label is not None else label
        results: list[TargetResult] = []
        for target in targets:
            tally = _Tally(target)
            category = target.category
            try:
                existing = category.get(label)
                if entry_id is not None:
                    new_id = entry_id
                elif existing is not None:
                    new_id = existing.id
                else:
                    new_id = category.get_last_id() + 1
                category.rename_row(label, new_id, target_label, value)
                if existing is not None:
                    tally.updated += 1
                else:
                    tally.added += 1
            except _RECORD_ERRORS as e:
                tally.fail(label, e)
            results.append(tally.result())
        return MergeReport(results=tuple(results))

    def delete_entry(self, targets: Iterable[MergeTarget], label: Label) -> MergeReport:
        """Remove ``label`` from each target; absent labels are not failures."""
        results: list[TargetResult] = []
        for target in targets:
            tally = _Tally(target)
            try:
                if target.category.delete_row(label):
                    tally.removed += 1
            except _RECORD_ERRORS as e:
                tally.fail(label, e)
            results.append(tally.result())
        return MergeReport(results=tuple(results))

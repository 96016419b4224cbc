"""Merge targets and per-target result records.

Components:
    MergeTarget - One (locale store, category) pair a merge writes into
    TargetFailure - Immutable record of one failed application to one target
    TargetResult - Immutable counts for one target
    TargetResolution - Targets found for a category plus locales lacking it
    MergeReport - Immutable aggregate of all target results

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass

from rtextmerge.diagnostics import Diagnostic, DiagnosticCode
from rtextmerge.store.protocols import EntryStore, PageSource
from rtextmerge.store.types import CategoryName, Label, LocaleCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "MergeTarget",
    "TargetResolution",
    "TargetFailure",
    "TargetResult",
    "MergeReport",
]


@dataclass(frozen=True, slots=True)
class MergeTarget:
    """One category of one locale store.

    Attributes:
        store: Locale store owning the category
        category: Category the records are applied to
    """

    store: PageSource
    category: EntryStore

    @property
    def locale_code(self) -> LocaleCode:
        """Locale code of the owning store."""
        return self.store.locale_code

    @property
    def category_name(self) -> CategoryName:
        """Name of the target category."""
        return self.category.name


@dataclass(frozen=True, slots=True)
class TargetFailure:
    """A merge step that failed for one target.

    Attributes:
        locale_code: Locale of the failing target
        category_name: Category of the failing target
        reason: Human-readable failure description
        label: Label being applied when the failure happened (None when the
            whole target could not be resolved)
        error: Underlying exception, if any
    """

    locale_code: LocaleCode
    category_name: CategoryName
    reason: str
    label: Label | None = None
    error: Exception | None = None

    @property
    def diagnostic(self) -> Diagnostic:
        """Structured form of this failure."""
        code = (
            DiagnosticCode.TARGET_CATEGORY_MISSING
            if self.label is None
            else DiagnosticCode.TARGET_APPLY_FAILED
        )
        return Diagnostic(
            code=code,
            message=self.reason,
            locale_code=self.locale_code,
            category_name=self.category_name,
            content=self.label,
        )


@dataclass(frozen=True, slots=True)
class TargetResult:
    """Outcome of applying one batch to one target.

    Attributes:
        locale_code: Locale of the target
        category_name: Category of the target
        updated: Existing labels whose value was replaced
        added: New labels inserted
        removed: Labels deleted (row deletion only; merges never remove)
        failures: Records that could not be applied
    """

    locale_code: LocaleCode
    category_name: CategoryName
    updated: int = 0
    added: int = 0
    removed: int = 0
    failures: tuple[TargetFailure, ...] = ()

    @property
    def is_success(self) -> bool:
        """Check if every record applied cleanly."""
        return not self.failures


@dataclass(frozen=True, slots=True)
class TargetResolution:
    """Targets resolved for one category name.

    Attributes:
        targets: Stores that hold the category, in project order
        missing: One failure per store lacking the category
    """

    targets: tuple[MergeTarget, ...]
    missing: tuple[TargetFailure, ...] = ()


@dataclass(frozen=True, slots=True)
class MergeReport:
    """Immutable aggregate of per-target results.

    Totals are simple sums across targets, for display only; a label added
    to three locales counts as three additions.

    Attributes:
        results: One TargetResult per attempted target
        unresolved: Targets that could not be attempted at all
    """

    results: tuple[TargetResult, ...]
    unresolved: tuple[TargetFailure, ...] = ()

    def __repr__(self) -> str:
        return (
            f"MergeReport(targets={self.target_count}, updated={self.updated}, "
            f"added={self.added}, removed={self.removed}, failures={len(self.failures)})"
        )

    @property
    def target_count(self) -> int:
        """Number of targets attempted."""
        return len(self.results)

    @property
    def updated(self) -> int:
        """Total updated entries across targets."""
        return sum(r.updated for r in self.results)

    @property
    def added(self) -> int:
        """Total added entries across targets."""
        return sum(r.added for r in self.results)

    @property
    def removed(self) -> int:
        """Total removed entries across targets."""
        return sum(r.removed for r in self.results)

    @property
    def failures(self) -> tuple[TargetFailure, ...]:
        """Unresolved targets followed by per-record failures."""
        collected = list(self.unresolved)
        for result in self.results:
            collected.extend(result.failures)
        return tuple(collected)

    @property
    def has_failures(self) -> bool:
        """Check if any target or record failed."""
        return bool(self.unresolved) or any(r.failures for r in self.results)

    def get_by_locale(self, locale_code: LocaleCode) -> TargetResult | None:
        """Get the result for one locale, if it was a target."""
        for result in self.results:
            if result.locale_code == locale_code:
                return result
        return None

    def summary(self) -> str:
        """One-line summary for status displays."""
        text = f"{self.updated} records updated, {self.added} records added"
        if self.removed:
            text += f", {self.removed} records removed"
        if self.target_count > 1:
            text = f"Applied to {self.target_count} locales: {text}"
        if self.has_failures:
            text += f" ({len(self.failures)} failures)"
        return text

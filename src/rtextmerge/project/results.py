"""Load and save result records for locale projects.

Components:
    LocaleLoadResult - Immutable result of reading one locale file
    LoadSummary - Immutable aggregate of all load results of an open call
    SavedLocale - One locale file written by a save
    SaveSummary - Immutable aggregate of a project save

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from rtextmerge.enums import LoadStatus
from rtextmerge.store.types import LocaleCode

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Loading
    "LocaleLoadResult",
    "LoadSummary",
    # Saving
    "SavedLocale",
    "SaveSummary",
]


@dataclass(frozen=True, slots=True)
class LocaleLoadResult:
    """Result of reading a single locale file.

    Attributes:
        locale_code: Locale code derived from the file or folder name
        status: Load status (success, error)
        path: Path of the locale file
        error: Exception if status is ERROR, None otherwise
    """

    locale_code: LocaleCode
    status: LoadStatus
    path: Path
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the locale file was read."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if reading the locale file failed."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of locale load results from opening a project.

    A locale file that could not be read is skipped by the project; it shows
    up here with LoadStatus.ERROR.

    Attributes:
        results: All individual load results, in name order

    Example:
        >>> summary = project.get_load_summary()
        >>> for result in summary.get_errors():
        ...     print(f"Skipped {result.path}: {result.error}")
    """

    results: tuple[LocaleLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"errors={self.errors})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of locale files found."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of locale files read."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def errors(self) -> int:
        """Number of locale files skipped because of an error."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def has_errors(self) -> bool:
        """Check if any locale file failed to load."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every locale file found was read."""
        return self.errors == 0

    def get_errors(self) -> tuple[LocaleLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_successful(self) -> tuple[LocaleLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    def get_by_locale(self, locale_code: LocaleCode) -> LocaleLoadResult | None:
        """Get the result for a specific locale."""
        for result in self.results:
            if result.locale_code == locale_code:
                return result
        return None


@dataclass(frozen=True, slots=True)
class SavedLocale:
    """One locale file written by a save.

    Attributes:
        locale_code: Locale that was written
        path: Destination file
    """

    locale_code: LocaleCode
    path: Path


@dataclass(frozen=True, slots=True)
class SaveSummary:
    """Immutable record of the files written by a project save.

    Attributes:
        saved: Written locale files, in project order
    """

    saved: tuple[SavedLocale, ...]

    @property
    def count(self) -> int:
        """Number of locale files written."""
        return len(self.saved)

    @property
    def paths(self) -> tuple[Path, ...]:
        """Destination paths, in project order."""
        return tuple(item.path for item in self.saved)

    def summary(self) -> str:
        """One-line summary for status displays."""
        if self.count == 1:
            return f"{self.saved[0].path} - saved successfully"
        return f"saved successfully {self.count} locales"

"""Enumerations for RTextMerge type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ProjectLayout(StrEnum):
    """On-disk layout of a folder-based project.

    Decided once when the folder is opened; a project never mixes layouts.
    """

    FLAT = "flat"
    """One file per locale directly in the folder: common/US.json"""

    PER_LOCALE_FOLDER = "per_locale_folder"
    """One subfolder per locale holding a fixed payload file: arcade/US/rtext.json"""


class LoadStatus(StrEnum):
    """Outcome of reading one locale file while opening a project."""

    SUCCESS = "success"
    ERROR = "error"


class ImportStatus(StrEnum):
    """Outcome of a file-level CSV import.

    Only SUCCESS implies that any store was mutated.
    """

    SUCCESS = "success"
    MALFORMED = "malformed"
    IO_ERROR = "io_error"
    NO_RECORDS = "no_records"
    CANCELLED = "cancelled"


class ExportStatus(StrEnum):
    """Outcome of a file-level CSV export."""

    SUCCESS = "success"
    ERROR = "error"


__all__ = [
    "ExportStatus",
    "ImportStatus",
    "LoadStatus",
    "ProjectLayout",
]

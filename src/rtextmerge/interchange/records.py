"""Interchange record types.

RawEntry is the transient unit produced by decoding and consumed by the
reconciliation engine; it is never persisted. DecodeResult pairs the
decoded records with the diagnostics of skipped lines.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from rtextmerge.diagnostics import Diagnostic

__all__ = ["DecodeResult", "RawEntry"]


@dataclass(frozen=True, slots=True)
class RawEntry:
    """One interchange row.

    Attributes:
        rec_no: RecNo column; mapped onto an entry id only for new labels
        label: Natural key of the target entry
        text: Localized text
    """

    rec_no: int
    label: str
    text: str


@dataclass(frozen=True, slots=True)
class DecodeResult:
    """Records decoded from one interchange file.

    Iterating a DecodeResult yields its records.

    Attributes:
        records: Successfully parsed records in file order
        diagnostics: One warning per skipped line
        warnings: File-level warnings that skipped nothing (replaced bytes)
    """

    records: tuple[RawEntry, ...]
    diagnostics: tuple[Diagnostic, ...] = ()
    warnings: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> Iterator[RawEntry]:
        return iter(self.records)

    def __repr__(self) -> str:
        return f"DecodeResult(records={len(self.records)}, skipped={self.skipped_count})"

    @property
    def skipped_count(self) -> int:
        """Number of data lines skipped during decoding."""
        return len(self.diagnostics)

    @property
    def has_skipped(self) -> bool:
        """Check if any data line was skipped."""
        return bool(self.diagnostics)

    @property
    def is_empty(self) -> bool:
        """Check if no valid record was found."""
        return not self.records

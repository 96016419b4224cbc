"""Confirmation preview shown before an import is applied.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from rtextmerge.constants import PREVIEW_ELLIPSIS, PREVIEW_RECORD_LIMIT, PREVIEW_TEXT_WIDTH
from rtextmerge.diagnostics import Diagnostic
from rtextmerge.interchange.records import RawEntry
from rtextmerge.store.types import CategoryName, LocaleCode

__all__ = ["ImportPreview", "build_preview", "truncate_text"]


def truncate_text(text: str, width: int = PREVIEW_TEXT_WIDTH) -> str:
    """Cut ``text`` to ``width`` characters, marking the cut with an ellipsis."""
    if len(text) <= width:
        return text
    return text[:width] + PREVIEW_ELLIPSIS


@dataclass(frozen=True, slots=True)
class ImportPreview:
    """What an import is about to do.

    Attributes:
        source_name: File name shown to the user
        category_name: Category the records go into
        record_count: Total records decoded
        sample: First records, at most PREVIEW_RECORD_LIMIT
        target_locales: Locales that will be updated
        skipped: Diagnostics for lines the decoder skipped
    """

    source_name: str
    category_name: CategoryName
    record_count: int
    sample: tuple[RawEntry, ...]
    target_locales: tuple[LocaleCode, ...] = ()
    skipped: tuple[Diagnostic, ...] = ()

    @property
    def remaining_count(self) -> int:
        """Records not shown in the sample."""
        return self.record_count - len(self.sample)

    def render(self) -> str:
        """Format the preview as the confirmation message text."""
        lines = [
            f"File: {self.source_name}",
            f"Category: {self.category_name}",
            f"Records found: {self.record_count}",
        ]
        if len(self.target_locales) > 1:
            lines.append(f"Locales: {', '.join(self.target_locales)}")
        if self.skipped:
            lines.append(f"Lines skipped: {len(self.skipped)}")
        lines.append("")
        lines.append("First records:")
        lines.extend(
            f"• {record.rec_no} | {record.label} | {truncate_text(record.text)}"
            for record in self.sample
        )
        if self.remaining_count > 0:
            lines.append(f"... and {self.remaining_count} more records.")
        lines.append("")
        lines.append("This operation will:")
        lines.append("• Replace existing texts with same Label")
        lines.append("• Add new records if Label doesn't exist")
        lines.append("• Keep existing records not in the file")
        return "\n".join(lines)


def build_preview(
    records: Iterable[RawEntry],
    category_name: CategoryName,
    source_name: str,
    *,
    target_locales: Iterable[LocaleCode] = (),
    skipped: Iterable[Diagnostic] = (),
    limit: int = PREVIEW_RECORD_LIMIT,
) -> ImportPreview:
    """Build the preview for a decoded batch.

    Example:
        >>> preview = build_preview(result.records, "MenuText", "menu.csv")
        >>> print(preview.render())
    """
    batch = tuple(records)
    return ImportPreview(
        source_name=source_name,
        category_name=category_name,
        record_count=len(batch),
        sample=batch[:limit],
        target_locales=tuple(target_locales),
        skipped=tuple(skipped),
    )

"""Encode raw entry records into the RecNo,Label,String interchange format.

Output is the fixed header followed by one ``\\n``-terminated row per record,
in caller order. Fields are quoted only when they must be, which keeps plain
rows identical to what spreadsheet tools write.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable

from rtextmerge.constants import EXPORT_HEADER, QUOTE, SEPARATOR
from rtextmerge.interchange.records import RawEntry
from rtextmerge.store.category import Category

__all__ = ["category_records", "encode", "encode_field", "sample_csv"]

_NEEDS_QUOTING = frozenset({SEPARATOR, QUOTE, "\n", "\r"})

_SAMPLE_RECORDS: tuple[RawEntry, ...] = (
    RawEntry(1, "the_exact_label_goes_here", "This is an example string for entry 1."),
    RawEntry(2, "another_label", "Text with a comma, or \"quotes\", must be quoted."),
)


def encode_field(value: str) -> str:
    """Escape one text field.

    Every quote is doubled; the field is wrapped in quotes if it contains a
    comma, a quote or a line break, or starts or ends with whitespace (the
    decoder strips unquoted fields).
    """
    escaped = value.replace(QUOTE, QUOTE * 2)
    if _NEEDS_QUOTING.isdisjoint(value) and value == value.strip():
        return escaped
    return f"{QUOTE}{escaped}{QUOTE}"


def encode(entries: Iterable[RawEntry]) -> str:
    """Serialize records to interchange text.

    Args:
        entries: Records in the order they should appear

    Returns:
        Header line plus one line per record, each terminated by ``\\n``

    Example:
        >>> encode([RawEntry(1, "a,b", 'say "hi" now')])
        'RecNo,Label,String\\n1,"a,b","say ""hi"" now"\\n'
    """
    lines = [EXPORT_HEADER]
    lines.extend(
        SEPARATOR.join((str(entry.rec_no), encode_field(entry.label), encode_field(entry.text)))
        for entry in entries
    )
    return "\n".join(lines) + "\n"


def category_records(category: Category) -> tuple[RawEntry, ...]:
    """Export view of a category: one record per entry, ascending id."""
    return tuple(
        RawEntry(rec_no=entry.id, label=entry.label, text=entry.value)
        for entry in category.entries_by_id()
    )


def sample_csv() -> str:
    """Return a template file in the correct interchange format."""
    return encode(_SAMPLE_RECORDS)

"""Quote-aware CSV record tokenizer.

Splits interchange text into records and fields with a small state machine:

- A field may be wrapped in double quotes. Inside quotes, commas and line
  breaks are literal and two consecutive quotes stand for one quote. An
  unescaped quote ends the quoted region; anything after it up to the next
  separator is kept literally.
- Outside quotes, a comma separates fields and ``\\n`` or ``\\r\\n`` ends the
  record. A lone ``\\r`` is literal.
- Blanks before an opening quote are dropped, so ``1, "a,b"`` reads the
  second field as ``a,b`` (spreadsheet exports pad after commas).
- Unquoted fields are stripped of surrounding whitespace and have doubled
  quotes collapsed to one.

The tokenizer never raises. A quoted field still open at end of input makes
its record's first physical line an unterminated CsvRow; tokenizing resumes
on the following line, so one stray quote costs one line.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from rtextmerge.constants import QUOTE, SEPARATOR

__all__ = ["CsvRow", "iter_rows"]

_DOUBLED_QUOTE = QUOTE * 2
_PAD_CHARS = frozenset(" \t")


class _State(Enum):
    FIELD_START = auto()
    UNQUOTED = auto()
    QUOTED = auto()
    QUOTE_IN_QUOTED = auto()


@dataclass(frozen=True, slots=True)
class CsvRow:
    """One tokenized record.

    Attributes:
        line: Physical line number where the record starts (1-indexed)
        fields: Field values with quoting resolved
        raw: Source text of the record, without its terminator
        unterminated: True if a quoted field was still open at end of input
    """

    line: int
    fields: tuple[str, ...]
    raw: str
    unterminated: bool = False

    @property
    def is_blank(self) -> bool:
        """Check if the record holds nothing but whitespace."""
        return not self.raw.strip()


def _finish_field(buffer: list[str], *, quoted: bool) -> str:
    value = "".join(buffer)
    if quoted:
        return value
    return value.replace(_DOUBLED_QUOTE, QUOTE).strip()


def iter_rows(text: str, *, first_line: int = 1) -> Iterator[CsvRow]:
    """Tokenize ``text`` into records.

    Args:
        text: Interchange text (without the header line)
        first_line: Physical line number of the first character of ``text``

    Yields:
        CsvRow per record, blank records included. A record whose quoted
        field never closes is yielded as its first physical line only, with
        ``unterminated=True`` and no fields.
    """
    remaining = text
    line = first_line
    while True:
        for row in _scan(remaining, line):
            if not row.unterminated:
                yield row
                continue
            head, newline, rest = row.raw.partition("\n")
            yield CsvRow(
                line=row.line, fields=(), raw=head.removesuffix("\r"), unterminated=True
            )
            break
        else:
            return
        if not newline:
            return
        remaining = rest
        line = row.line + 1


def _scan(text: str, first_line: int) -> Iterator[CsvRow]:
    """Tokenize until end of input or the first unterminated record."""
    state = _State.FIELD_START
    fields: list[str] = []
    buffer: list[str] = []
    quoted = False
    row_start = 0
    row_line = first_line
    line = first_line
    index = 0
    length = len(text)

    while index < length:
        char = text[index]

        if state is not _State.QUOTED and (
            char == "\n" or (char == "\r" and text.startswith("\n", index + 1))
        ):
            fields.append(_finish_field(buffer, quoted=quoted))
            yield CsvRow(line=row_line, fields=tuple(fields), raw=text[row_start:index])
            index += 1 if char == "\n" else 2
            line += 1
            state = _State.FIELD_START
            fields = []
            buffer = []
            quoted = False
            row_start = index
            row_line = line
            continue

        match state:
            case _State.FIELD_START:
                if char == QUOTE:
                    quoted = True
                    state = _State.QUOTED
                elif char == SEPARATOR:
                    fields.append("")
                else:
                    buffer.append(char)
                    state = _State.UNQUOTED
            case _State.UNQUOTED:
                if char == SEPARATOR:
                    fields.append(_finish_field(buffer, quoted=quoted))
                    buffer = []
                    quoted = False
                    state = _State.FIELD_START
                elif char == QUOTE and not quoted and _PAD_CHARS.issuperset(buffer):
                    buffer = []
                    quoted = True
                    state = _State.QUOTED
                else:
                    buffer.append(char)
            case _State.QUOTED:
                if char == QUOTE:
                    state = _State.QUOTE_IN_QUOTED
                else:
                    if char == "\n":
                        line += 1
                    buffer.append(char)
            case _State.QUOTE_IN_QUOTED:
                if char == QUOTE:
                    buffer.append(QUOTE)
                    state = _State.QUOTED
                elif char == SEPARATOR:
                    fields.append(_finish_field(buffer, quoted=True))
                    buffer = []
                    quoted = False
                    state = _State.FIELD_START
                else:
                    buffer.append(char)
                    state = _State.UNQUOTED
        index += 1

    if state is _State.QUOTED:
        fields.append("".join(buffer))
        yield CsvRow(
            line=row_line, fields=tuple(fields), raw=text[row_start:], unterminated=True
        )
    elif row_start < length:
        fields.append(_finish_field(buffer, quoted=quoted))
        yield CsvRow(line=row_line, fields=tuple(fields), raw=text[row_start:])

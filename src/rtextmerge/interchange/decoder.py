"""Decode the RecNo,Label,String interchange format.

Decoding has exactly two fatal conditions, both raised as MalformedFileError
before any record is produced: fewer than two lines, and a header missing one
of the required tokens. Bad data lines are skipped with a warning Diagnostic
and decoding continues.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re

from rtextmerge.constants import HEADER_TOKENS, MIN_CSV_LINES
from rtextmerge.diagnostics import Diagnostic, DiagnosticCode, MalformedFileError
from rtextmerge.interchange.records import DecodeResult, RawEntry
from rtextmerge.interchange.tokenizer import CsvRow, iter_rows

__all__ = ["coerce_source", "decode", "physical_lines"]

logger = logging.getLogger(__name__)

# Optional sign and ASCII digits, surrounding blanks allowed.
_REC_NO_PATTERN = re.compile(r"[ \t]*[+-]?[0-9]+[ \t]*")

_FIELD_COUNT = 3


def coerce_source(source: bytes | str) -> tuple[str, tuple[Diagnostic, ...]]:
    """Return interchange text, decoding bytes as UTF-8 (BOM tolerated).

    Byte sequences that are not valid UTF-8 become U+FFFD; decoding goes on
    and a single ENCODING_REPLACED warning names the first affected line.

    Returns:
        Tuple of (text, warnings)
    """
    if isinstance(source, str):
        return source.removeprefix("\ufeff"), ()
    try:
        return source.decode("utf-8-sig"), ()
    except UnicodeDecodeError as e:
        line = source.count(b"\n", 0, e.start) + 1
        logger.warning("Line %d: bytes are not valid UTF-8, replaced with U+FFFD", line)
        diagnostic = Diagnostic(
            code=DiagnosticCode.ENCODING_REPLACED,
            message="File is not valid UTF-8; undecodable bytes were replaced",
            line=line,
            hint="Save the CSV file with UTF-8 encoding",
            severity="warning",
        )
        return source.decode("utf-8-sig", errors="replace"), (diagnostic,)


def physical_lines(text: str) -> list[str]:
    """Split ``text`` into lines; a trailing line break does not add a line."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _validate_header(header: str) -> None:
    lowered = header.lower()
    missing = [token for token in HEADER_TOKENS if token not in lowered]
    if missing:
        diagnostic = Diagnostic(
            code=DiagnosticCode.MALFORMED_HEADER,
            message=f"Header must contain RecNo, Label and String columns; found '{header}'",
            line=1,
            content=header,
            hint="Start the file with the line: RecNo,Label,String",
        )
        raise MalformedFileError(diagnostic)


def _skip(row: CsvRow, code: DiagnosticCode, message: str) -> Diagnostic:
    logger.warning("Line %d: %s, ignoring line", row.line, message)
    return Diagnostic(
        code=code,
        message=f"{message}, line skipped",
        line=row.line,
        content=row.raw,
        severity="warning",
    )


def _parse_row(row: CsvRow) -> RawEntry | Diagnostic:
    if row.unterminated:
        return _skip(row, DiagnosticCode.LINE_UNTERMINATED_QUOTE, "Quoted field is never closed")
    if len(row.fields) < _FIELD_COUNT:
        return _skip(
            row,
            DiagnosticCode.LINE_TOO_FEW_FIELDS,
            f"Expected {_FIELD_COUNT} fields, found {len(row.fields)}",
        )
    rec_no_text, label, text = row.fields[:_FIELD_COUNT]
    if not _REC_NO_PATTERN.fullmatch(rec_no_text):
        return _skip(row, DiagnosticCode.LINE_INVALID_RECNO, f"Invalid RecNo '{rec_no_text}'")
    return RawEntry(rec_no=int(rec_no_text), label=label, text=text)


def decode(source: bytes | str) -> DecodeResult:
    """Decode interchange content into raw entry records.

    Args:
        source: File content as bytes (UTF-8) or text

    Returns:
        DecodeResult with the parsed records, one diagnostic per skipped line
        and an ENCODING_REPLACED warning if undecodable bytes were replaced

    Raises:
        MalformedFileError: If the file has fewer than two lines or the header
            lacks one of the tokens recno, label, string (case-insensitive)

    Example:
        >>> result = decode(b'RecNo,Label,String\\n1,hello,World\\n')
        >>> result.records
        (RawEntry(rec_no=1, label='hello', text='World'),)
    """
    text, warnings = coerce_source(source)
    lines = physical_lines(text)
    if len(lines) < MIN_CSV_LINES:
        diagnostic = Diagnostic(
            code=DiagnosticCode.MALFORMED_TOO_FEW_LINES,
            message="The file must contain at least one header line and one data line",
        )
        raise MalformedFileError(diagnostic)
    _validate_header(lines[0])

    _, _, body = text.partition("\n")
    records: list[RawEntry] = []
    diagnostics: list[Diagnostic] = []
    for row in iter_rows(body, first_line=2):
        if row.is_blank:
            continue
        match _parse_row(row):
            case RawEntry() as record:
                records.append(record)
            case Diagnostic() as diagnostic:
                diagnostics.append(diagnostic)

    logger.debug("Decoded %d records, skipped %d lines", len(records), len(diagnostics))
    return DecodeResult(
        records=tuple(records), diagnostics=tuple(diagnostics), warnings=warnings
    )

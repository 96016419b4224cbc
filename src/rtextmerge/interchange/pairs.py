"""Legacy two-column ``key,value`` quick-import format.

No header and no quoting: each non-empty line is split on commas and must
yield exactly two parts. The first occurrence of a key wins. Records carry
the physical line number as ``rec_no``; the reconciliation engine ignores it
for labels that already exist.

Python 3.13+.
"""

from __future__ import annotations

import logging

from rtextmerge.constants import SEPARATOR
from rtextmerge.diagnostics import Diagnostic, DiagnosticCode
from rtextmerge.interchange.decoder import coerce_source, physical_lines
from rtextmerge.interchange.records import DecodeResult, RawEntry

__all__ = ["decode_pairs"]

logger = logging.getLogger(__name__)


def decode_pairs(source: bytes | str) -> DecodeResult:
    """Decode ``key,value`` lines.

    Args:
        source: File content as bytes (UTF-8) or text

    Returns:
        DecodeResult; lines without exactly two parts and repeated keys are
        reported as warnings
    """
    text, warnings = coerce_source(source)
    records: list[RawEntry] = []
    diagnostics: list[Diagnostic] = []
    seen: set[str] = set()

    for line_no, line in enumerate(physical_lines(text), start=1):
        if not line:
            continue
        parts = line.split(SEPARATOR)
        if len(parts) != 2:
            logger.warning("Line %d: expected key,value, found %d parts", line_no, len(parts))
            diagnostics.append(
                Diagnostic(
                    code=DiagnosticCode.PAIR_FIELD_COUNT,
                    message=f"Expected 'key,value', found {len(parts)} parts, line skipped",
                    line=line_no,
                    content=line,
                    severity="warning",
                )
            )
            continue
        key, value = parts
        if key in seen:
            diagnostics.append(
                Diagnostic(
                    code=DiagnosticCode.PAIR_DUPLICATE_KEY,
                    message=f"Key '{key}' already defined earlier in the file, line skipped",
                    line=line_no,
                    content=line,
                    severity="warning",
                )
            )
            continue
        seen.add(key)
        records.append(RawEntry(rec_no=line_no, label=key, text=value))

    return DecodeResult(
        records=tuple(records), diagnostics=tuple(diagnostics), warnings=warnings
    )

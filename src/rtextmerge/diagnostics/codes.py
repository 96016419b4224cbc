"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages shared by the interchange codec,
the entry stores and the reconciliation engine.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Malformed interchange files (fatal to one decode call)
        2000-2999: Decode warnings (skipped lines, replaced bytes; decode continues)
        3000-3999: Entry store errors (label and category lookups)
        4000-4999: Reconciliation errors (per-target merge failures)
        5000-5999: File I/O errors
    """

    # Malformed files (1000-1999)
    MALFORMED_TOO_FEW_LINES = 1001
    MALFORMED_HEADER = 1002

    # Decode warnings (2000-2999)
    LINE_TOO_FEW_FIELDS = 2001
    LINE_INVALID_RECNO = 2002
    LINE_UNTERMINATED_QUOTE = 2003
    PAIR_FIELD_COUNT = 2004
    PAIR_DUPLICATE_KEY = 2005
    ENCODING_REPLACED = 2006

    # Entry store (3000-3999)
    LABEL_EXISTS = 3001
    CATEGORY_NOT_FOUND = 3002
    STORE_FORMAT_INVALID = 3003

    # Reconciliation (4000-4999)
    TARGET_APPLY_FAILED = 4001
    TARGET_CATEGORY_MISSING = 4002

    # File I/O (5000-5999)
    IO_FAILURE = 5001
    FILE_NOT_FOUND = 5002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        line: Physical line number in the source file (1-indexed, optional)
        content: Offending source text, if any
        hint: Suggestion for fixing the problem
        locale_code: Locale the problem was observed in (merge and store errors)
        category_name: Category the problem was observed in
        path: File the problem was observed in (I/O errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    line: int | None = None
    content: str | None = None
    hint: str | None = None
    locale_code: str | None = None
    category_name: str | None = None
    path: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            warning[LINE_INVALID_RECNO]: Invalid RecNo 'abc', line skipped
              --> line 4
              = content: 'abc,hello,World'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)

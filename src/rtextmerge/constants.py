"""Shared constants for RTextMerge.

This module provides centralized format and limit constants used across
the interchange, store and project packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- CSV interchange: Header tokens, export header, quoting characters
- Input limits: DoS prevention via size constraints
- Project layout: Payload file naming for per-locale folders
- Import preview: Truncation limits for confirmation summaries

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # CSV interchange
    "HEADER_TOKENS",
    "EXPORT_HEADER",
    "QUOTE",
    "SEPARATOR",
    "MIN_CSV_LINES",
    "SAMPLE_CSV_NAME",
    # Entry ids
    "EMPTY_CATEGORY_LAST_ID",
    # Project layout
    "DEFAULT_PAYLOAD_NAME",
    "DEFAULT_DISPLAY_LOCALE",
    # Import preview
    "PREVIEW_RECORD_LIMIT",
    "PREVIEW_TEXT_WIDTH",
    "PREVIEW_ELLIPSIS",
]

# ============================================================================
# CSV INTERCHANGE
# ============================================================================

# Lowercase substrings that must all appear somewhere in the header line.
# Column order is not enforced: "Label,RecNo,String" is accepted.
HEADER_TOKENS: tuple[str, ...] = ("recno", "label", "string")

# Fixed literal written as the first line of every export.
EXPORT_HEADER: str = "RecNo,Label,String"

QUOTE: str = '"'
SEPARATOR: str = ","

# Header line plus at least one data line.
MIN_CSV_LINES: int = 2

# File name used when a sample file is written into a folder.
SAMPLE_CSV_NAME: str = "sample_import.csv"

# ============================================================================
# ENTRY IDS
# ============================================================================

# get_last_id() of an empty category; the first allocated id is this + 1.
EMPTY_CATEGORY_LAST_ID: int = 0

# ============================================================================
# PROJECT LAYOUT
# ============================================================================

# Stem of the payload file inside each per-locale folder (e.g. US/rtext.json).
DEFAULT_PAYLOAD_NAME: str = "rtext"

# Language used to render locale display names.
DEFAULT_DISPLAY_LOCALE: str = "en"

# ============================================================================
# IMPORT PREVIEW
# ============================================================================

PREVIEW_RECORD_LIMIT: int = 5
PREVIEW_TEXT_WIDTH: int = 50
PREVIEW_ELLIPSIS: str = "..."

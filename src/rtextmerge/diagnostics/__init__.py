"""Diagnostic system for RTextMerge errors.

Provides structured diagnostics with codes, line locations and hints, and the
exception hierarchy raised by the codec, stores and project loader.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CategoryNotFoundError,
    LabelExistsError,
    MalformedFileError,
    RTextError,
    StoreFormatError,
    StoreIOError,
)
from .formatter import DiagnosticFormatter, OutputFormat

__all__ = [
    "CategoryNotFoundError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "LabelExistsError",
    "MalformedFileError",
    "OutputFormat",
    "RTextError",
    "StoreFormatError",
    "StoreIOError",
]

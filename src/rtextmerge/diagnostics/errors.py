"""RTextMerge exception hierarchy with structured diagnostics.

All exceptions optionally carry a Diagnostic object for rich error information.
Non-fatal problems (skipped CSV lines, per-target merge failures) are not
raised; they are reported as Diagnostic values or TargetFailure records.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from pathlib import Path

from .codes import Diagnostic, DiagnosticCode


class RTextError(Exception):
    """Base exception for all RTextMerge errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize RTextError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def code(self) -> DiagnosticCode | None:
        """Diagnostic code, when the error was raised with a Diagnostic."""
        return self.diagnostic.code if self.diagnostic is not None else None


class MalformedFileError(RTextError):
    """Interchange file is structurally invalid.

    Raised when the file has fewer than two lines or the header lacks one of
    the required tokens. Aborts the whole decode; no records are returned.
    """


class LabelExistsError(RTextError):
    """An insert targeted a label already present in the category.

    The add is rejected and the category is unchanged. Callers decide whether
    to surface this or switch to update semantics.

    Attributes:
        label: The conflicting label
        category_name: Category that already holds the label
    """

    def __init__(self, label: str, category_name: str) -> None:
        """Initialize LabelExistsError.

        Args:
            label: The conflicting label
            category_name: Category that already holds the label
        """
        diagnostic = Diagnostic(
            code=DiagnosticCode.LABEL_EXISTS,
            message=f"Label '{label}' already exists in category '{category_name}'",
            category_name=category_name,
            hint="Edit the existing entry instead of adding a new one",
        )
        super().__init__(diagnostic)
        self.label = label
        self.category_name = category_name


class CategoryNotFoundError(RTextError, KeyError):
    """A category name is not present in a locale store.

    Subclasses KeyError so mapping-style callers can catch it generically.
    """

    def __init__(self, category_name: str, locale_code: str) -> None:
        """Initialize CategoryNotFoundError.

        Args:
            category_name: Requested category
            locale_code: Locale whose store lacks the category
        """
        diagnostic = Diagnostic(
            code=DiagnosticCode.CATEGORY_NOT_FOUND,
            message=f"Category '{category_name}' not found in locale '{locale_code}'",
            locale_code=locale_code,
            category_name=category_name,
        )
        super().__init__(diagnostic)
        self.category_name = category_name
        self.locale_code = locale_code

    def __str__(self) -> str:
        """Return the message without KeyError's repr quoting."""
        return self.args[0]


class StoreFormatError(RTextError):
    """A locale file could be read but its content is not a valid store."""


class StoreIOError(RTextError):
    """File read or write failed.

    Surfaced as the terminal failure of the operation; in-memory stores are
    not mutated by the failing call.

    Attributes:
        path: File the operation was working on
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize StoreIOError.

        Args:
            message: Error message string OR Diagnostic object
            path: File the operation was working on
        """
        super().__init__(message)
        self.path = path

    @classmethod
    def from_os_error(cls, error: OSError, path: str | Path, action: str) -> StoreIOError:
        """Wrap an OSError raised while ``action`` was performed on ``path``.

        FileNotFoundError maps to FILE_NOT_FOUND; every other OSError to
        IO_FAILURE.
        """
        code = (
            DiagnosticCode.FILE_NOT_FOUND
            if isinstance(error, FileNotFoundError)
            else DiagnosticCode.IO_FAILURE
        )
        reason = error.strerror or str(error)
        diagnostic = Diagnostic(
            code=code,
            message=f"Failed to {action} '{path}': {reason}",
            path=str(path),
        )
        return cls(diagnostic, path=str(path))

"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Compiler-style multi-line output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent leaking whole translations into logs
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        LINE_INVALID_RECNO: Invalid RecNo 'abc', line skipped
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        parts = [f"{diagnostic.severity}[{diagnostic.code.name}]: {diagnostic.message}"]

        location = self._location(diagnostic)
        if location:
            parts.append(f"  --> {location}")

        if diagnostic.locale_code:
            parts.append(f"  = locale: {diagnostic.locale_code}")

        if diagnostic.category_name:
            parts.append(f"  = category: {diagnostic.category_name}")

        if diagnostic.content is not None:
            content = self._maybe_sanitize(diagnostic.content)
            parts.append(f"  = content: {content!r}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        message = self._maybe_sanitize(diagnostic.message)
        if diagnostic.line is not None:
            return f"{diagnostic.code.name} (line {diagnostic.line}): {message}"
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.line is not None:
            data["line"] = diagnostic.line

        if diagnostic.path:
            data["path"] = diagnostic.path

        if diagnostic.locale_code:
            data["locale_code"] = diagnostic.locale_code

        if diagnostic.category_name:
            data["category_name"] = diagnostic.category_name

        if diagnostic.content is not None:
            data["content"] = self._maybe_sanitize(diagnostic.content)

        if diagnostic.hint:
            data["hint"] = diagnostic.hint

        return json.dumps(data, ensure_ascii=False)

    @staticmethod
    def _location(diagnostic: Diagnostic) -> str:
        if diagnostic.path and diagnostic.line is not None:
            return f"{diagnostic.path}:{diagnostic.line}"
        if diagnostic.path:
            return diagnostic.path
        if diagnostic.line is not None:
            return f"line {diagnostic.line}"
        return ""

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text

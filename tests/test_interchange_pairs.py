"""Tests for interchange/pairs.py: the legacy key,value format.

Python 3.13+.
"""

from __future__ import annotations

import pytest

from rtextmerge.diagnostics import DiagnosticCode, MalformedFileError
from rtextmerge.interchange import RawEntry, decode_pairs


class TestDecodePairs:
    """Headerless two-column lines."""

    def test_pairs_decoded_with_line_numbers(self) -> None:
        """Each valid line becomes a record numbered by its line."""
        result = decode_pairs("start,Start\r\nquit,Quit\n")
        assert result.records == (RawEntry(1, "start", "Start"), RawEntry(2, "quit", "Quit"))

    def test_wrong_part_count_skipped(self) -> None:
        """Lines without exactly one comma are reported and skipped."""
        result = decode_pairs("ok,Fine\nnocomma\na,b,c\n")
        assert result.records == (RawEntry(1, "ok", "Fine"),)
        assert [(d.code, d.line) for d in result.diagnostics] == [
            (DiagnosticCode.PAIR_FIELD_COUNT, 2),
            (DiagnosticCode.PAIR_FIELD_COUNT, 3),
        ]

    def test_first_key_wins(self) -> None:
        """A repeated key keeps the first value."""
        result = decode_pairs("k,first\nk,second\n")
        assert result.records == (RawEntry(1, "k", "first"),)
        assert result.diagnostics[0].code is DiagnosticCode.PAIR_DUPLICATE_KEY

    def test_empty_lines_ignored(self) -> None:
        """Empty lines are neither records nor diagnostics."""
        result = decode_pairs("\na,A\n\n")
        assert result.records == (RawEntry(2, "a", "A"),)
        assert not result.has_skipped

    def test_no_quoting(self) -> None:
        """Quotes are kept literally."""
        result = decode_pairs('"a","b"\n')
        assert result.records == (RawEntry(1, '"a"', '"b"'),)

    def test_empty_source(self) -> None:
        """Empty input gives an empty result."""
        assert decode_pairs(b"").is_empty

    def test_invalid_utf8(self) -> None:
        """Undecodable bytes raise MalformedFileError."""
        with pytest.raises(MalformedFileError):
            decode_pairs(b"a,\xfe\n")

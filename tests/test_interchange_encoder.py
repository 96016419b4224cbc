"""Tests for interchange/encoder.py and the decode/encode round trip.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, example, given

from rtextmerge.interchange import (
    RawEntry,
    category_records,
    decode,
    encode,
    encode_field,
    sample_csv,
)
from rtextmerge.store import Category
from tests.helpers.stores import make_category
from tests.strategies.interchange import raw_entry_batches
from tests.strategies.store import categories


class TestEncodeField:
    """Minimal quoting of single fields."""

    def test_plain_field_unquoted(self) -> None:
        """Fields without special characters are written as-is."""
        assert encode_field("hello world") == "hello world"

    def test_separator_forces_quotes(self) -> None:
        """A comma wraps the field in quotes."""
        assert encode_field("a,b") == '"a,b"'

    def test_quotes_doubled(self) -> None:
        """Embedded quotes are doubled inside a quoted field."""
        assert encode_field('He said "hi"') == '"He said ""hi"""'

    def test_line_breaks_force_quotes(self) -> None:
        """LF and CR both require quoting."""
        assert encode_field("a\nb") == '"a\nb"'
        assert encode_field("a\rb") == '"a\rb"'

    def test_empty_field(self) -> None:
        """Empty text stays empty."""
        assert encode_field("") == ""

    @pytest.mark.parametrize("value", [" lead", "trail\t", "   ", " both "])
    def test_edge_whitespace_forces_quotes(self, value: str) -> None:
        """Leading or trailing whitespace is quoted so decoding keeps it."""
        assert encode_field(value) == f'"{value}"'
        assert decode(encode([RawEntry(1, value, value)])).records == (
            RawEntry(1, value, value),
        )

    def test_inner_whitespace_unquoted(self) -> None:
        """Blanks between words need no quoting."""
        assert encode_field("a  b") == "a  b"


class TestEncode:
    """Whole-file encoding."""

    def test_header_and_rows(self) -> None:
        """Output is the fixed header plus one LF-terminated row per record."""
        text = encode([RawEntry(1, "a,b", 'He said "hi"'), RawEntry(2, "plain", "Text")])
        assert text == 'RecNo,Label,String\n1,"a,b","He said ""hi"""\n2,plain,Text\n'

    def test_no_records(self) -> None:
        """An empty batch still writes the header."""
        assert encode([]) == "RecNo,Label,String\n"

    def test_category_records_ordered_by_id(self) -> None:
        """Export view sorts by id regardless of display order."""
        page = make_category("Page", [(3, "c", "C"), (1, "a", "A"), (2, "b", "B")])
        assert category_records(page) == (
            RawEntry(1, "a", "A"),
            RawEntry(2, "b", "B"),
            RawEntry(3, "c", "C"),
        )

    def test_sample_csv_decodes(self) -> None:
        """The sample template is accepted by the decoder."""
        result = decode(sample_csv())
        assert len(result.records) == 2
        assert not result.has_skipped
        assert [record.rec_no for record in result] == [1, 2]


class TestRoundTrip:
    """decode(encode(records)) reproduces the records."""

    @given(batch=raw_entry_batches())
    @example(batch=[RawEntry(1, "a,b", 'He said "hi"')])
    @example(batch=[RawEntry(1, "", "")])
    @example(batch=[RawEntry(2, '"quoted"', "line one\r\nline two")])
    @example(batch=[RawEntry(-3, "  padded ", "trailing\r")])
    def test_round_trip(self, batch: list[RawEntry]) -> None:
        """PROPERTY: records survive encoding and decoding unchanged, in order."""
        result = decode(encode(batch))
        assert result.records == tuple(batch)
        assert not result.has_skipped
        event(f"records={min(len(batch), 10)}")

    @given(page=categories(min_size=1))
    def test_category_export_round_trip(self, page: Category) -> None:
        """PROPERTY: exported categories decode to (id, label, value) in id order."""
        result = decode(encode(category_records(page)))
        expected = [(entry.id, entry.label, entry.value) for entry in page.entries_by_id()]
        assert [(r.rec_no, r.label, r.text) for r in result] == expected

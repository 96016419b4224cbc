"""Tests for reconciliation/preview.py: the import confirmation text.

Python 3.13+.
"""

from __future__ import annotations

from rtextmerge.diagnostics import Diagnostic, DiagnosticCode
from rtextmerge.interchange import RawEntry
from rtextmerge.reconciliation import build_preview, truncate_text


class TestTruncateText:
    """Preview truncation at 50 characters."""

    def test_short_text_unchanged(self) -> None:
        """Text up to the width is kept whole."""
        assert truncate_text("x" * 50) == "x" * 50

    def test_long_text_cut(self) -> None:
        """Longer text is cut and marked."""
        assert truncate_text("y" * 51) == "y" * 50 + "..."


class TestBuildPreview:
    """Sample selection and rendering."""

    def test_sample_limited_to_five(self) -> None:
        """Only the first five records are shown; the rest are counted."""
        records = [RawEntry(i, f"label{i}", f"text {i}") for i in range(1, 9)]
        preview = build_preview(records, "MenuText", "menu.csv")
        assert preview.record_count == 8
        assert [record.rec_no for record in preview.sample] == [1, 2, 3, 4, 5]
        assert preview.remaining_count == 3
        assert "... and 3 more records." in preview.render()

    def test_render_lines(self) -> None:
        """Rendered text names the file, category and merge behaviour."""
        preview = build_preview(
            [RawEntry(1, "start", "S" * 60)],
            "MenuText",
            "menu.csv",
            target_locales=("US", "FR"),
            skipped=(Diagnostic(DiagnosticCode.LINE_TOO_FEW_FIELDS, "bad", line=3),),
        )
        lines = preview.render().splitlines()
        assert lines[:5] == [
            "File: menu.csv",
            "Category: MenuText",
            "Records found: 1",
            "Locales: US, FR",
            "Lines skipped: 1",
        ]
        assert f"• 1 | start | {'S' * 50}..." in lines
        assert "• Keep existing records not in the file" in lines
        assert not any(line.startswith("...") for line in lines)

    def test_single_locale_not_listed(self) -> None:
        """The locale line appears only for broadcasts."""
        preview = build_preview([RawEntry(1, "a", "A")], "Page", "a.csv", target_locales=("US",))
        assert not any(line.startswith("Locales:") for line in preview.render().splitlines())

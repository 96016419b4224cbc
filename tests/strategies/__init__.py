"""Hypothesis strategies for RTextMerge property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules. Strategies are organized by domain:

- interchange: Labels, texts and RawEntry batches for the CSV codec
- store: Entries and categories for the entry store and merge engine

Usage:
    from tests.strategies import raw_entry_batches, categories
    from tests.strategies.interchange import field_texts

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - field_texts, raw_entry_batches, categories
"""

from .interchange import (
    field_texts,
    plain_labels,
    raw_entries,
    raw_entry_batches,
    rec_numbers,
)
from .store import categories, entry_labels, entry_values

__all__ = [
    "categories",
    "entry_labels",
    "entry_values",
    "field_texts",
    "plain_labels",
    "raw_entries",
    "raw_entry_batches",
    "rec_numbers",
]

"""Hypothesis strategies for entry stores.

Event-Emitting Strategies (HypoFuzz-Optimized):
- categories: Emits category_size=empty|small|large and id_layout=dense|sparse

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st

from rtextmerge.store import Category, Entry

if TYPE_CHECKING:
    from hypothesis.strategies import DrawFn

entry_labels = st.from_regex(r"[a-z][a-z0-9_]{0,15}", fullmatch=True)
entry_values = st.text(max_size=40)


@st.composite
def categories(
    draw: DrawFn,
    name: str = "Page",
    min_size: int = 0,
    max_size: int = 15,
) -> Category:
    """Generate a populated explicit-id category.

    Ids are either dense (1..n) or sparse with gaps, never repeated, and
    entries are shuffled so display order differs from id order.

    Events emitted:
    - category_size={empty|small|large}
    - id_layout={dense|sparse}
    """
    labels = draw(st.lists(entry_labels, min_size=min_size, max_size=max_size, unique=True))
    sparse = draw(st.booleans())
    if sparse:
        ids = draw(
            st.lists(
                st.integers(min_value=1, max_value=10_000),
                min_size=len(labels),
                max_size=len(labels),
                unique=True,
            )
        )
    else:
        ids = list(range(1, len(labels) + 1))
    entries = [
        Entry(id=entry_id, label=label, value=draw(entry_values))
        for entry_id, label in zip(ids, labels, strict=True)
    ]
    entries = draw(st.permutations(entries))

    size_class = "empty" if not entries else "small" if len(entries) <= 5 else "large"
    event(f"category_size={size_class}")
    event(f"id_layout={'sparse' if sparse else 'dense'}")
    return Category(name, entries)

"""Type aliases for the entry-store domain.

Provides semantic type aliases used throughout the store, interchange and
reconciliation packages and by user code annotating call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "CategoryName",
    "EntryId",
    "Label",
    "LocaleCode",
]

type EntryId = int
"""Locale-local stable sequence number of an entry (e.g., 1, 42)."""

type Label = str
"""Natural key of an entry, shared across locales (e.g., 'menu_start')."""

type CategoryName = str
"""Name of a category (page) within a locale store (e.g., 'MenuText')."""

type LocaleCode = str
"""Short locale code from the locale table (e.g., 'US', 'FR', 'JP')."""

"""Entry store package.

Provides the in-memory entry model and the locale-file codec contract.

Submodules:
    types        - PEP 695 type aliases (EntryId, Label, CategoryName, LocaleCode)
    category     - Entry, Category (per-page keyed entry collection)
    locale_store - LocaleStore (all categories of one locale)
    protocols    - EntryStore, PageSource, StoreCodec protocols
    codec        - JsonStoreCodec (concrete StoreCodec)

Python 3.13+.
"""

from rtextmerge.store.category import Category, Entry
from rtextmerge.store.codec import JsonStoreCodec
from rtextmerge.store.locale_store import LocaleStore
from rtextmerge.store.protocols import EntryStore, PageSource, StoreCodec
from rtextmerge.store.types import CategoryName, EntryId, Label, LocaleCode

__all__ = [
    "Category",
    "CategoryName",
    "Entry",
    "EntryId",
    "EntryStore",
    "JsonStoreCodec",
    "Label",
    "LocaleCode",
    "LocaleStore",
    "PageSource",
    "StoreCodec",
]

"""LocaleStore: all categories of one locale file.

A LocaleStore is created when a locale file is read (populated by a
StoreCodec) and lives until the owning project is replaced. Categories of
different LocaleStores never share state.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from rtextmerge.diagnostics import (
    CategoryNotFoundError,
    Diagnostic,
    DiagnosticCode,
    StoreIOError,
)
from rtextmerge.store.category import Category
from rtextmerge.store.types import CategoryName, LocaleCode

if TYPE_CHECKING:
    from rtextmerge.store.protocols import StoreCodec

__all__ = ["LocaleStore"]

logger = logging.getLogger(__name__)


class LocaleStore:
    """Keyed categories of one locale.

    Implements the PageSource protocol. Saving delegates to the codec that
    read the store (or the one supplied at construction).

    Attributes:
        locale_code: Locale code from the locale table (e.g., 'US')
        uses_implicit_sequential_id: Format variant flag, decided at read time
    """

    __slots__ = ("_categories", "_codec", "_locale_code", "_uses_implicit_sequential_id")

    def __init__(
        self,
        locale_code: LocaleCode,
        categories: Iterable[Category] = (),
        *,
        codec: StoreCodec | None = None,
        uses_implicit_sequential_id: bool = False,
    ) -> None:
        """Initialize a locale store.

        Args:
            locale_code: Locale code
            categories: Initial categories
            codec: Codec used by save()
            uses_implicit_sequential_id: Format variant without explicit ids

        Raises:
            ValueError: If two categories share a name
        """
        self._locale_code = locale_code
        self._codec = codec
        self._uses_implicit_sequential_id = uses_implicit_sequential_id
        self._categories: dict[CategoryName, Category] = {}
        for category in categories:
            if category.name in self._categories:
                msg = f"Duplicate category '{category.name}' in locale '{locale_code}'"
                raise ValueError(msg)
            self._categories[category.name] = category

    @property
    def locale_code(self) -> LocaleCode:
        """Locale code of this store."""
        return self._locale_code

    @property
    def uses_implicit_sequential_id(self) -> bool:
        """Whether entries of this store carry no explicit id."""
        return self._uses_implicit_sequential_id

    @property
    def codec(self) -> StoreCodec | None:
        """Codec used to persist this store, if any."""
        return self._codec

    @property
    def category_names(self) -> tuple[CategoryName, ...]:
        """Category names in file order."""
        return tuple(self._categories)

    def __repr__(self) -> str:
        return (
            f"LocaleStore(locale_code={self._locale_code!r}, "
            f"categories={len(self._categories)})"
        )

    def get_pages(self) -> Mapping[CategoryName, Category]:
        """Return a read-only view of the category mapping."""
        return MappingProxyType(self._categories)

    def category(self, name: CategoryName) -> Category:
        """Return the category called ``name``.

        Raises:
            CategoryNotFoundError: If the store has no such category
        """
        try:
            return self._categories[name]
        except KeyError:
            raise CategoryNotFoundError(name, self._locale_code) from None

    def add_category(self, name: CategoryName) -> Category:
        """Create an empty category sharing this store's id variant.

        Raises:
            ValueError: If the category already exists
        """
        if name in self._categories:
            msg = f"Category '{name}' already exists in locale '{self._locale_code}'"
            raise ValueError(msg)
        category = Category(
            name, uses_implicit_sequential_id=self._uses_implicit_sequential_id
        )
        self._categories[name] = category
        return category

    def save(self, path: str | Path) -> None:
        """Persist the whole store to ``path`` through its codec.

        Raises:
            StoreIOError: If no codec is bound or the write fails
        """
        target = Path(path)
        if self._codec is None:
            diagnostic = Diagnostic(
                code=DiagnosticCode.IO_FAILURE,
                message=f"Locale '{self._locale_code}' has no codec to save with",
                locale_code=self._locale_code,
                path=str(target),
            )
            raise StoreIOError(diagnostic, path=str(target))
        try:
            self._codec.write(self, target)
        except OSError as e:
            diagnostic = Diagnostic(
                code=DiagnosticCode.IO_FAILURE,
                message=f"Failed to save locale '{self._locale_code}': {e}",
                locale_code=self._locale_code,
                path=str(target),
            )
            raise StoreIOError(diagnostic, path=str(target)) from e
        logger.info("Saved locale %s to %s", self._locale_code, target)

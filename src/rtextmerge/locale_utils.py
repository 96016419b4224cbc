"""Locale table and Babel-backed display names.

Project locale codes are short, two-letter game-style codes (``US``, ``BP``,
``MS``) rather than BCP-47 tags. The table maps each one to a CLDR locale
identifier; display names come from Babel's CLDR data.

Python 3.13+.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from rtextmerge.constants import DEFAULT_DISPLAY_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "LOCALE_TABLE",
    "display_name",
    "get_babel_locale",
    "is_known_locale",
    "normalize_locale",
]

LOCALE_TABLE: Mapping[str, str] = MappingProxyType(
    {
        "JP": "ja_JP",
        "US": "en_US",
        "GB": "en_GB",
        "FR": "fr_FR",
        "DE": "de_DE",
        "IT": "it_IT",
        "ES": "es_ES",
        "PT": "pt_PT",
        "NL": "nl_NL",
        "RU": "ru_RU",
        "KR": "ko_KR",
        "TW": "zh_Hant_TW",
        "CN": "zh_Hans_CN",
        "EL": "el_GR",
        "TR": "tr_TR",
        "PL": "pl_PL",
        "CZ": "cs_CZ",
        "MS": "es_MX",
        "BP": "pt_BR",
        "HU": "hu_HU",
        "SE": "sv_SE",
        "DK": "da_DK",
        "NO": "nb_NO",
        "FI": "fi_FI",
    }
)
"""Project locale code -> CLDR locale identifier. Closed set; lookups are exact."""


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale tag to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale identifier (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def is_known_locale(locale_code: str, table: Mapping[str, str] = LOCALE_TABLE) -> bool:
    """Check whether ``locale_code`` is in the locale table (case-sensitive)."""
    return locale_code in table


def display_name(
    locale_code: str,
    display_locale: str = DEFAULT_DISPLAY_LOCALE,
    table: Mapping[str, str] = LOCALE_TABLE,
) -> str | None:
    """Human-readable name for a project locale code.

    Args:
        locale_code: Project locale code, e.g. ``"FR"``
        display_locale: Locale the name is written in
        table: Locale table to resolve ``locale_code`` against

    Returns:
        Display name, or None if ``locale_code`` is not in the table

    Example:
        >>> display_name("FR")
        'French (France)'
        >>> display_name("XX") is None
        True
    """
    cldr_id = table.get(locale_code)
    if cldr_id is None:
        return None
    name = get_babel_locale(cldr_id).get_display_name(get_babel_locale(display_locale))
    return name if name is not None else locale_code

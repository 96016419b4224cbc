"""Per-project configuration.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from rtextmerge.constants import DEFAULT_DISPLAY_LOCALE, DEFAULT_PAYLOAD_NAME
from rtextmerge.locale_utils import LOCALE_TABLE

__all__ = ["ProjectConfig"]


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Immutable knobs for opening and saving a folder project.

    Constructing ``ProjectConfig()`` with no arguments gives the standard
    layout: locale files named after the built-in locale table and a
    per-locale payload called ``rtext``.

    Attributes:
        payload_name: File stem inside each locale folder (default: "rtext").
            The codec suffix is appended, giving e.g. ``US/rtext.json``.
        locale_table: Known locale codes mapped to CLDR identifiers. Only
            names found here are treated as locale files or folders.
        display_locale: Locale that locale display names are written in.

    Example:
        >>> config = ProjectConfig(payload_name="strings")
        >>> project = LocaleProjectSet.open_folder("ui/arcade", codec, config=config)
    """

    payload_name: str = DEFAULT_PAYLOAD_NAME
    locale_table: Mapping[str, str] = LOCALE_TABLE
    display_locale: str = DEFAULT_DISPLAY_LOCALE

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If payload_name is empty or contains a path separator,
                or if locale_table is empty.
        """
        if not self.payload_name or "/" in self.payload_name or "\\" in self.payload_name:
            msg = f"payload_name must be a plain file stem, got: {self.payload_name!r}"
            raise ValueError(msg)
        if not self.locale_table:
            msg = "locale_table must contain at least one locale"
            raise ValueError(msg)

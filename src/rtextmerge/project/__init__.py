"""Locale projects: folder layouts, loading, saving and the current locale.

Submodules:
    config      - ProjectConfig
    layout      - Layout detection and locale file discovery
    results     - LocaleLoadResult, LoadSummary, SaveSummary
    project_set - LocaleProjectSet, ProjectContext

Python 3.13+.
"""

from .config import ProjectConfig
from .layout import LocaleFile, detect_layout, discover_locale_files, locale_file_path
from .project_set import LocaleProjectSet, ProjectContext
from .results import LoadSummary, LocaleLoadResult, SavedLocale, SaveSummary

__all__ = [
    "LoadSummary",
    "LocaleFile",
    "LocaleLoadResult",
    "LocaleProjectSet",
    "ProjectConfig",
    "ProjectContext",
    "SaveSummary",
    "SavedLocale",
    "detect_layout",
    "discover_locale_files",
    "locale_file_path",
]

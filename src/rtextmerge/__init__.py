"""RTextMerge - multi-locale text tables with CSV round-tripping.

Keeps the localized string tables of a project (one file per locale, grouped
into categories) consistent while entries are imported, edited and exported
across many locales at once.

Public API:
    LocaleProjectSet - Opened project: locale stores plus the current locale
    ProjectContext - Project, category and broadcast scope for an operation
    ReconciliationEngine - Merge records and row edits into categories
    Category / Entry - Keyed entries of one category in one locale
    LocaleStore - All categories of one locale
    JsonStoreCodec - Reference locale-file codec
    decode / encode - RecNo,Label,String interchange codec
    import_csv / export_csv - File-level workflows

Exceptions:
    RTextError - Base exception class
    MalformedFileError - Interchange file rejected as a whole
    LabelExistsError - Insert of a label that is already present
    StoreIOError - File read or write failed

Submodules:
    rtextmerge.store - Entry stores, locale stores, codec protocol
    rtextmerge.interchange - CSV codec and legacy pair format
    rtextmerge.reconciliation - Merge engine, results, import preview
    rtextmerge.project - Folder layouts, loading and saving
    rtextmerge.transfer - Import/export workflows
    rtextmerge.diagnostics - Diagnostic codes, errors, formatting
"""

from .diagnostics import (
    LabelExistsError,
    MalformedFileError,
    RTextError,
    StoreIOError,
)
from .interchange import decode, encode
from .project import LocaleProjectSet, ProjectContext
from .reconciliation import ReconciliationEngine
from .store import Category, Entry, JsonStoreCodec, LocaleStore
from .transfer import export_csv, import_csv

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("rtextmerge")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Category",
    "Entry",
    "JsonStoreCodec",
    "LabelExistsError",
    "LocaleProjectSet",
    "LocaleStore",
    "MalformedFileError",
    "ProjectContext",
    "RTextError",
    "ReconciliationEngine",
    "StoreIOError",
    "__version__",
    "decode",
    "encode",
    "export_csv",
    "import_csv",
]

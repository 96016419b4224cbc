"""File-level import and export workflows.

These functions sit between the filesystem and the core: they read or write
whole files, decode, preview, and hand records to the reconciliation engine.
File-level problems are returned as result objects with a status rather than
raised, so a caller can show one message per action. Only an ImportResult
with ImportStatus.SUCCESS means a store was mutated.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from rtextmerge.constants import SAMPLE_CSV_NAME
from rtextmerge.diagnostics import (
    CategoryNotFoundError,
    Diagnostic,
    MalformedFileError,
    StoreIOError,
)
from rtextmerge.enums import ExportStatus, ImportStatus
from rtextmerge.interchange import (
    DecodeResult,
    category_records,
    decode,
    decode_pairs,
    encode,
    sample_csv,
)
from rtextmerge.project.project_set import ProjectContext
from rtextmerge.reconciliation import (
    ImportPreview,
    MergeReport,
    ReconciliationEngine,
    build_preview,
)
from rtextmerge.store.category import Category
from rtextmerge.store.types import CategoryName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Results
    "ImportResult",
    "ExportResult",
    # Workflows
    "read_csv",
    "import_csv",
    "import_pairs",
    "export_csv",
    "write_sample_csv",
]

logger = logging.getLogger(__name__)

type ConfirmCallback = Callable[[ImportPreview], bool]
type Decoder = Callable[[bytes], DecodeResult]


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Outcome of importing one file.

    Attributes:
        status: Import status
        source: File that was imported
        category_name: Category the records were meant for
        message: Human-readable outcome
        preview: Preview built before merging (None if decoding failed)
        report: Merge report (only for ImportStatus.SUCCESS)
        skipped: Diagnostics for lines the decoder skipped
        error: Exception for MALFORMED and IO_ERROR
    """

    status: ImportStatus
    source: Path
    category_name: CategoryName
    message: str
    preview: ImportPreview | None = None
    report: MergeReport | None = None
    skipped: tuple[Diagnostic, ...] = ()
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the records were merged."""
        return self.status == ImportStatus.SUCCESS

    @property
    def record_count(self) -> int:
        """Records decoded from the file (0 if decoding failed)."""
        return self.preview.record_count if self.preview is not None else 0


@dataclass(frozen=True, slots=True)
class ExportResult:
    """Outcome of exporting one category.

    Attributes:
        status: Export status
        path: Destination file
        record_count: Records written (0 on error)
        error: Exception if status is ERROR
    """

    status: ExportStatus
    path: Path
    record_count: int = 0
    error: Exception | None = None

    @property
    def is_success(self) -> bool:
        """Check if the file was written."""
        return self.status == ExportStatus.SUCCESS


def _read_bytes(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as e:
        raise StoreIOError.from_os_error(e, path, "read") from e


def read_csv(path: str | Path) -> DecodeResult:
    """Read an interchange file fully, then decode it.

    Raises:
        StoreIOError: If the file cannot be read
        MalformedFileError: If the file fails the line-count or header check
    """
    return decode(_read_bytes(Path(path)))


def _import(
    path: str | Path,
    context: ProjectContext,
    decoder: Decoder,
    confirm: ConfirmCallback | None,
) -> ImportResult:
    source = Path(path)
    category_name = context.category_name
    resolution = context.resolve()
    if not resolution.targets:
        current = context.project.current
        raise CategoryNotFoundError(
            category_name, current.locale_code if current is not None else ""
        )

    try:
        decoded = decoder(_read_bytes(source))
    except StoreIOError as e:
        logger.error("Import of %s failed: %s", source, e)
        return ImportResult(
            ImportStatus.IO_ERROR, source, category_name, message=str(e), error=e
        )
    except MalformedFileError as e:
        logger.error("Import of %s rejected: %s", source, e)
        return ImportResult(
            ImportStatus.MALFORMED, source, category_name, message=str(e), error=e
        )

    if decoded.is_empty:
        logger.warning("No valid records found in %s", source)
        return ImportResult(
            ImportStatus.NO_RECORDS,
            source,
            category_name,
            message="No valid records were found in the file",
            skipped=decoded.diagnostics,
        )

    preview = build_preview(
        decoded.records,
        category_name,
        source.name,
        target_locales=tuple(target.locale_code for target in resolution.targets),
        skipped=decoded.diagnostics,
    )
    if confirm is not None and not confirm(preview):
        logger.info("Import of %s cancelled", source)
        return ImportResult(
            ImportStatus.CANCELLED,
            source,
            category_name,
            message="Import cancelled by user",
            preview=preview,
            skipped=decoded.diagnostics,
        )

    report = ReconciliationEngine().merge(
        decoded.records, resolution.targets, unresolved=resolution.missing
    )
    return ImportResult(
        ImportStatus.SUCCESS,
        source,
        category_name,
        message=f"Imported {preview.record_count} records: {report.summary()}",
        preview=preview,
        report=report,
        skipped=decoded.diagnostics,
    )


def import_csv(
    path: str | Path,
    context: ProjectContext,
    *,
    confirm: ConfirmCallback | None = None,
) -> ImportResult:
    """Import a RecNo,Label,String file into the context's category.

    Existing labels get their text replaced and keep their id; new labels are
    appended with the next free id of each locale; other entries are kept.

    Args:
        path: Interchange file
        context: Project, category and broadcast scope
        confirm: Called with the preview before anything is merged; returning
            False cancels the import

    Returns:
        ImportResult; stores are only mutated when status is SUCCESS

    Raises:
        CategoryNotFoundError: If no target locale has the category

    Example:
        >>> context = ProjectContext(project, "MenuText", broadcast=True)
        >>> result = import_csv("menu.csv", context, confirm=lambda p: True)
        >>> result.message
        'Imported 5 records: Applied to 3 locales: 6 records updated, 9 records added'
    """
    return _import(path, context, decode, confirm)


def import_pairs(
    path: str | Path,
    context: ProjectContext,
    *,
    confirm: ConfirmCallback | None = None,
) -> ImportResult:
    """Import a legacy ``key,value`` file into the context's category.

    Same merge rules and statuses as import_csv(); the file has no header.
    """
    return _import(path, context, decode_pairs, confirm)


def export_csv(path: str | Path, category: Category) -> ExportResult:
    """Write ``category`` as an interchange file, ascending by id.

    Args:
        path: Destination file
        category: Category to export

    Returns:
        ExportResult; write failures are returned with ExportStatus.ERROR
    """
    destination = Path(path)
    records = category_records(category)
    try:
        destination.write_text(encode(records), encoding="utf-8", newline="")
    except OSError as e:
        error = StoreIOError.from_os_error(e, destination, "write")
        logger.error("Export of category '%s' failed: %s", category.name, error)
        return ExportResult(ExportStatus.ERROR, destination, error=error)
    logger.info("Exported %d records of '%s' to %s", len(records), category.name, destination)
    return ExportResult(ExportStatus.SUCCESS, destination, record_count=len(records))


def write_sample_csv(path: str | Path) -> Path:
    """Write a template interchange file.

    Args:
        path: Destination file, or a folder to write ``sample_import.csv`` into

    Returns:
        Path of the written file

    Raises:
        StoreIOError: If the file cannot be written
    """
    destination = Path(path)
    if destination.is_dir():
        destination = destination / SAMPLE_CSV_NAME
    try:
        destination.write_text(sample_csv(), encoding="utf-8", newline="")
    except OSError as e:
        raise StoreIOError.from_os_error(e, destination, "write") from e
    logger.info("Sample file written to %s", destination)
    return destination

"""LocaleProjectSet: the locales of one opened project.

A project is either a single locale file or a folder holding one file per
locale. Only folder projects can broadcast an edit or import to every
locale. The current locale is the one single-locale operations act on.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from rtextmerge.diagnostics import Diagnostic, DiagnosticCode, StoreFormatError, StoreIOError
from rtextmerge.enums import LoadStatus, ProjectLayout
from rtextmerge.locale_utils import display_name
from rtextmerge.project.config import ProjectConfig
from rtextmerge.project.layout import discover_locale_files, locale_file_path
from rtextmerge.project.results import LoadSummary, LocaleLoadResult, SavedLocale, SaveSummary
from rtextmerge.reconciliation.engine import resolve_targets
from rtextmerge.reconciliation.results import TargetResolution
from rtextmerge.store.locale_store import LocaleStore
from rtextmerge.store.protocols import StoreCodec
from rtextmerge.store.types import CategoryName, LocaleCode

__all__ = ["LocaleProjectSet", "ProjectContext"]

logger = logging.getLogger(__name__)


class LocaleProjectSet:
    """Ordered locale stores plus the current selection.

    Use open_folder() or open_file() rather than the constructor.

    Example:
        >>> project = LocaleProjectSet.open_folder("rtext/common", JsonStoreCodec())
        >>> project.layout
        <ProjectLayout.FLAT: 'flat'>
        >>> project.locale_codes
        ('DE', 'FR', 'US')
        >>> resolution = project.resolve_targets("MenuText", broadcast=True)
    """

    __slots__ = (
        "_codec",
        "_config",
        "_current_index",
        "_layout",
        "_load_results",
        "_source",
        "_stores",
    )

    def __init__(
        self,
        stores: Iterable[LocaleStore],
        *,
        codec: StoreCodec,
        source: Path,
        layout: ProjectLayout | None = None,
        config: ProjectConfig | None = None,
        load_results: Iterable[LocaleLoadResult] = (),
    ) -> None:
        """Initialize a project.

        Args:
            stores: Locale stores in project order
            codec: Codec the stores were read with
            source: Folder (folder projects) or file (single-file projects)
            layout: Folder layout, or None for a single-file project
            config: Project configuration
            load_results: Per-file outcomes of the open call
        """
        self._stores = tuple(stores)
        self._codec = codec
        self._source = source
        self._layout = layout
        self._config = config if config is not None else ProjectConfig()
        self._load_results = tuple(load_results)
        self._current_index = 0

    @classmethod
    def open_folder(
        cls,
        folder: str | Path,
        codec: StoreCodec,
        *,
        config: ProjectConfig | None = None,
    ) -> LocaleProjectSet:
        """Open every locale file of a project folder.

        Locale files that fail to read are skipped and reported through
        get_load_summary().

        Args:
            folder: Project folder
            codec: Codec for the locale files
            config: Project configuration

        Returns:
            Folder project; may hold zero stores if nothing matched

        Raises:
            StoreIOError: If the folder does not exist or cannot be listed
        """
        config = config if config is not None else ProjectConfig()
        root = Path(folder)
        if not root.is_dir():
            diagnostic = Diagnostic(
                code=DiagnosticCode.FILE_NOT_FOUND,
                message=f"Project folder not found: '{root}'",
                path=str(root),
            )
            raise StoreIOError(diagnostic, path=str(root))
        try:
            layout, files = discover_locale_files(
                root,
                suffix=codec.suffix,
                payload_name=config.payload_name,
                table=config.locale_table,
            )
        except OSError as e:
            raise StoreIOError.from_os_error(e, root, "list") from e

        stores: list[LocaleStore] = []
        results: list[LocaleLoadResult] = []
        for locale_file in files:
            try:
                store = codec.read(locale_file.path, locale_file.locale_code)
            except (OSError, StoreFormatError) as e:
                logger.warning(
                    "Skipping locale %s: could not read %s: %s",
                    locale_file.locale_code,
                    locale_file.path,
                    e,
                )
                results.append(
                    LocaleLoadResult(
                        locale_code=locale_file.locale_code,
                        status=LoadStatus.ERROR,
                        path=locale_file.path,
                        error=e,
                    )
                )
                continue
            stores.append(store)
            results.append(
                LocaleLoadResult(
                    locale_code=locale_file.locale_code,
                    status=LoadStatus.SUCCESS,
                    path=locale_file.path,
                )
            )

        logger.info("Opened %s (%s layout): %d locales", root, layout, len(stores))
        return cls(
            stores,
            codec=codec,
            source=root,
            layout=layout,
            config=config,
            load_results=results,
        )

    @classmethod
    def open_file(
        cls,
        path: str | Path,
        codec: StoreCodec,
        *,
        locale_code: LocaleCode | None = None,
        config: ProjectConfig | None = None,
    ) -> LocaleProjectSet:
        """Open a single locale file.

        Args:
            path: Locale file
            codec: Codec for the file
            locale_code: Locale code to assign (default: the file stem)
            config: Project configuration

        Returns:
            Single-file project with exactly one store

        Raises:
            StoreIOError: If the file cannot be read
            StoreFormatError: If the file content is not a valid store
        """
        file_path = Path(path)
        code = locale_code if locale_code is not None else file_path.stem
        try:
            store = codec.read(file_path, code)
        except OSError as e:
            raise StoreIOError.from_os_error(e, file_path, "read") from e
        logger.info("Opened %s as locale %s", file_path, code)
        return cls(
            (store,),
            codec=codec,
            source=file_path,
            config=config,
            load_results=(
                LocaleLoadResult(locale_code=code, status=LoadStatus.SUCCESS, path=file_path),
            ),
        )

    def __len__(self) -> int:
        return len(self._stores)

    def __repr__(self) -> str:
        return (
            f"LocaleProjectSet(source={str(self._source)!r}, layout={self._layout}, "
            f"locales={len(self._stores)})"
        )

    @property
    def stores(self) -> tuple[LocaleStore, ...]:
        """Locale stores in project order."""
        return self._stores

    @property
    def locale_codes(self) -> tuple[LocaleCode, ...]:
        """Locale codes in project order."""
        return tuple(store.locale_code for store in self._stores)

    @property
    def source(self) -> Path:
        """Folder or file the project was opened from."""
        return self._source

    @property
    def config(self) -> ProjectConfig:
        """Project configuration."""
        return self._config

    @property
    def layout(self) -> ProjectLayout | None:
        """Folder layout, or None for a single-file project."""
        return self._layout

    @property
    def is_folder_project(self) -> bool:
        """Whether the project was opened from a folder."""
        return self._layout is not None

    @property
    def current_index(self) -> int:
        """Index of the current locale in stores."""
        return self._current_index

    @current_index.setter
    def current_index(self, index: int) -> None:
        if not 0 <= index < len(self._stores):
            msg = f"Locale index {index} out of range (project has {len(self._stores)} locales)"
            raise IndexError(msg)
        self._current_index = index

    @property
    def current(self) -> LocaleStore | None:
        """Current locale store, or None if the project holds no locales."""
        if not self._stores:
            return None
        return self._stores[self._current_index]

    @property
    def uses_implicit_sequential_id(self) -> bool:
        """Id variant of the current locale store."""
        current = self.current
        return current.uses_implicit_sequential_id if current is not None else False

    def display_name(self, locale_code: LocaleCode) -> str | None:
        """Display name for ``locale_code``; None if it is not a known locale."""
        return display_name(
            locale_code,
            self._config.display_locale,
            self._config.locale_table,
        )

    def get_load_summary(self) -> LoadSummary:
        """Per-file outcomes of the open call."""
        return LoadSummary(results=self._load_results)

    def resolve_targets(
        self, category_name: CategoryName, *, broadcast: bool = False
    ) -> TargetResolution:
        """Find the categories an operation should write to.

        Args:
            category_name: Category to look up
            broadcast: Use every locale instead of only the current one;
                ignored for single-file projects

        Returns:
            TargetResolution; locales lacking the category are listed as
            failures instead of raising
        """
        if broadcast and self.is_folder_project:
            stores: tuple[LocaleStore, ...] = self._stores
        else:
            current = self.current
            stores = (current,) if current is not None else ()
        return resolve_targets(stores, category_name)

    def save(self, destination: str | Path | None = None) -> SaveSummary:
        """Write every locale back to disk.

        Folder projects write ``<dest>/<code><suffix>`` (flat) or
        ``<dest>/<code>/<payload_name><suffix>`` (per-locale folder),
        creating directories as needed. Single-file projects write to
        ``destination`` or back to the file they were opened from.

        Args:
            destination: Target folder or file (default: the opened source)

        Returns:
            SaveSummary listing the written files

        Raises:
            StoreIOError: If a directory or file cannot be written; locales
                saved before the failure stay written
        """
        target = Path(destination) if destination is not None else self._source
        saved: list[SavedLocale] = []
        if self._layout is None:
            for store in self._stores:
                store.save(target)
                saved.append(SavedLocale(locale_code=store.locale_code, path=target))
        else:
            for store in self._stores:
                path = locale_file_path(
                    target,
                    store.locale_code,
                    self._layout,
                    suffix=self._codec.suffix,
                    payload_name=self._config.payload_name,
                )
                try:
                    path.parent.mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    raise StoreIOError.from_os_error(e, path.parent, "create") from e
                store.save(path)
                saved.append(SavedLocale(locale_code=store.locale_code, path=path))

        summary = SaveSummary(saved=tuple(saved))
        logger.info("Project saved to %s: %s", target, summary.summary())
        return summary


@dataclass(frozen=True, slots=True)
class ProjectContext:
    """The project, category and scope an import or edit acts on.

    Attributes:
        project: Opened project
        category_name: Selected category
        broadcast: Apply to every locale of a folder project
    """

    project: LocaleProjectSet
    category_name: CategoryName
    broadcast: bool = False

    def resolve(self) -> TargetResolution:
        """Resolve the targets for this context."""
        return self.project.resolve_targets(self.category_name, broadcast=self.broadcast)

"""Table loading infrastructure for NameTableRegistry.

Provides the protocol for table loaders, a packaged-data implementation,
a filesystem implementation with path-traversal security, and result/summary
data structures for tracking load attempts.

Components:
    TableLoader - Protocol for loading table sources (structural typing)
    PackageTableLoader - Loader over the assets shipped inside the package
    PathTableLoader - Disk-based loader with path-traversal prevention
    TableLoadResult - Immutable result of a single table load attempt
    LoadSummary - Immutable aggregate of all load results from a preload

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from cldrnames.constants import DATA_FILE_SUFFIX, DATA_PACKAGE
from cldrnames.enums import LoadStatus, TableKind
from cldrnames.types import LocaleId, TableSource

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "TableLoader",
    # Concrete loaders
    "PackageTableLoader",
    "PathTableLoader",
    # Load result types
    "TableLoadResult",
    "LoadSummary",
]


class TableLoader(Protocol):
    """Protocol for loading table sources for specific locales.

    Implementations must provide load() and list_locales(). The registry
    uses list_locales() to tell an unknown locale apart from a key that is
    merely absent, so it must list exactly the locales load() can serve.

    Example:
        >>> class DictLoader:
        ...     def __init__(self, sources: dict[tuple[str, str], str]) -> None:
        ...         self._sources = sources
        ...     def load(self, kind: TableKind, locale: str) -> str:
        ...         return self._sources[(kind, locale)]
        ...     def list_locales(self, kind: TableKind) -> frozenset[str]:
        ...         return frozenset(loc for k, loc in self._sources if k == kind)
        ...     def describe_path(self, kind: TableKind, locale: str) -> str:
        ...         return f"{kind}/{locale}"
    """

    def load(self, kind: TableKind, locale: LocaleId) -> TableSource:
        """Load the table source for a locale.

        Args:
            kind: Bundle family
            locale: Exact locale identifier (e.g., 'ak', 'pt_PT')

        Returns:
            Table source as a JSON string

        Raises:
            FileNotFoundError: If no table exists for this locale
            OSError: If the source cannot be read
        """

    def list_locales(self, kind: TableKind) -> frozenset[LocaleId]:
        """Return every locale identifier that has a table of this kind."""

    def describe_path(self, kind: TableKind, locale: LocaleId) -> str:
        """Return human-readable path for diagnostics.

        Default implementation returns a generic "{kind}/{locale}" string.
        Override in concrete loaders that know the physical path.
        """
        return f"{kind}/{locale}"


def _validate_locale(locale: LocaleId) -> None:
    """Validate a locale identifier used as a file name.

    Raises:
        ValueError: If locale contains unsafe path components
    """
    if not locale:
        msg = "Locale identifier cannot be empty"
        raise ValueError(msg)
    if ".." in locale:
        msg = f"Path traversal sequences not allowed in locale: '{locale}'"
        raise ValueError(msg)
    if "/" in locale or "\\" in locale:
        msg = f"Path separators not allowed in locale: '{locale}'"
        raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class PackageTableLoader:
    """Loader for the table assets shipped inside a Python package.

    Assets live at ``<package>/<kind>/<locale>.json`` and are read through
    importlib.resources, so zipped installs work too.

    Attributes:
        package: Import path of the data package
    """

    package: str = DATA_PACKAGE

    def _kind_dir(self, kind: TableKind) -> Traversable:
        return resources.files(self.package) / str(kind)

    def describe_path(self, kind: TableKind, locale: LocaleId) -> str:
        """Return the package-relative asset path."""
        return f"{self.package}:{kind}/{locale}{DATA_FILE_SUFFIX}"

    def list_locales(self, kind: TableKind) -> frozenset[LocaleId]:
        """List locales with an asset of this kind in the package."""
        kind_dir = self._kind_dir(kind)
        if not kind_dir.is_dir():
            return frozenset()
        return frozenset(
            item.name.removesuffix(DATA_FILE_SUFFIX)
            for item in kind_dir.iterdir()
            if item.is_file() and item.name.endswith(DATA_FILE_SUFFIX)
        )

    def load(self, kind: TableKind, locale: LocaleId) -> TableSource:
        """Read a packaged asset.

        Raises:
            ValueError: If locale contains path traversal sequences
            FileNotFoundError: If no asset exists for the locale
        """
        _validate_locale(locale)
        asset = self._kind_dir(kind) / f"{locale}{DATA_FILE_SUFFIX}"
        if not asset.is_file():
            msg = f"No packaged table: {self.describe_path(kind, locale)}"
            raise FileNotFoundError(msg)
        return asset.read_text(encoding="utf-8")


@dataclass(frozen=True, slots=True)
class PathTableLoader:
    """File system table loader using a directory template.

    The template names one directory per kind through a {kind} placeholder;
    each directory holds ``<locale>.json`` files.

    Security:
        Locale identifiers containing path separators or ".." are rejected.
        All resolved paths are validated against a fixed root directory.

    Example:
        >>> loader = PathTableLoader("tables/{kind}")
        >>> source = loader.load(TableKind.CURRENCY_NAMES, "ak")
        # Loads from: tables/currency_names/ak.json

    Attributes:
        base_path: Directory template with {kind} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            ValueError: If base_path does not contain {kind} placeholder
        """
        # Without the placeholder every kind would read the same directory and
        # currency codes would be served as language names.
        if "{kind}" not in self.base_path:
            msg = (
                f"base_path must contain '{{kind}}' placeholder for kind substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.base_path.split("{kind}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    def _kind_dir(self, kind: TableKind) -> Path:
        return Path(self.base_path.replace("{kind}", str(kind)))

    @staticmethod
    def _is_safe_path(base_dir: Path, full_path: Path) -> bool:
        """Check if full_path resolves to a location inside base_dir."""
        try:
            full_path.resolve().relative_to(base_dir.resolve())
            return True
        except ValueError:
            return False

    def describe_path(self, kind: TableKind, locale: LocaleId) -> str:
        """Return the kind-substituted file path."""
        return f"{self._kind_dir(kind).as_posix()}/{locale}{DATA_FILE_SUFFIX}"

    def list_locales(self, kind: TableKind) -> frozenset[LocaleId]:
        """List locales with a ``*.json`` file in the kind directory."""
        kind_dir = self._kind_dir(kind)
        if not kind_dir.is_dir():
            return frozenset()
        return frozenset(
            path.name.removesuffix(DATA_FILE_SUFFIX)
            for path in kind_dir.iterdir()
            if path.is_file() and path.name.endswith(DATA_FILE_SUFFIX)
        )

    def load(self, kind: TableKind, locale: LocaleId) -> TableSource:
        """Load a table file from disk.

        Raises:
            ValueError: If locale contains path traversal sequences or the
                resolved path escapes the root directory
            FileNotFoundError: If the file doesn't exist
            OSError: If the file cannot be read
        """
        _validate_locale(locale)
        full_path = (self._kind_dir(kind) / f"{locale}{DATA_FILE_SUFFIX}").resolve()

        if not self._is_safe_path(self._resolved_root, full_path):
            msg = (
                f"Path traversal detected: resolved path escapes root directory. "
                f"kind='{kind}', locale='{locale}'"
            )
            raise ValueError(msg)

        return full_path.read_text(encoding="utf-8")


@dataclass(frozen=True, slots=True)
class TableLoadResult:
    """Result of loading a single table.

    Attributes:
        kind: Bundle family of the table
        locale: Locale identifier
        status: Load status (success, not_found, error)
        error: Exception if status is ERROR, None otherwise
        source_path: Human-readable path to the asset (if available)
        entry_count: Number of entries in the loaded table (0 unless SUCCESS)
    """

    kind: TableKind
    locale: LocaleId
    status: LoadStatus
    error: Exception | None = None
    source_path: str | None = None
    entry_count: int = 0

    @property
    def is_success(self) -> bool:
        """Check if the table loaded successfully."""
        return self.status == LoadStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        """Check if no table exists for the locale."""
        return self.status == LoadStatus.NOT_FOUND

    @property
    def is_error(self) -> bool:
        """Check if the load failed with an error."""
        return self.status == LoadStatus.ERROR


@dataclass(frozen=True, slots=True)
class LoadSummary:
    """Immutable aggregate of table load results from a registry preload.

    All statistics are computed properties derived from the ``results`` tuple.

    Example:
        >>> summary = CURRENCY_NAMES.preload()
        >>> for result in summary.get_errors():
        ...     print(f"Failed: {result.locale}: {result.error}")
    """

    results: tuple[TableLoadResult, ...]

    def __repr__(self) -> str:
        """Return string representation for debugging."""
        return (
            f"LoadSummary(total={self.total_attempted}, "
            f"ok={self.successful}, "
            f"not_found={self.not_found}, "
            f"errors={self.errors}, "
            f"entries={self.entry_count})"
        )

    @property
    def total_attempted(self) -> int:
        """Total number of load attempts."""
        return len(self.results)

    @property
    def successful(self) -> int:
        """Number of successful loads."""
        return sum(1 for r in self.results if r.is_success)

    @property
    def not_found(self) -> int:
        """Number of tables not found."""
        return sum(1 for r in self.results if r.is_not_found)

    @property
    def errors(self) -> int:
        """Number of load errors."""
        return sum(1 for r in self.results if r.is_error)

    @property
    def entry_count(self) -> int:
        """Total number of entries across all loaded tables."""
        return sum(r.entry_count for r in self.results)

    def get_errors(self) -> tuple[TableLoadResult, ...]:
        """Get all results with errors."""
        return tuple(r for r in self.results if r.is_error)

    def get_not_found(self) -> tuple[TableLoadResult, ...]:
        """Get all results where no table exists."""
        return tuple(r for r in self.results if r.is_not_found)

    def get_successful(self) -> tuple[TableLoadResult, ...]:
        """Get all successful load results."""
        return tuple(r for r in self.results if r.is_success)

    @property
    def has_errors(self) -> bool:
        """Check if any table failed to load with errors."""
        return self.errors > 0

    @property
    def all_successful(self) -> bool:
        """Check if every attempted table was found and parsed."""
        return self.errors == 0 and self.not_found == 0

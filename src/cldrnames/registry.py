"""Process-wide registries of name tables.

A registry owns every table of one TableKind, keyed by exact locale
identifier. Tables are built lazily on first access, at most once per
locale, and are immutable afterwards, so steady-state lookups read a plain
dict without locking.

Two outcomes of a lookup are not exceptional and must stay distinguishable:

    - key absent from a known table   -> None (caller walks its fallback chain)
    - locale unknown to the registry  -> UnknownLocaleError

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from threading import RLock

from cldrnames.diagnostics import ErrorTemplate, TableFormatError, UnknownLocaleError
from cldrnames.enums import LoadStatus, TableKind
from cldrnames.loading import LoadSummary, PackageTableLoader, TableLoader, TableLoadResult
from cldrnames.table import NameTable, parse_table
from cldrnames.types import DisplayName, LocaleId, TableKey

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "NameTableRegistry",
    # Process-wide registries over the packaged data
    "CURRENCY_NAMES",
    "LOCALE_NAMES",
    "get_registry",
    # Convenience lookups
    "lookup_currency_name",
    "lookup_locale_name",
]

logger = logging.getLogger(__name__)


class NameTableRegistry:
    """Registry mapping locale identifiers to immutable NameTables of one kind.

    Locale identifiers are matched exactly; no normalization is performed
    ("en-US" and "en_US" are different identifiers).

    Thread Safety:
        Construction of a table is guarded by an RLock with a double-checked
        read, so concurrent first access to a locale builds it once. Reads of
        already built tables take no lock.

    Example:
        >>> registry = NameTableRegistry(TableKind.CURRENCY_NAMES)
        >>> registry.lookup("ak", "usd")
        'Amɛrika Dɔla'
        >>> registry.lookup("ak", "xyz") is None
        True
        >>> registry.lookup("xx_UNKNOWN", "usd")
        Traceback (most recent call last):
        ...
        cldrnames.diagnostics.errors.UnknownLocaleError: ...
    """

    __slots__ = ("_kind", "_loader", "_locales", "_lock", "_tables")

    def __init__(self, kind: TableKind | str, *, loader: TableLoader | None = None) -> None:
        """Initialize registry.

        Args:
            kind: Bundle family served by this registry
            loader: Source of table assets (default: packaged data)

        Raises:
            ValueError: If kind is not a TableKind value
        """
        self._kind = TableKind(kind)
        self._loader: TableLoader = loader if loader is not None else PackageTableLoader()
        self._tables: dict[LocaleId, NameTable] = {}
        self._locales: frozenset[LocaleId] | None = None
        self._lock = RLock()

    def __repr__(self) -> str:
        return f"NameTableRegistry(kind={self._kind!r}, loaded={len(self._tables)})"

    @property
    def kind(self) -> TableKind:
        """Bundle family served by this registry."""
        return self._kind

    @property
    def loader(self) -> TableLoader:
        """Loader the registry reads assets from."""
        return self._loader

    def available_locales(self) -> frozenset[LocaleId]:
        """Return every locale identifier with a table of this kind.

        Listed once from the loader and cached until clear_cache().
        """
        locales = self._locales
        if locales is None:
            with self._lock:
                if self._locales is None:
                    self._locales = self._loader.list_locales(self._kind)
                    logger.debug(
                        "Listed %d %s tables", len(self._locales), self._kind
                    )
                locales = self._locales
        return locales

    def has_locale(self, locale_id: LocaleId) -> bool:
        """Check whether the registry knows the locale identifier."""
        return locale_id in self.available_locales()

    def loaded_locales(self) -> frozenset[LocaleId]:
        """Return the locale identifiers whose tables are already built."""
        return frozenset(self._tables)

    def get_table(self, locale_id: LocaleId) -> NameTable:
        """Return the table for a locale, building it on first access.

        Args:
            locale_id: Exact locale identifier

        Returns:
            The immutable table

        Raises:
            UnknownLocaleError: If no table of this kind exists for locale_id
            TableFormatError: If the asset is malformed or not valid UTF-8;
                the diagnostic carries the asset path
            OSError: If the loader fails to read the asset
        """
        table = self._tables.get(locale_id)
        if table is not None:
            return table

        if not self.has_locale(locale_id):
            raise UnknownLocaleError(
                ErrorTemplate.unknown_locale(locale_id, self._kind),
                locale_id=locale_id,
                kind=self._kind,
            )

        with self._lock:
            table = self._tables.get(locale_id)
            if table is None:
                table = self._build(locale_id)
                self._tables[locale_id] = table
        return table

    def _build(self, locale_id: LocaleId) -> NameTable:
        source_path = self._loader.describe_path(self._kind, locale_id)
        try:
            source = self._loader.load(self._kind, locale_id)
        except UnicodeDecodeError as e:
            error = TableFormatError(
                ErrorTemplate.invalid_encoding(locale_id, self._kind, str(e)),
                locale_id=locale_id,
                kind=self._kind,
            )
            error.attach_source_path(source_path)
            raise error from e

        try:
            table = parse_table(source, kind=self._kind, locale_id=locale_id)
        except TableFormatError as e:
            e.attach_source_path(source_path)
            raise
        logger.debug(
            "Built %s table for %s (%d entries)", self._kind, locale_id, len(table)
        )
        return table

    def lookup(self, locale_id: LocaleId, key: TableKey) -> DisplayName | None:
        """Look up a display string.

        Args:
            locale_id: Exact locale identifier (no normalization)
            key: Case-sensitive key

        Returns:
            The stored string, or None if the key is absent from the table

        Raises:
            UnknownLocaleError: If no table of this kind exists for locale_id
            TableFormatError: If the asset is malformed or not valid UTF-8
        """
        return self.get_table(locale_id).lookup(key)

    def preload(self, locales: Iterable[LocaleId] | None = None) -> LoadSummary:
        """Eagerly build tables and report per-table outcomes.

        Never raises for an individual table: unknown locales are reported as
        NOT_FOUND, unreadable or malformed assets as ERROR.

        Args:
            locales: Locales to build (default: every available locale)

        Returns:
            Summary of all load attempts, in sorted locale order
        """
        targets = sorted(self.available_locales() if locales is None else set(locales))
        results: list[TableLoadResult] = []

        for locale_id in targets:
            source_path = self._loader.describe_path(self._kind, locale_id)
            try:
                table = self.get_table(locale_id)
            except (UnknownLocaleError, FileNotFoundError):
                results.append(
                    TableLoadResult(
                        kind=self._kind,
                        locale=locale_id,
                        status=LoadStatus.NOT_FOUND,
                        source_path=source_path,
                    )
                )
            except (TableFormatError, OSError, ValueError) as e:
                logger.warning("Failed to load %s: %s", source_path, e)
                results.append(
                    TableLoadResult(
                        kind=self._kind,
                        locale=locale_id,
                        status=LoadStatus.ERROR,
                        error=e,
                        source_path=source_path,
                    )
                )
            else:
                results.append(
                    TableLoadResult(
                        kind=self._kind,
                        locale=locale_id,
                        status=LoadStatus.SUCCESS,
                        source_path=source_path,
                        entry_count=len(table),
                    )
                )

        summary = LoadSummary(results=tuple(results))
        logger.info("Preloaded %s tables: %r", self._kind, summary)
        return summary

    def clear_cache(self) -> None:
        """Drop built tables and the cached locale listing.

        Tables already handed out stay valid; later lookups rebuild.
        """
        with self._lock:
            self._tables = {}
            self._locales = None
        logger.debug("Cleared %s registry", self._kind)


# ============================================================================
# PROCESS-WIDE REGISTRIES
# ============================================================================

CURRENCY_NAMES = NameTableRegistry(TableKind.CURRENCY_NAMES)
"""Currency code -> name (lowercase key) or symbol (uppercase key)."""

LOCALE_NAMES = NameTableRegistry(TableKind.LOCALE_NAMES)
"""Language/script/region subtag -> localized name."""

_REGISTRIES: dict[TableKind, NameTableRegistry] = {
    TableKind.CURRENCY_NAMES: CURRENCY_NAMES,
    TableKind.LOCALE_NAMES: LOCALE_NAMES,
}


def get_registry(kind: TableKind | str) -> NameTableRegistry:
    """Return the process-wide registry for a kind.

    Raises:
        ValueError: If kind is not a TableKind value
    """
    return _REGISTRIES[TableKind(kind)]


def lookup_currency_name(locale_id: LocaleId, key: TableKey) -> DisplayName | None:
    """Look up a currency name ('usd') or symbol ('GHS') in the packaged data.

    Raises:
        UnknownLocaleError: If no currency table exists for locale_id
    """
    return CURRENCY_NAMES.lookup(locale_id, key)


def lookup_locale_name(locale_id: LocaleId, key: TableKey) -> DisplayName | None:
    """Look up a language, script or region name in the packaged data.

    Raises:
        UnknownLocaleError: If no locale-names table exists for locale_id
    """
    return LOCALE_NAMES.lookup(locale_id, key)

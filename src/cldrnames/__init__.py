"""cldrnames - CLDR-derived localized name tables with exact-match lookup.

Ships generated lookup tables mapping currency codes and locale subtags to
localized display strings, and a thread-safe registry serving them to an
internationalization runtime that performs its own parent-locale fallback.

Public API:
    CURRENCY_NAMES - Registry of currency_names tables ('usd' -> name, 'GHS' -> symbol)
    LOCALE_NAMES - Registry of locale_names tables ('DE', 'de', 'Latn' -> name)
    NameTableRegistry - Registry over any TableLoader
    NameTable - Immutable ordered key -> display string table
    TableKind - Bundle family enumeration
    lookup_currency_name, lookup_locale_name - Lookups over the packaged data

Exceptions:
    NameTableError - Base exception class
    UnknownLocaleError - Locale identifier unknown to a registry
    TableFormatError - Malformed table asset

Submodules:
    cldrnames.loading - Table loaders and load summaries
    cldrnames.table - Table model and JSON asset format
    cldrnames.cldr - Table generation from Babel CLDR data (requires Babel)
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import NameTableError, TableFormatError, UnknownLocaleError
from .enums import TableKind
from .registry import (
    CURRENCY_NAMES,
    LOCALE_NAMES,
    NameTableRegistry,
    get_registry,
    lookup_currency_name,
    lookup_locale_name,
)
from .table import Entry, NameTable

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("cldrnames")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CURRENCY_NAMES",
    "LOCALE_NAMES",
    "Entry",
    "NameTable",
    "NameTableError",
    "NameTableRegistry",
    "TableFormatError",
    "TableKind",
    "UnknownLocaleError",
    "__version__",
    "get_registry",
    "lookup_currency_name",
    "lookup_locale_name",
]

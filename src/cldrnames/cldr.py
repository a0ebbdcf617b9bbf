"""Build name tables from Babel's CLDR data.

Produces NameTables in the same shape as the packaged assets, so that
dump_table() of a built table can be dropped into ``cldrnames/data``:

    currency_names: lowercase ISO 4217 code -> localized name, plus the
                    uppercase code of the locale's home currency -> symbol
    locale_names:   language, script and region subtags -> localized name

When a lowercase and an uppercase key of the same letters carry the same
string (e.g. 'de' and 'DE' in some locales), both entries are bound to one
shared value named after the uppercase key.

Requires Babel installation:
    pip install cldrnames[babel]

Without Babel, functions raise BabelImportError with installation guidance.

Python 3.13+. Babel is optional dependency.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import TYPE_CHECKING

from cldrnames.constants import MAX_LOCALE_CACHE_SIZE
from cldrnames.core.babel_compat import get_unknown_locale_error, require_babel
from cldrnames.diagnostics import ErrorTemplate, UnknownLocaleError
from cldrnames.enums import TableKind
from cldrnames.locale_utils import get_babel_locale, normalize_locale
from cldrnames.table import Entry, NameTable
from cldrnames.types import DisplayName, LocaleId, TableKey

if TYPE_CHECKING:
    from babel import Locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Builders
    "build_table",
    "build_currency_table",
    "build_locale_names_table",
    # CLDR queries
    "get_home_currency",
    # Cache management
    "clear_cldr_cache",
]


# ============================================================================
# BABEL INTERFACE
# ============================================================================


def _parse_locale(locale_id: LocaleId, kind: TableKind) -> Locale:
    """Parse a locale through Babel, translating Babel's unknown-locale error."""
    unknown_locale_error = get_unknown_locale_error()
    try:
        return get_babel_locale(locale_id)
    except (ValueError, unknown_locale_error) as e:
        raise UnknownLocaleError(
            ErrorTemplate.unknown_locale(locale_id, kind),
            locale_id=locale_id,
            kind=kind,
        ) from e


def _home_territory(locale: Locale) -> str | None:
    """Territory of the locale, or of its CLDR likely-subtags expansion."""
    if locale.territory:
        return locale.territory

    from babel.core import get_global, parse_locale  # noqa: PLC0415

    likely_subtags = get_global("likely_subtags")
    likely = likely_subtags.get(str(locale)) or likely_subtags.get(locale.language)
    if not likely:
        return None
    # parse_locale returns (language, territory, script, variant[, modifier])
    return parse_locale(likely)[1]


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_home_currency_impl(locale_norm: str) -> str | None:
    from babel.numbers import get_territory_currencies  # noqa: PLC0415

    locale = _parse_locale(locale_norm, TableKind.CURRENCY_NAMES)
    territory = _home_territory(locale)
    if territory is None:
        return None
    currencies = get_territory_currencies(territory)
    return currencies[0] if currencies else None


def get_home_currency(locale_id: LocaleId) -> str | None:
    """Get the current legal-tender currency of a locale's territory.

    Args:
        locale_id: Locale identifier. Accepts BCP-47 (pt-PT) or POSIX (pt_PT).

    Returns:
        Uppercase ISO 4217 code, or None when the locale has no territory.

    Raises:
        BabelImportError: If Babel not installed.
        UnknownLocaleError: If Babel has no data for the locale.

    Thread-safe. Result cached per normalized locale.
    """
    require_babel("get_home_currency")
    return _get_home_currency_impl(normalize_locale(locale_id))


# ============================================================================
# TABLE BUILDERS
# ============================================================================


def _entries_with_shared_case_pairs(
    pairs: Mapping[TableKey, DisplayName],
) -> tuple[Entry, ...]:
    """Turn pairs into entries, binding same-valued lower/upper key pairs."""
    entries: list[Entry] = []
    for key, value in pairs.items():
        upper, lower = key.upper(), key.lower()
        shared: str | None = None
        if upper != lower and key in (upper, lower):
            partner = lower if key == upper else upper
            if pairs.get(partner) == value:
                shared = upper
        entries.append(Entry(key, value, shared=shared))
    return tuple(entries)


def build_currency_table(locale_id: LocaleId) -> NameTable:
    """Build a currency_names table from CLDR.

    The home currency symbol (uppercase key) comes first, followed by every
    currency name (lowercase key) in code order.

    Raises:
        BabelImportError: If Babel not installed.
        UnknownLocaleError: If Babel has no data for the locale.
    """
    require_babel("build_currency_table")
    locale = _parse_locale(locale_id, TableKind.CURRENCY_NAMES)

    pairs: dict[TableKey, DisplayName] = {}
    home = _get_home_currency_impl(normalize_locale(locale_id))
    if home is not None and home in locale.currency_symbols:
        pairs[home] = locale.currency_symbols[home]

    for code in sorted(locale.currencies):
        # Filter to ISO 4217 shaped codes (3 uppercase letters)
        if len(code) == 3 and code.isalpha() and code.isupper():
            pairs[code.lower()] = locale.currencies[code]

    return NameTable(
        kind=TableKind.CURRENCY_NAMES,
        locale_id=locale_id,
        entries=_entries_with_shared_case_pairs(pairs),
    )


def build_locale_names_table(locale_id: LocaleId) -> NameTable:
    """Build a locale_names table from CLDR.

    Languages come first, then scripts, then regions, each in key order.
    A key already emitted by an earlier group is not repeated.

    Raises:
        BabelImportError: If Babel not installed.
        UnknownLocaleError: If Babel has no data for the locale.
    """
    require_babel("build_locale_names_table")
    locale = _parse_locale(locale_id, TableKind.LOCALE_NAMES)

    pairs: dict[TableKey, DisplayName] = {}
    for names in (locale.languages, locale.scripts, locale.territories):
        for key in sorted(names):
            pairs.setdefault(key, names[key])

    return NameTable(
        kind=TableKind.LOCALE_NAMES,
        locale_id=locale_id,
        entries=_entries_with_shared_case_pairs(pairs),
    )


def build_table(kind: TableKind | str, locale_id: LocaleId) -> NameTable:
    """Build a table of the given kind from CLDR.

    Raises:
        ValueError: If kind is not a TableKind value.
        BabelImportError: If Babel not installed.
        UnknownLocaleError: If Babel has no data for the locale.
    """
    match TableKind(kind):
        case TableKind.CURRENCY_NAMES:
            return build_currency_table(locale_id)
        case TableKind.LOCALE_NAMES:
            return build_locale_names_table(locale_id)


# ============================================================================
# CACHE MANAGEMENT
# ============================================================================


def clear_cldr_cache() -> None:
    """Clear Babel-derived caches. Thread-safe."""
    _get_home_currency_impl.cache_clear()
    get_babel_locale.cache_clear()

"""Type aliases for the name-table domain.

Provides semantic type aliases used throughout the package and by user code
when annotating lookup call sites.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DisplayName",
    "LocaleId",
    "TableKey",
    "TableSource",
]

type LocaleId = str
"""Table identifier for a locale, matched exactly (e.g., 'ak', 'pt_PT', 'zh_Hant_HK')."""

type TableKey = str
"""Case-sensitive lookup key: currency code ('usd', 'GHS') or subtag ('DE', 'de', 'Latn')."""

type DisplayName = str
"""Localized display string stored in a table."""

type TableSource = str
"""Raw JSON text of a packaged table asset."""

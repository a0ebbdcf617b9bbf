"""Shared constants for cldrnames.

This module provides centralized configuration constants used across the
table, loading and CLDR packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Data assets: Where packaged tables live and how they are named
- Cache limits: Memory bounds for Babel-backed caches
- Input limits: Size constraints on table sources

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Data assets
    "DATA_PACKAGE",
    "DATA_FILE_SUFFIX",
    "SHARED_VALUE_FIELD",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Input limits
    "MAX_TABLE_SOURCE_SIZE",
]

# ============================================================================
# DATA ASSETS
# ============================================================================

# Import path of the package holding <kind>/<locale>.json assets.
DATA_PACKAGE: str = "cldrnames.data"

# File suffix of a table asset.
DATA_FILE_SUFFIX: str = ".json"

# Key of the object form of an entry value: ["de", {"shared": "DE"}].
SHARED_VALUE_FIELD: str = "shared"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel-derived results per function.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Maximum table source size in characters (2 MB).
# The largest generated table is well under 100 KB; anything near this limit
# is not a name table.
MAX_TABLE_SOURCE_SIZE: int = 2 * 1024 * 1024

"""Core utilities shared across the table and CLDR layers.

Exports:
    BabelImportError: Raised when the optional Babel dependency is missing
    is_babel_available: Check whether Babel can be imported
    require_babel: Fail fast with installation guidance

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]

"""Diagnostic system for name-table errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import NameTableError, TableFormatError, UnknownLocaleError
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "NameTableError",
    "TableFormatError",
    "UnknownLocaleError",
]

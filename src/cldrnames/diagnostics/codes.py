"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by exceptions.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (unknown tables)
        2000-2999: Data format errors (malformed table assets)
    """

    # Lookup errors (1000-1999)
    UNKNOWN_LOCALE = 1001

    # Data format errors (2000-2999)
    TABLE_INVALID_JSON = 2001
    TABLE_INVALID_STRUCTURE = 2002
    TABLE_HEADER_MISMATCH = 2003
    TABLE_DUPLICATE_KEY = 2004
    TABLE_UNKNOWN_SHARED_VALUE = 2005
    TABLE_SOURCE_TOO_LARGE = 2006
    TABLE_INVALID_ENCODING = 2007


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_id: Locale of the table involved (None if not applicable)
        kind: Table kind involved (None if not applicable)
        source_path: Human-readable asset path (None if not applicable)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_id: str | None = None
    kind: str | None = None
    source_path: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[UNKNOWN_LOCALE]: No currency_names table for locale 'xx'
              --> currency_names/xx
              = help: Use available_locales() to list known table identifiers

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.source_path is not None:
            lines.append(f"  --> {self.source_path}")
        elif self.kind is not None and self.locale_id is not None:
            lines.append(f"  --> {self.kind}/{self.locale_id}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)

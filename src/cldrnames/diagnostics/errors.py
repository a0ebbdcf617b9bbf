"""Exception hierarchy with structured diagnostics.

Key absence inside a known table is not an error: lookups return None and
the caller walks its fallback chain. The exceptions here cover the two
conditions that are caller or data errors instead.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import replace

from .codes import Diagnostic

__all__ = [
    "NameTableError",
    "TableFormatError",
    "UnknownLocaleError",
]


class NameTableError(Exception):
    """Base exception for all cldrnames errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize NameTableError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    def attach_source_path(self, source_path: str) -> None:
        """Record the asset path in the diagnostic, keeping one already set.

        Args:
            source_path: Human-readable path of the asset being read
        """
        if self.diagnostic is None or self.diagnostic.source_path is not None:
            return
        self.diagnostic = replace(self.diagnostic, source_path=source_path)
        self.args = (self.diagnostic.format_error(),)


class UnknownLocaleError(NameTableError, LookupError):
    """Locale identifier unknown to a registry.

    Distinct from "key not found": a missing key drives fallback, an
    unknown locale usually means a typo or a configuration error.

    Attributes:
        locale_id: The identifier that was requested
        kind: Table kind of the registry that was asked
    """

    def __init__(self, message: str | Diagnostic, *, locale_id: str, kind: str) -> None:
        super().__init__(message)
        self.locale_id = locale_id
        self.kind = kind


class TableFormatError(NameTableError, ValueError):
    """Table asset is malformed (bad JSON, wrong shape, duplicate key).

    Attributes:
        locale_id: Locale of the table being parsed
        kind: Kind of the table being parsed
    """

    def __init__(self, message: str | Diagnostic, *, locale_id: str, kind: str) -> None:
        super().__init__(message)
        self.locale_id = locale_id
        self.kind = kind

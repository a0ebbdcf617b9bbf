"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here so exception constructors never build
    messages inline.
    """

    @staticmethod
    def unknown_locale(locale_id: str, kind: str) -> Diagnostic:
        """Locale identifier has no table of the given kind.

        Args:
            locale_id: The identifier that was requested
            kind: Table kind of the registry that was asked

        Returns:
            Diagnostic for UNKNOWN_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_LOCALE,
            message=f"No {kind} table for locale {locale_id!r}",
            hint=(
                "Locale identifiers are matched exactly (no normalization); "
                "use available_locales() to list known identifiers"
            ),
            locale_id=locale_id,
            kind=kind,
        )

    @staticmethod
    def invalid_json(locale_id: str, kind: str, detail: str) -> Diagnostic:
        """Table source is not valid JSON."""
        return Diagnostic(
            code=DiagnosticCode.TABLE_INVALID_JSON,
            message=f"Table source is not valid JSON: {detail}",
            locale_id=locale_id,
            kind=kind,
        )

    @staticmethod
    def invalid_structure(locale_id: str, kind: str, detail: str) -> Diagnostic:
        """Table source has the wrong shape.

        Args:
            locale_id: Locale of the table being parsed
            kind: Kind of the table being parsed
            detail: What was wrong

        Returns:
            Diagnostic for TABLE_INVALID_STRUCTURE
        """
        return Diagnostic(
            code=DiagnosticCode.TABLE_INVALID_STRUCTURE,
            message=f"Malformed table: {detail}",
            hint='Expected {"kind": ..., "locale": ..., "entries": [[key, value], ...]}',
            locale_id=locale_id,
            kind=kind,
        )

    @staticmethod
    def header_mismatch(
        locale_id: str, kind: str, field: str, expected: str, found: object
    ) -> Diagnostic:
        """Table header names a different locale or kind than requested."""
        return Diagnostic(
            code=DiagnosticCode.TABLE_HEADER_MISMATCH,
            message=f"Table declares {field}={found!r}, expected {expected!r}",
            hint="The asset is stored under the wrong file name or directory",
            locale_id=locale_id,
            kind=kind,
        )

    @staticmethod
    def duplicate_key(locale_id: str, kind: str, key: str) -> Diagnostic:
        """Key appears more than once in one table.

        Args:
            locale_id: Locale of the table being parsed
            kind: Kind of the table being parsed
            key: The repeated key

        Returns:
            Diagnostic for TABLE_DUPLICATE_KEY
        """
        return Diagnostic(
            code=DiagnosticCode.TABLE_DUPLICATE_KEY,
            message=f"Duplicate key {key!r}",
            hint="Keys are unique within a table; keys differing only in case are distinct",
            locale_id=locale_id,
            kind=kind,
        )

    @staticmethod
    def unknown_shared_value(locale_id: str, kind: str, key: str, name: str) -> Diagnostic:
        """Entry refers to a shared value that is not declared."""
        return Diagnostic(
            code=DiagnosticCode.TABLE_UNKNOWN_SHARED_VALUE,
            message=f"Entry {key!r} refers to undeclared shared value {name!r}",
            hint='Declare it in the top-level "shared" object',
            locale_id=locale_id,
            kind=kind,
        )

    @staticmethod
    def source_too_large(locale_id: str, kind: str, size: int, limit: int) -> Diagnostic:
        """Table source exceeds the configured size limit."""
        return Diagnostic(
            code=DiagnosticCode.TABLE_SOURCE_TOO_LARGE,
            message=f"Table source is {size} characters, limit is {limit}",
            locale_id=locale_id,
            kind=kind,
        )

    @staticmethod
    def invalid_encoding(locale_id: str, kind: str, detail: str) -> Diagnostic:
        """Table source bytes are not valid UTF-8."""
        return Diagnostic(
            code=DiagnosticCode.TABLE_INVALID_ENCODING,
            message=f"Table source is not valid UTF-8: {detail}",
            hint="Table assets are UTF-8 JSON; regenerate the file",
            locale_id=locale_id,
            kind=kind,
        )

"""Enumerations for cldrnames type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class TableKind(StrEnum):
    """Bundle family a table belongs to.

    The value doubles as the data directory name and the ``kind`` field of
    a table asset: str(TableKind.CURRENCY_NAMES) == "currency_names"
    """

    CURRENCY_NAMES = "currency_names"
    """Currency code -> display name (lowercase) or symbol (uppercase)"""

    LOCALE_NAMES = "locale_names"
    """Language, script and region subtag -> display name"""


class LoadStatus(StrEnum):
    """Outcome of a single table load attempt.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Table source read and parsed"""

    NOT_FOUND = "not_found"
    """No asset exists for the requested locale"""

    ERROR = "error"
    """Asset exists but could not be read or parsed"""


__all__ = [
    "LoadStatus",
    "TableKind",
]

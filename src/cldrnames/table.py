"""Immutable name tables and their JSON asset format.

A table is an ordered sequence of (key, value) entries scoped to one locale
and one TableKind. Keys are case-sensitive and unique; lookups are O(1)
through an index built once at construction.

Asset format (one UTF-8 JSON document per table):

    {
      "kind": "locale_names",
      "locale": "ak",
      "shared": {"DE": "Gyaaman"},
      "entries": [["PR", "Pu\\u025bto Riko"], ["de", {"shared": "DE"}], ...]
    }

Entries referring to the same shared value keep distinct keys but hold the
very same string object, mirroring how the generated source bundles declare
one constant and reuse it under several keys.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from cldrnames.constants import MAX_TABLE_SOURCE_SIZE, SHARED_VALUE_FIELD
from cldrnames.diagnostics import ErrorTemplate, TableFormatError
from cldrnames.enums import TableKind
from cldrnames.types import DisplayName, LocaleId, TableKey, TableSource

__all__ = [
    "Entry",
    "NameTable",
    "dump_table",
    "parse_table",
]


@dataclass(frozen=True, slots=True)
class Entry:
    """Single (key, value) pair of a table.

    Attributes:
        key: Case-sensitive lookup key
        value: Display string, code points exactly as stored
        shared: Name of the shared value this entry refers to, or None
    """

    key: TableKey
    value: DisplayName
    shared: str | None = None


@dataclass(frozen=True, slots=True)
class NameTable:
    """Immutable, ordered key -> display string table for one locale.

    Thread-safe: never mutated after construction.

    Example:
        >>> table = NameTable.from_pairs("currency_names", "ak", [("eur", "Iro")])
        >>> table.lookup("eur")
        'Iro'
        >>> table.lookup("EUR") is None
        True

    Attributes:
        kind: Bundle family of the table
        locale_id: Locale identifier the table is scoped to
        entries: Entries in source order
    """

    kind: TableKind
    locale_id: LocaleId
    entries: tuple[Entry, ...]
    _index: Mapping[TableKey, Entry] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Build the key index and check table invariants.

        Raises:
            TableFormatError: On duplicate keys, or when one shared value name
                is attached to entries with different values
        """
        index: dict[TableKey, Entry] = {}
        shared_values: dict[str, DisplayName] = {}
        for entry in self.entries:
            if entry.key in index:
                raise TableFormatError(
                    ErrorTemplate.duplicate_key(self.locale_id, self.kind, entry.key),
                    locale_id=self.locale_id,
                    kind=self.kind,
                )
            if entry.shared is not None:
                previous = shared_values.setdefault(entry.shared, entry.value)
                if previous != entry.value:
                    detail = f"shared value {entry.shared!r} bound to different strings"
                    raise TableFormatError(
                        ErrorTemplate.invalid_structure(self.locale_id, self.kind, detail),
                        locale_id=self.locale_id,
                        kind=self.kind,
                    )
            index[entry.key] = entry
        object.__setattr__(self, "_index", MappingProxyType(index))

    @classmethod
    def from_pairs(
        cls,
        kind: TableKind | str,
        locale_id: LocaleId,
        pairs: Iterable[tuple[TableKey, DisplayName]],
    ) -> NameTable:
        """Build a table from plain (key, value) pairs without shared values."""
        return cls(
            kind=TableKind(kind),
            locale_id=locale_id,
            entries=tuple(Entry(key, value) for key, value in pairs),
        )

    def lookup(self, key: TableKey) -> DisplayName | None:
        """Return the value stored under key, or None if absent.

        Absence is not an error: the caller decides whether to fall back
        to a parent locale.
        """
        entry = self._index.get(key)
        return entry.value if entry is not None else None

    def get_entry(self, key: TableKey) -> Entry | None:
        """Return the full Entry stored under key, or None if absent."""
        return self._index.get(key)

    def shares_value(self, key_a: TableKey, key_b: TableKey) -> bool:
        """Check whether two present keys were declared against one shared value."""
        entry_a = self._index.get(key_a)
        entry_b = self._index.get(key_b)
        if entry_a is None or entry_b is None or entry_a.shared is None:
            return False
        return entry_a.shared == entry_b.shared

    def keys(self) -> tuple[TableKey, ...]:
        """Keys in source order."""
        return tuple(entry.key for entry in self.entries)

    def items(self) -> tuple[tuple[TableKey, DisplayName], ...]:
        """(key, value) pairs in source order."""
        return tuple((entry.key, entry.value) for entry in self.entries)

    def __getitem__(self, key: TableKey) -> DisplayName:
        return self._index[key].value

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[TableKey]:
        return (entry.key for entry in self.entries)

    def __len__(self) -> int:
        return len(self.entries)


# ============================================================================
# ASSET PARSING
# ============================================================================


def _structure_error(locale_id: str, kind: str, detail: str) -> TableFormatError:
    return TableFormatError(
        ErrorTemplate.invalid_structure(locale_id, kind, detail),
        locale_id=locale_id,
        kind=kind,
    )


def _parse_shared(raw: object, locale_id: str, kind: str) -> dict[str, DisplayName]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise _structure_error(locale_id, kind, '"shared" must be an object')
    for name, value in raw.items():
        if not isinstance(value, str):
            raise _structure_error(locale_id, kind, f"shared value {name!r} is not a string")
    return raw


def _parse_entry(
    raw: object,
    position: int,
    shared: Mapping[str, DisplayName],
    locale_id: str,
    kind: str,
) -> Entry:
    if not isinstance(raw, list) or len(raw) != 2:
        raise _structure_error(locale_id, kind, f"entry #{position} is not a [key, value] pair")
    key, value = raw
    if not isinstance(key, str) or not key:
        raise _structure_error(locale_id, kind, f"entry #{position} has an empty or non-string key")
    if isinstance(value, str):
        return Entry(key, value)
    if isinstance(value, dict) and set(value) == {SHARED_VALUE_FIELD}:
        name = value[SHARED_VALUE_FIELD]
        if not isinstance(name, str) or name not in shared:
            raise TableFormatError(
                ErrorTemplate.unknown_shared_value(locale_id, kind, key, str(name)),
                locale_id=locale_id,
                kind=kind,
            )
        # Same str object for every entry bound to this name
        return Entry(key, shared[name], shared=name)
    raise _structure_error(locale_id, kind, f"entry {key!r} has an invalid value")


def parse_table(
    source: TableSource,
    *,
    kind: TableKind | str,
    locale_id: LocaleId,
    max_source_size: int = MAX_TABLE_SOURCE_SIZE,
) -> NameTable:
    """Parse a JSON table asset.

    Args:
        source: Raw JSON text
        kind: Kind the caller expects; must match the asset header
        locale_id: Locale the caller expects; must match the asset header
        max_source_size: Reject sources longer than this many characters

    Returns:
        The parsed, immutable NameTable

    Raises:
        TableFormatError: If the source is oversized, not JSON, has the wrong
            shape, names a different kind/locale, repeats a key, or refers to
            an undeclared shared value
    """
    kind = TableKind(kind)
    if len(source) > max_source_size:
        raise TableFormatError(
            ErrorTemplate.source_too_large(locale_id, kind, len(source), max_source_size),
            locale_id=locale_id,
            kind=kind,
        )
    try:
        document = json.loads(source)
    except json.JSONDecodeError as e:
        raise TableFormatError(
            ErrorTemplate.invalid_json(locale_id, kind, str(e)),
            locale_id=locale_id,
            kind=kind,
        ) from e

    if not isinstance(document, dict):
        raise _structure_error(locale_id, kind, "top level must be an object")
    for field_name, expected in (("kind", str(kind)), ("locale", locale_id)):
        found = document.get(field_name)
        if found != expected:
            raise TableFormatError(
                ErrorTemplate.header_mismatch(locale_id, kind, field_name, expected, found),
                locale_id=locale_id,
                kind=kind,
            )

    shared = _parse_shared(document.get("shared"), locale_id, kind)
    raw_entries = document.get("entries")
    if not isinstance(raw_entries, list):
        raise _structure_error(locale_id, kind, '"entries" must be an array')

    entries = tuple(
        _parse_entry(raw, position, shared, locale_id, kind)
        for position, raw in enumerate(raw_entries)
    )
    return NameTable(kind=kind, locale_id=locale_id, entries=entries)


# ============================================================================
# ASSET SERIALIZATION
# ============================================================================


def _dump_json(value: object) -> str:
    # ensure_ascii keeps non-Latin text as \uXXXX escapes, like the assets
    return json.dumps(value, ensure_ascii=True)


def dump_table(table: NameTable) -> TableSource:
    """Serialize a table in the asset format (one entry per line).

    Shared values are emitted in order of first use. parse_table() of the
    result yields a table equal to the input.
    """
    shared: dict[str, DisplayName] = {}
    for entry in table.entries:
        if entry.shared is not None:
            shared.setdefault(entry.shared, entry.value)

    lines = [
        "{",
        f'  "kind": {_dump_json(str(table.kind))},',
        f'  "locale": {_dump_json(table.locale_id)},',
    ]
    if shared:
        lines.append('  "shared": {')
        lines.append(
            ",\n".join(f"    {_dump_json(name)}: {_dump_json(value)}" for name, value in shared.items())
        )
        lines.append("  },")
    if table.entries:
        lines.append('  "entries": [')
        rendered = [
            _dump_json([entry.key, {SHARED_VALUE_FIELD: entry.shared}])
            if entry.shared is not None
            else _dump_json([entry.key, entry.value])
            for entry in table.entries
        ]
        lines.append(",\n".join(f"    {line}" for line in rendered))
        lines.append("  ]")
    else:
        lines.append('  "entries": []')
    lines.append("}")
    return "\n".join(lines) + "\n"

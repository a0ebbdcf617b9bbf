"""Tests for NameTableRegistry and the packaged tables.

Covers the lookup contract consumed by locale-fallback resolvers:
- stored values returned byte-for-byte
- absent keys reported as None
- unknown locale identifiers reported as UnknownLocaleError
- exact, case-sensitive matching with no locale normalization
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from cldrnames import (
    CURRENCY_NAMES,
    LOCALE_NAMES,
    NameTableRegistry,
    TableKind,
    UnknownLocaleError,
    get_registry,
    lookup_currency_name,
    lookup_locale_name,
)
from cldrnames.diagnostics import DiagnosticCode, NameTableError, TableFormatError
from cldrnames.enums import LoadStatus
from cldrnames.loading import PathTableLoader
from cldrnames.table import NameTable


class DictLoader:
    """In-memory loader keyed by (kind, locale)."""

    def __init__(self, sources: dict[tuple[str, str], str]) -> None:
        self.sources = sources
        self.load_calls: list[tuple[str, str]] = []

    def load(self, kind: TableKind, locale: str) -> str:
        self.load_calls.append((kind, locale))
        try:
            return self.sources[(kind, locale)]
        except KeyError:
            raise FileNotFoundError(f"{kind}/{locale}") from None

    def list_locales(self, kind: TableKind) -> frozenset[str]:
        return frozenset(locale for k, locale in self.sources if k == kind)

    def describe_path(self, kind: TableKind, locale: str) -> str:
        return f"memory:{kind}/{locale}"


def _source(locale: str, entries: str, kind: str = "currency_names") -> str:
    return f'{{"kind": "{kind}", "locale": "{locale}", "entries": {entries}}}'


class TestPackagedCurrencyNames:
    """Concrete currency_names scenarios."""

    def test_ak_usd_name(self) -> None:
        assert CURRENCY_NAMES.lookup("ak", "usd") == "Amɛrika Dɔla"

    def test_ak_home_currency_symbol(self) -> None:
        assert CURRENCY_NAMES.lookup("ak", "GHS") == "GH₵"
        assert CURRENCY_NAMES.lookup("ak", "ghs") == "Ghana Sidi"

    def test_ak_case_sensitivity(self) -> None:
        assert CURRENCY_NAMES.lookup("ak", "eur") == "Iro"
        assert CURRENCY_NAMES.lookup("ak", "EUR") is None

    @pytest.mark.parametrize(
        ("locale_id", "symbol_key", "symbol"),
        [
            ("bez", "TZS", "TSh"),
            ("naq", "NAD", "$"),
            ("gsw", "CHF", "CHF"),
            ("gsw", "USD", "$"),
            ("ps", "AFN", "؋"),
        ],
    )
    def test_uppercase_symbol_entries(self, locale_id: str, symbol_key: str, symbol: str) -> None:
        assert CURRENCY_NAMES.lookup(locale_id, symbol_key) == symbol

    def test_absent_key_returns_none(self) -> None:
        assert CURRENCY_NAMES.lookup("ak", "xyz") is None
        assert CURRENCY_NAMES.lookup("ak", "") is None

    def test_module_level_lookup(self) -> None:
        assert lookup_currency_name("ak", "usd") == CURRENCY_NAMES.lookup("ak", "usd")


class TestPackagedLocaleNames:
    """Concrete locale_names scenarios."""

    def test_haw_germany_and_german_share_one_value(self) -> None:
        assert LOCALE_NAMES.lookup("haw", "DE") == "Kelemānia"
        assert LOCALE_NAMES.lookup("haw", "de") == "Kelemānia"

    def test_haw_shared_keys_remain_distinct_entries(self) -> None:
        table = LOCALE_NAMES.get_table("haw")
        upper = table.get_entry("DE")
        lower = table.get_entry("de")
        assert upper is not None
        assert lower is not None
        assert upper.key == "DE"
        assert lower.key == "de"
        assert table.shares_value("DE", "de")

    def test_ak_shared_value_from_generated_bundle(self) -> None:
        assert LOCALE_NAMES.lookup("ak", "de") == "Gyaaman"
        assert LOCALE_NAMES.get_table("ak").shares_value("de", "DE")

    def test_ak_locale_names_are_separate_from_currency_names(self) -> None:
        assert LOCALE_NAMES.lookup("ak", "PT") == "Pɔtugal"
        assert LOCALE_NAMES.lookup("ak", "usd") is None

    def test_script_and_tag_keys(self) -> None:
        assert LOCALE_NAMES.lookup("haw", "zh_Hant") == "Pākē Kuʻuna"

    def test_module_level_lookup(self) -> None:
        assert lookup_locale_name("haw", "haw") == "ʻŌlelo Hawaiʻi"


class TestUnknownLocale:
    """Unknown locale identifiers are distinct from absent keys."""

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises(UnknownLocaleError) as exc_info:
            CURRENCY_NAMES.lookup("xx_UNKNOWN", "usd")
        error = exc_info.value
        assert error.locale_id == "xx_UNKNOWN"
        assert error.kind == TableKind.CURRENCY_NAMES
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.UNKNOWN_LOCALE

    def test_unknown_locale_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            LOCALE_NAMES.lookup("xx", "DE")
        with pytest.raises(NameTableError):
            LOCALE_NAMES.lookup("xx", "DE")

    @pytest.mark.parametrize("locale_id", ["pt-PT", "PT_pt", "pt_pt", "AK", " ak", "ak "])
    def test_no_locale_normalization(self, locale_id: str) -> None:
        registry = CURRENCY_NAMES if locale_id.strip().lower() == "ak" else LOCALE_NAMES
        with pytest.raises(UnknownLocaleError):
            registry.lookup(locale_id, "usd")

    def test_locale_with_table_of_other_kind_only(self) -> None:
        # haw has locale names but no currency table
        assert LOCALE_NAMES.has_locale("haw")
        assert not CURRENCY_NAMES.has_locale("haw")
        with pytest.raises(UnknownLocaleError):
            CURRENCY_NAMES.lookup("haw", "usd")

    def test_unknown_locale_is_not_cached(self) -> None:
        registry = NameTableRegistry(TableKind.CURRENCY_NAMES)
        for _ in range(2):
            with pytest.raises(UnknownLocaleError):
                registry.get_table("xx")
        assert "xx" not in registry.loaded_locales()


class TestPackagedData:
    """Every packaged table loads and honors the table invariants."""

    @pytest.mark.parametrize("kind", list(TableKind))
    def test_every_packaged_table_loads(self, kind: TableKind) -> None:
        registry = NameTableRegistry(kind)
        summary = registry.preload()
        assert summary.all_successful, summary.get_errors()
        assert summary.total_attempted == len(registry.available_locales())
        assert summary.entry_count > 0

    @pytest.mark.parametrize("kind", list(TableKind))
    def test_enumeration_round_trip(self, kind: TableKind) -> None:
        registry = NameTableRegistry(kind)
        for locale_id in sorted(registry.available_locales()):
            table = registry.get_table(locale_id)
            for key, value in table.items():
                assert registry.lookup(locale_id, key) == value

    def test_expected_locales_are_packaged(self) -> None:
        assert {"ak", "bez", "gsw", "mzn", "naq", "ps"} <= CURRENCY_NAMES.available_locales()
        assert {"ak", "haw", "pt_PT", "zh_Hant_HK", "yo_BJ"} <= LOCALE_NAMES.available_locales()

    def test_get_registry(self) -> None:
        assert get_registry(TableKind.CURRENCY_NAMES) is CURRENCY_NAMES
        assert get_registry("locale_names") is LOCALE_NAMES
        with pytest.raises(ValueError, match="time_zone_names"):
            get_registry("time_zone_names")


class TestRegistryLifecycle:
    """Lazy construction, caching and preload reporting."""

    def test_table_built_once_and_reused(self) -> None:
        loader = DictLoader({("currency_names", "ak"): _source("ak", '[["eur", "Iro"]]')})
        registry = NameTableRegistry("currency_names", loader=loader)

        first = registry.get_table("ak")
        second = registry.get_table("ak")

        assert first is second
        assert loader.load_calls == [("currency_names", "ak")]
        assert registry.loaded_locales() == frozenset({"ak"})

    def test_tables_are_lazy(self) -> None:
        loader = DictLoader({("currency_names", "ak"): _source("ak", "[]")})
        registry = NameTableRegistry("currency_names", loader=loader)
        assert registry.available_locales() == frozenset({"ak"})
        assert loader.load_calls == []
        assert registry.loaded_locales() == frozenset()

    def test_clear_cache_rebuilds(self) -> None:
        loader = DictLoader({("currency_names", "ak"): _source("ak", '[["eur", "Iro"]]')})
        registry = NameTableRegistry("currency_names", loader=loader)
        first = registry.get_table("ak")

        registry.clear_cache()
        assert registry.loaded_locales() == frozenset()

        second = registry.get_table("ak")
        assert second == first
        assert second is not first
        assert len(loader.load_calls) == 2

    def test_clear_cache_relists_locales(self) -> None:
        loader = DictLoader({("currency_names", "ak"): _source("ak", "[]")})
        registry = NameTableRegistry("currency_names", loader=loader)
        assert not registry.has_locale("bez")

        loader.sources[("currency_names", "bez")] = _source("bez", "[]")
        assert not registry.has_locale("bez")
        registry.clear_cache()
        assert registry.has_locale("bez")

    def test_kind_and_loader_properties(self) -> None:
        loader = DictLoader({})
        registry = NameTableRegistry("locale_names", loader=loader)
        assert registry.kind is TableKind.LOCALE_NAMES
        assert registry.loader is loader
        assert "locale_names" in repr(registry)

    def test_invalid_kind_rejected(self) -> None:
        with pytest.raises(ValueError):
            NameTableRegistry("time_zone_names")

    def test_malformed_table_propagates_from_lookup(self) -> None:
        loader = DictLoader({("currency_names", "ak"): "{broken"})
        registry = NameTableRegistry("currency_names", loader=loader)
        with pytest.raises(ValueError, match="not valid JSON"):
            registry.lookup("ak", "usd")
        assert registry.loaded_locales() == frozenset()

    def test_preload_reports_each_outcome(self, caplog: pytest.LogCaptureFixture) -> None:
        loader = DictLoader(
            {
                ("currency_names", "ak"): _source("ak", '[["eur", "Iro"], ["usd", "x"]]'),
                ("currency_names", "bez"): "{broken",
            }
        )
        registry = NameTableRegistry("currency_names", loader=loader)

        with caplog.at_level(logging.INFO, logger="cldrnames.registry"):
            summary = registry.preload(["ak", "bez", "xx"])

        statuses = {r.locale: r.status for r in summary.results}
        assert statuses == {
            "ak": LoadStatus.SUCCESS,
            "bez": LoadStatus.ERROR,
            "xx": LoadStatus.NOT_FOUND,
        }
        assert summary.successful == 1
        assert summary.errors == 1
        assert summary.not_found == 1
        assert summary.entry_count == 2
        assert summary.has_errors
        assert not summary.all_successful
        assert summary.get_errors()[0].source_path == "memory:currency_names/bez"
        assert summary.get_not_found()[0].locale == "xx"
        assert summary.get_successful()[0].entry_count == 2
        assert "Failed to load memory:currency_names/bez" in caplog.text
        assert "Preloaded currency_names tables" in caplog.text
        assert "LoadSummary(total=3" in repr(summary)

    def test_listed_locale_missing_on_load_is_not_found(self) -> None:
        class StaleLoader(DictLoader):
            def list_locales(self, kind: TableKind) -> frozenset[str]:
                return frozenset({"ak"})

        registry = NameTableRegistry("currency_names", loader=StaleLoader({}))
        summary = registry.preload()
        assert summary.results[0].status is LoadStatus.NOT_FOUND
        with pytest.raises(FileNotFoundError):
            registry.lookup("ak", "usd")

    def test_get_table_returns_name_table(self) -> None:
        assert isinstance(CURRENCY_NAMES.get_table("ak"), NameTable)


class TestAssetErrorsFromDisk:
    """Data errors surface as TableFormatError carrying the asset path."""

    @staticmethod
    def _registry(tmp_path: Path, payload: bytes) -> NameTableRegistry:
        asset = tmp_path / "currency_names" / "ak.json"
        asset.parent.mkdir(parents=True)
        asset.write_bytes(payload)
        loader = PathTableLoader(str(tmp_path / "{kind}"))
        return NameTableRegistry(TableKind.CURRENCY_NAMES, loader=loader)

    def test_invalid_utf8_raises_table_format_error(self, tmp_path: Path) -> None:
        registry = self._registry(
            tmp_path,
            b'{"kind": "currency_names", "locale": "ak", "entries": [["usd", "\xff"]]}',
        )

        with pytest.raises(TableFormatError) as exc_info:
            registry.lookup("ak", "usd")

        error = exc_info.value
        assert isinstance(error, NameTableError)
        assert isinstance(error.__cause__, UnicodeDecodeError)
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.TABLE_INVALID_ENCODING
        assert error.diagnostic.source_path is not None
        assert error.diagnostic.source_path.endswith("currency_names/ak.json")
        assert registry.loaded_locales() == frozenset()

    def test_invalid_utf8_reported_by_preload(self, tmp_path: Path) -> None:
        registry = self._registry(tmp_path, b"\xff\xfe")
        summary = registry.preload()
        assert summary.errors == 1
        assert isinstance(summary.get_errors()[0].error, TableFormatError)

    def test_malformed_json_names_the_asset(self, tmp_path: Path) -> None:
        registry = self._registry(tmp_path, b"{broken")

        with pytest.raises(TableFormatError) as exc_info:
            registry.get_table("ak")

        error = exc_info.value
        assert error.diagnostic is not None
        assert error.diagnostic.code is DiagnosticCode.TABLE_INVALID_JSON
        expected = registry.loader.describe_path(TableKind.CURRENCY_NAMES, "ak")
        assert error.diagnostic.source_path == expected
        assert f"  --> {expected}" in str(error)

    def test_duplicate_key_names_the_asset(self, tmp_path: Path) -> None:
        registry = self._registry(
            tmp_path,
            b'{"kind": "currency_names", "locale": "ak", '
            b'"entries": [["usd", "a"], ["usd", "b"]]}',
        )
        with pytest.raises(TableFormatError) as exc_info:
            registry.get_table("ak")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.TABLE_DUPLICATE_KEY
        assert "currency_names/ak.json" in str(exc_info.value)

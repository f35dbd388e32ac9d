"""Tests for the szflags.json reader and registry cross-check."""

import json
from pathlib import Path
from typing import Any

import pytest

from szflags.errors import MetaDataError
from szflags.flags import KIND_AGGREGATE, KIND_ALIAS, KIND_BIT, AggregateFlag, AliasFlag, BitFlag
from szflags.groups import RELATION_SET, UsageGroup
from szflags.metadata import FlagsMetaData, Mismatch
from szflags.registry import FlagRegistry, get_registry

DATA_PATH = Path(__file__).parent / "data" / "szflags.json"


def _entry(**overrides: Any) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "symbol": "SZ_X",
        "bits": [3],
        "value": 8,
        "definition": "1 << 3",
        "groups": ["SZ_SEARCH_FLAGS"],
    }
    entry.update(overrides)
    return entry


def _load(*entries: dict[str, Any]) -> FlagsMetaData:
    return FlagsMetaData.from_json(json.dumps(list(entries)))


# ---------------------------------------------------------------------------
# Shipped description
# ---------------------------------------------------------------------------


class TestShippedDescription:
    def test_loads(self) -> None:
        meta = FlagsMetaData.load(DATA_PATH)
        assert len(meta) == len(get_registry().symbols)

    def test_matches_registry(self) -> None:
        meta = FlagsMetaData.load(DATA_PATH)
        assert meta.compare_registry(get_registry()) == []

    def test_builds_identical_registry(self) -> None:
        meta = FlagsMetaData.load(DATA_PATH)
        rebuilt = FlagRegistry.build(meta.to_table())
        assert rebuilt.symbols == get_registry().symbols
        assert dict(rebuilt.aliases) == dict(get_registry().aliases)

    def test_base_and_aggregate_split(self) -> None:
        meta = FlagsMetaData.load(DATA_PATH)
        assert len(meta.base_flags) + len(meta.aggregate_flags) == len(meta)
        assert all(e.kind == KIND_AGGREGATE for e in meta.aggregate_flags)

    def test_lookup(self) -> None:
        meta = FlagsMetaData.load(DATA_PATH)
        assert "SZ_WITH_INFO" in meta
        entry = meta.get("SZ_SEARCH_INCLUDE_NAME_ONLY")
        assert entry is not None
        assert entry.kind == KIND_ALIAS
        assert entry.definition == ("SZ_EXPORT_INCLUDE_NAME_ONLY",)
        assert meta.get("SZ_NOPE") is None

    def test_flags_in_group(self) -> None:
        meta = FlagsMetaData.load(DATA_PATH)
        names = [e.symbol for e in meta.flags_in_group(UsageGroup.MODIFY)]
        assert names == ["SZ_WITH_INFO", "SZ_MODIFY_ALL_FLAGS"]


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


class TestParse:
    def test_bit_entry(self) -> None:
        entry = next(iter(_load(_entry())))
        assert entry.bit == 3
        assert entry.kind == KIND_BIT
        assert entry.groups == UsageGroup.SEARCH
        assert entry.flags is None

    def test_aggregate_entry(self) -> None:
        meta = _load(
            _entry(),
            _entry(
                symbol="SZ_XX",
                definition=["SZ_X"],
                groups=["SZ_SEARCH_FLAGS"],
                flags=["SZ_X"],
            ),
        )
        entry = meta.get("SZ_XX")
        assert entry is not None
        assert entry.aggregate
        assert entry.flags == ("SZ_X",)

    def test_to_table(self) -> None:
        meta = _load(
            _entry(symbol="SZ_A", groups=["SZ_EXPORT_FLAGS"]),
            _entry(symbol="SZ_B", definition=["SZ_A"]),
            _entry(symbol="SZ_C", definition=["SZ_A"], groups=["SZ_EXPORT_FLAGS"], flags=["SZ_A"]),
        )
        assert meta.to_table() == [
            BitFlag("SZ_A", 3, UsageGroup.EXPORT),
            AliasFlag("SZ_B", "SZ_A", UsageGroup.SEARCH),
            AggregateFlag("SZ_C", ("SZ_A",), UsageGroup.EXPORT),
        ]

    def test_short_group_labels(self) -> None:
        entry = next(iter(_load(_entry(groups=["search", "EXPORT"]))))
        assert entry.groups == UsageGroup.SEARCH | UsageGroup.EXPORT

    def test_relation_groups(self) -> None:
        labels = [f"SZ_{name}_FLAGS" for name in ("ENTITY", "FIND_PATH", "FIND_NETWORK", "SEARCH", "EXPORT", "WHY")]
        entry = next(iter(_load(_entry(groups=labels))))
        assert entry.groups == RELATION_SET


class TestParseErrors:
    def test_invalid_json(self) -> None:
        with pytest.raises(MetaDataError, match="Invalid JSON"):
            FlagsMetaData.from_json("{not json")

    def test_not_an_array(self) -> None:
        with pytest.raises(MetaDataError, match="array"):
            FlagsMetaData.from_json('{"symbol": "SZ_X"}')

    def test_entry_not_object(self) -> None:
        with pytest.raises(MetaDataError, match="expected an object"):
            FlagsMetaData.from_json("[1]")

    def test_missing_symbol(self) -> None:
        with pytest.raises(MetaDataError, match="symbol"):
            _load(_entry(symbol=""))

    def test_value_mismatch(self) -> None:
        with pytest.raises(MetaDataError, match="does not match"):
            _load(_entry(value=9))

    def test_bits_out_of_range(self) -> None:
        with pytest.raises(MetaDataError, match="bit indices"):
            _load(_entry(bits=[64], value=1 << 64))

    def test_bits_unsorted(self) -> None:
        with pytest.raises(MetaDataError, match="ascending"):
            _load(_entry(bits=[3, 1], value=10))

    def test_unknown_group(self) -> None:
        with pytest.raises(MetaDataError, match="Unknown usage group"):
            _load(_entry(groups=["SZ_BOGUS_FLAGS"]))

    def test_empty_groups(self) -> None:
        with pytest.raises(MetaDataError, match="groups"):
            _load(_entry(groups=[]))

    def test_bad_definition(self) -> None:
        with pytest.raises(MetaDataError, match="definition"):
            _load(_entry(definition=3))

    def test_bad_flags(self) -> None:
        with pytest.raises(MetaDataError, match="flags"):
            _load(_entry(flags="SZ_X"))

    def test_duplicate_symbol(self) -> None:
        with pytest.raises(MetaDataError, match="Duplicate"):
            _load(_entry(), _entry())

    def test_bool_value_rejected(self) -> None:
        with pytest.raises(MetaDataError, match="integer"):
            _load(_entry(bits=[0], value=True))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(MetaDataError, match="Cannot read"):
            FlagsMetaData.load(tmp_path / "missing.json")

    def test_base_with_two_names(self) -> None:
        meta = _load(_entry(definition=["SZ_A", "SZ_B"]))
        with pytest.raises(MetaDataError, match="base flag"):
            meta.to_table()


# ---------------------------------------------------------------------------
# compare_registry()
# ---------------------------------------------------------------------------


class TestCompareRegistry:
    def _registry(self) -> FlagRegistry:
        return FlagRegistry.build(
            [
                BitFlag("SZ_A", 3, UsageGroup.SEARCH),
                AggregateFlag("SZ_AA", ("SZ_A",), UsageGroup.SEARCH),
            ]
        )

    def _meta(self, **overrides: Any) -> FlagsMetaData:
        return _load(
            _entry(symbol="SZ_A", **overrides),
            _entry(symbol="SZ_AA", definition=["SZ_A"], flags=["SZ_A"]),
        )

    def test_clean(self) -> None:
        assert self._meta().compare_registry(self._registry()) == []

    def test_value_and_bits_differ(self) -> None:
        mismatches = self._meta(bits=[4], value=16, definition="1 << 4").compare_registry(
            self._registry()
        )
        fields = {m.field for m in mismatches if m.symbol == "SZ_A"}
        assert fields == {"value", "bits", "definition"}

    def test_groups_differ(self) -> None:
        mismatches = self._meta(groups=["SZ_SEARCH_FLAGS", "SZ_WHY_FLAGS"]).compare_registry(
            self._registry()
        )
        assert mismatches == [
            Mismatch(
                "SZ_A",
                "groups",
                "['SZ_SEARCH_FLAGS', 'SZ_WHY_FLAGS']",
                "['SZ_SEARCH_FLAGS']",
            )
        ]

    def test_kind_differs(self) -> None:
        meta = _load(
            _entry(symbol="SZ_A"),
            _entry(symbol="SZ_AA", definition=["SZ_A"]),
        )
        mismatches = meta.compare_registry(self._registry())
        assert {m.field for m in mismatches} == {"kind", "flags"}

    def test_missing_on_either_side(self) -> None:
        meta = _load(_entry(symbol="SZ_A"), _entry(symbol="SZ_NEW", bits=[5], value=32, definition="1 << 5"))
        mismatches = meta.compare_registry(self._registry())
        assert Mismatch("SZ_NEW", "presence", "declared", "missing") in mismatches
        assert Mismatch("SZ_AA", "presence", "missing", "declared") in mismatches

    def test_str(self) -> None:
        m = Mismatch("SZ_A", "value", "8", "16")
        assert str(m) == "SZ_A: value differs (description: 8, registry: 16)"

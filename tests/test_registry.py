"""Tests for building the flag registry from a declarative table."""

import threading

import pytest

from szflags import registry as registry_module
from szflags.errors import FlagConfigurationError, FlagNotFoundError, InvalidFlagArgumentError
from szflags.flag_data import FLAG_TABLE
from szflags.flags import KIND_AGGREGATE, KIND_ALIAS, KIND_BIT, AggregateFlag, AliasFlag, BitFlag
from szflags.groups import SINGLE_GROUPS, UsageGroup
from szflags.registry import FlagRegistry, get_registry

S = UsageGroup.SEARCH
E = UsageGroup.EXPORT


def _small_table() -> list:
    return [
        BitFlag("A", 0, E),
        BitFlag("B", 1, E | S),
        AliasFlag("A_SEARCH", "A", S),
        AggregateFlag("AB", ("A", "B"), E),
    ]


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------


class TestBuild:
    def test_values(self) -> None:
        reg = FlagRegistry.build(_small_table())
        assert reg.by_name["A"].value == 1
        assert reg.by_name["B"].value == 2
        assert reg.by_name["A_SEARCH"].value == 1
        assert reg.by_name["AB"].value == 3

    def test_kinds_and_definitions(self) -> None:
        reg = FlagRegistry.build(_small_table())
        assert reg.by_name["A"].kind == KIND_BIT
        assert reg.by_name["A"].definition == ("1 << 0",)
        assert reg.by_name["A_SEARCH"].kind == KIND_ALIAS
        assert reg.by_name["A_SEARCH"].definition == ("A",)
        assert reg.by_name["AB"].kind == KIND_AGGREGATE
        assert reg.by_name["AB"].definition == ("A", "B")
        assert reg.by_name["AB"].base_flags == ("A", "B")

    def test_declaration_order(self) -> None:
        reg = FlagRegistry.build(_small_table())
        assert [s.name for s in reg.symbols] == ["A", "B", "A_SEARCH", "AB"]

    def test_group_indices(self) -> None:
        reg = FlagRegistry.build(_small_table())
        export = reg.groups[E]
        assert dict(export.by_name) == {"A": 1, "B": 2}
        assert dict(export.by_value) == {1: "A", 2: "B"}
        assert dict(export.aggregates) == {"AB": 3}
        assert export.aggregate_value == 3
        search = reg.groups[S]
        assert dict(search.by_value) == {2: "B", 1: "A_SEARCH"}
        assert search.aggregate_value == 3

    def test_empty_groups_present(self) -> None:
        reg = FlagRegistry.build(_small_table())
        assert set(reg.groups) == set(SINGLE_GROUPS)
        assert reg.groups[UsageGroup.HOW].aggregate_value == 0
        assert len(reg.groups[UsageGroup.HOW].by_name) == 0

    def test_aliases_sorted_base_only(self) -> None:
        reg = FlagRegistry.build(_small_table())
        assert reg.aliases[1] == ("A", "A_SEARCH")
        assert reg.aliases[2] == ("B",)
        assert 3 not in reg.aliases

    def test_by_value_includes_aggregates(self) -> None:
        table = _small_table() + [AggregateFlag("JUST_B", ("B",), E)]
        reg = FlagRegistry.build(table)
        assert [s.name for s in reg.by_value[2]] == ["B", "JUST_B"]
        assert reg.groups[E].by_value[2] == "B"

    def test_nested_aggregate_base_flags(self) -> None:
        table = _small_table() + [
            BitFlag("C", 5, E),
            AggregateFlag("ABC", ("AB", "C", "A"), E),
        ]
        reg = FlagRegistry.build(table)
        assert reg.by_name["ABC"].base_flags == ("A", "B", "C")
        assert reg.by_name["ABC"].value == 0b100011

    def test_indices_are_read_only(self) -> None:
        reg = FlagRegistry.build(_small_table())
        with pytest.raises(TypeError):
            reg.by_name["X"] = reg.by_name["A"]  # type: ignore[index]
        with pytest.raises(TypeError):
            reg.groups[E].by_value[4] = "X"  # type: ignore[index]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestBuildErrors:
    def test_duplicate_name(self) -> None:
        with pytest.raises(FlagConfigurationError, match="Duplicate"):
            FlagRegistry.build([BitFlag("A", 0, E), BitFlag("A", 1, S)])

    def test_forward_reference(self) -> None:
        with pytest.raises(FlagConfigurationError, match="undeclared"):
            FlagRegistry.build([AggregateFlag("AB", ("A", "B"), E), BitFlag("A", 0, E)])

    def test_alias_of_unknown(self) -> None:
        with pytest.raises(FlagConfigurationError, match="undeclared"):
            FlagRegistry.build([AliasFlag("X", "NOPE", S)])

    def test_alias_of_aggregate(self) -> None:
        table = [BitFlag("A", 0, E), AggregateFlag("AA", ("A",), E), AliasFlag("X", "AA", S)]
        with pytest.raises(FlagConfigurationError, match="aggregate"):
            FlagRegistry.build(table)

    def test_collision_within_group(self) -> None:
        with pytest.raises(FlagConfigurationError, match="share value"):
            FlagRegistry.build([BitFlag("A", 0, E), BitFlag("B", 0, E | S)])

    def test_alias_in_same_group_collides(self) -> None:
        with pytest.raises(FlagConfigurationError, match="share value"):
            FlagRegistry.build([BitFlag("A", 0, E), AliasFlag("A2", "A", E)])

    def test_same_bit_different_groups_ok(self) -> None:
        reg = FlagRegistry.build([BitFlag("A", 0, E), BitFlag("B", 0, S)])
        assert reg.aliases[1] == ("A", "B")

    @pytest.mark.parametrize("bit", [-1, 64, 100])
    def test_bit_out_of_range(self, bit: int) -> None:
        with pytest.raises(FlagConfigurationError, match="outside"):
            FlagRegistry.build([BitFlag("A", bit, E)])

    def test_no_groups(self) -> None:
        with pytest.raises(FlagConfigurationError, match="no usage groups"):
            FlagRegistry.build([BitFlag("A", 0, UsageGroup(0))])

    def test_aggregate_group_not_shared(self) -> None:
        with pytest.raises(FlagConfigurationError, match="not in group"):
            FlagRegistry.build([BitFlag("A", 0, E), AggregateFlag("AA", ("A",), S)])

    def test_empty_aggregate(self) -> None:
        with pytest.raises(FlagConfigurationError, match="without constituents"):
            FlagRegistry.build([AggregateFlag("AA", (), E)])


# ---------------------------------------------------------------------------
# Lookups
# ---------------------------------------------------------------------------


class TestLookups:
    def test_symbol(self) -> None:
        reg = FlagRegistry.build(_small_table())
        assert reg.symbol("B").value == 2

    def test_symbol_unknown(self) -> None:
        reg = FlagRegistry.build(_small_table())
        with pytest.raises(FlagNotFoundError) as exc_info:
            reg.symbol("NOPE")
        assert exc_info.value.name == "NOPE"
        assert "NOPE" in str(exc_info.value)

    def test_symbol_unknown_is_key_error(self) -> None:
        reg = FlagRegistry.build(_small_table())
        with pytest.raises(KeyError):
            reg.symbol("NOPE")

    def test_group_info_rejects_union(self) -> None:
        reg = FlagRegistry.build(_small_table())
        with pytest.raises(InvalidFlagArgumentError):
            reg.group_info(E | S)
        with pytest.raises(InvalidFlagArgumentError):
            reg.group_info(0)

    def test_names_for_value(self) -> None:
        reg = FlagRegistry.build(_small_table())
        assert reg.names_for_value(1) == ("A", "A_SEARCH")
        assert reg.names_for_value(1 << 40) == ()


# ---------------------------------------------------------------------------
# Compiled-in table
# ---------------------------------------------------------------------------


class TestFlagTable:
    def test_builds(self) -> None:
        reg = get_registry()
        assert len(reg.symbols) == len(FLAG_TABLE)

    def test_by_value_injective_per_group(self) -> None:
        reg = get_registry()
        for info in reg.groups.values():
            assert len(set(info.by_value.values())) == len(info.by_value)
            assert dict(info.by_name) == {n: v for v, n in info.by_value.items()}

    def test_base_flags_are_single_bits(self) -> None:
        for symbol in get_registry().symbols:
            if not symbol.aggregate:
                assert len(symbol.bits) == 1, symbol.name

    def test_aggregates_within_their_groups(self) -> None:
        reg = get_registry()
        for symbol in reg.symbols:
            if not symbol.aggregate:
                continue
            for group in SINGLE_GROUPS:
                if group in symbol.groups:
                    assert symbol.value & ~reg.groups[group].aggregate_value == 0, (
                        symbol.name,
                        group.name,
                    )

    def test_search_aliases_share_export_bits(self) -> None:
        reg = get_registry()
        assert reg.aliases[8] == ("SZ_EXPORT_INCLUDE_NAME_ONLY", "SZ_SEARCH_INCLUDE_NAME_ONLY")
        assert reg.aliases[1] == (
            "SZ_EXPORT_INCLUDE_MULTI_RECORD_ENTITIES",
            "SZ_SEARCH_INCLUDE_RESOLVED",
        )

    def test_bit_17_unused(self) -> None:
        assert (1 << 17) not in get_registry().by_value


# ---------------------------------------------------------------------------
# Process-wide registry
# ---------------------------------------------------------------------------


class TestGetRegistry:
    def test_same_instance(self) -> None:
        assert get_registry() is get_registry()

    def test_built_once_under_concurrency(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(registry_module, "_registry", None)
        calls = []
        real_build = FlagRegistry.build.__func__  # type: ignore[attr-defined]

        def counting_build(cls, table):
            calls.append(1)
            return real_build(cls, table)

        monkeypatch.setattr(FlagRegistry, "build", classmethod(counting_build))

        results = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            results.append(get_registry())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(calls) == 1
        assert all(r is results[0] for r in results)

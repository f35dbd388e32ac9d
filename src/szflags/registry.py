"""Immutable flag registry built from the declarative table.

``FlagRegistry.build()`` walks the ordered table exactly once, validates it
and produces read-only indices:

- ``by_name``:  symbol name -> FlagSymbol (base and aggregate)
- ``by_value``: value -> every FlagSymbol with exactly that value
- ``aliases``:  value -> sorted names of the base symbols owning that bit
- ``groups``:   UsageGroup -> GroupInfo (group-scoped base names and values)

The process-wide registry is created lazily by ``get_registry()``.
"""

import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from szflags.errors import FlagConfigurationError, FlagNotFoundError, InvalidFlagArgumentError
from szflags.flags import (
    KIND_AGGREGATE,
    KIND_ALIAS,
    KIND_BIT,
    AggregateFlag,
    AliasFlag,
    BitFlag,
    FlagDecl,
    FlagSymbol,
)
from szflags.groups import ALL_GROUPS, SINGLE_GROUPS, UsageGroup, is_single_group, iter_groups


@dataclass(frozen=True)
class GroupInfo:
    """Everything known about one usage group."""

    group: UsageGroup
    # OR of every base flag value in the group
    aggregate_value: int
    by_name: Mapping[str, int]
    by_value: Mapping[int, str]
    # Aggregate symbols declared for this group (never part of by_value)
    aggregates: Mapping[str, int]


@dataclass(frozen=True)
class FlagRegistry:
    symbols: tuple[FlagSymbol, ...]
    by_name: Mapping[str, FlagSymbol]
    by_value: Mapping[int, tuple[FlagSymbol, ...]]
    aliases: Mapping[int, tuple[str, ...]]
    groups: Mapping[UsageGroup, GroupInfo]

    # -------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------

    @classmethod
    def build(cls, table: Iterable[FlagDecl]) -> "FlagRegistry":
        """Validate *table* and build the registry.

        Raises ``FlagConfigurationError`` on duplicate names, forward or
        dangling references, out-of-range bits, empty group sets and two
        different names claiming the same value inside one group.
        """
        symbols: list[FlagSymbol] = []
        by_name: dict[str, FlagSymbol] = {}
        by_value: dict[int, list[FlagSymbol]] = {}
        aliases: dict[int, list[str]] = {}
        group_names: dict[UsageGroup, dict[str, int]] = {g: {} for g in SINGLE_GROUPS}
        group_values: dict[UsageGroup, dict[int, str]] = {g: {} for g in SINGLE_GROUPS}
        group_aggregates: dict[UsageGroup, dict[str, int]] = {g: {} for g in SINGLE_GROUPS}

        for decl in table:
            if decl.name in by_name:
                raise FlagConfigurationError(f"Duplicate flag name: {decl.name}")
            if int(decl.groups) & ~int(ALL_GROUPS):
                raise FlagConfigurationError(f"{decl.name}: undeclared usage group bits")
            groups = UsageGroup(int(decl.groups))
            if not groups:
                raise FlagConfigurationError(f"{decl.name}: no usage groups declared")

            symbol = _resolve(decl, groups, by_name)
            symbols.append(symbol)
            by_name[symbol.name] = symbol
            by_value.setdefault(symbol.value, []).append(symbol)

            for group in iter_groups(groups):
                if symbol.aggregate:
                    group_aggregates[group][symbol.name] = symbol.value
                    continue
                existing = group_values[group].get(symbol.value)
                if existing is not None:
                    raise FlagConfigurationError(
                        f"{symbol.name} and {existing} share value "
                        f"0x{symbol.value:x} in group {group.name}"
                    )
                group_values[group][symbol.value] = symbol.name
                group_names[group][symbol.name] = symbol.value

            if not symbol.aggregate:
                aliases.setdefault(symbol.value, []).append(symbol.name)

        group_infos = {}
        for group in SINGLE_GROUPS:
            aggregate_value = 0
            for value in group_values[group]:
                aggregate_value |= value
            group_infos[group] = GroupInfo(
                group=group,
                aggregate_value=aggregate_value,
                by_name=MappingProxyType(group_names[group]),
                by_value=MappingProxyType(group_values[group]),
                aggregates=MappingProxyType(group_aggregates[group]),
            )

        return cls(
            symbols=tuple(symbols),
            by_name=MappingProxyType(by_name),
            by_value=MappingProxyType({v: tuple(s) for v, s in by_value.items()}),
            aliases=MappingProxyType({v: tuple(sorted(n)) for v, n in aliases.items()}),
            groups=MappingProxyType(group_infos),
        )

    # -------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------

    def symbol(self, name: str) -> FlagSymbol:
        """Return the symbol called *name* or raise ``FlagNotFoundError``."""
        try:
            return self.by_name[name]
        except KeyError:
            raise FlagNotFoundError(name) from None

    def group_info(self, group: UsageGroup | int) -> GroupInfo:
        """Return the GroupInfo of a single declared usage group."""
        if not is_single_group(group):
            raise InvalidFlagArgumentError(
                f"Expected exactly one usage group, got {_describe_groups(group)}"
            )
        return self.groups[UsageGroup(int(group))]

    def names_for_value(self, value: int) -> tuple[str, ...]:
        """Sorted base names owning exactly *value* (empty when unknown)."""
        return self.aliases.get(value, ())


def _resolve(decl: FlagDecl, groups: UsageGroup, known: Mapping[str, FlagSymbol]) -> FlagSymbol:
    """Compute the symbol for one declaration against the names seen so far."""
    if isinstance(decl, BitFlag):
        if isinstance(decl.bit, bool) or not isinstance(decl.bit, int) or not 0 <= decl.bit <= 63:
            raise FlagConfigurationError(f"{decl.name}: bit {decl.bit!r} outside 0..63")
        return FlagSymbol(
            name=decl.name,
            value=1 << decl.bit,
            groups=groups,
            kind=KIND_BIT,
            definition=(f"1 << {decl.bit}",),
        )

    if isinstance(decl, AliasFlag):
        target = known.get(decl.alias_of)
        if target is None:
            raise FlagConfigurationError(
                f"{decl.name}: references undeclared flag {decl.alias_of}"
            )
        if target.aggregate:
            raise FlagConfigurationError(
                f"{decl.name}: alias target {decl.alias_of} is an aggregate"
            )
        return FlagSymbol(
            name=decl.name,
            value=target.value,
            groups=groups,
            kind=KIND_ALIAS,
            definition=(decl.alias_of,),
        )

    if isinstance(decl, AggregateFlag):
        if not decl.flags:
            raise FlagConfigurationError(f"{decl.name}: aggregate without constituents")
        value = 0
        base_flags: list[str] = []
        for ref in decl.flags:
            part = known.get(ref)
            if part is None:
                raise FlagConfigurationError(f"{decl.name}: references undeclared flag {ref}")
            missing = int(groups) & ~int(part.groups)
            if missing:
                raise FlagConfigurationError(
                    f"{decl.name}: constituent {ref} is not in group(s) "
                    f"{_describe_groups(missing)}"
                )
            value |= part.value
            for base in part.base_flags if part.aggregate else (part.name,):
                if base not in base_flags:
                    base_flags.append(base)
        return FlagSymbol(
            name=decl.name,
            value=value,
            groups=groups,
            kind=KIND_AGGREGATE,
            definition=tuple(decl.flags),
            base_flags=tuple(base_flags),
        )

    raise FlagConfigurationError(f"Unsupported declaration: {decl!r}")


def _describe_groups(groups: UsageGroup | int) -> str:
    names = [g.name for g in iter_groups(groups)]
    return " | ".join(names) if names else "no group"


# ---------------------------------------------------------------------------
# Process-wide registry
# ---------------------------------------------------------------------------

_registry: FlagRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> FlagRegistry:
    """Return the shared registry built from ``FLAG_TABLE``.

    Built on first call; every later call returns the same instance.
    """
    global _registry
    registry = _registry
    if registry is not None:
        return registry
    with _registry_lock:
        if _registry is None:
            from szflags.flag_data import FLAG_TABLE

            _registry = FlagRegistry.build(FLAG_TABLE)
        return _registry

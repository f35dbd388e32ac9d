"""Queries over the flag registry.

All functions are pure reads of an already built :class:`FlagRegistry`.
They default to the process-wide registry; pass ``registry=`` to query an
independently built one (e.g. from a companion description).
"""

from collections.abc import Mapping
from types import MappingProxyType

from szflags.errors import InvalidFlagArgumentError
from szflags.flags import FlagSymbol
from szflags.groups import ALL_GROUPS, UsageGroup, iter_groups
from szflags.hexfmt import to_u64
from szflags.registry import FlagRegistry, get_registry


def list_flags(registry: FlagRegistry | None = None) -> tuple[FlagSymbol, ...]:
    """Every registered symbol in declaration order."""
    return (registry or get_registry()).symbols


def get_flag(name: str, registry: FlagRegistry | None = None) -> FlagSymbol | None:
    """Look up a symbol by exact name, ``None`` when unknown."""
    return (registry or get_registry()).by_name.get(name)


def groups_of(name_or_value: str | int, registry: FlagRegistry | None = None) -> UsageGroup:
    """Usage groups a symbol name or a flag value belongs to.

    A name must be registered (``FlagNotFoundError`` otherwise).

    A value equal to one or more whole symbols yields the union of their
    groups. Any other value is decomposed bit by bit, each bit owned by a
    base flag contributing the groups of every name for that bit. Bits no
    symbol owns contribute nothing, so ``0`` and unknown values give an
    empty group set.
    """
    registry = registry or get_registry()
    if isinstance(name_or_value, str):
        return registry.symbol(name_or_value).groups

    value = to_u64(name_or_value)
    groups = 0
    whole = registry.by_value.get(value)
    if whole:
        for symbol in whole:
            groups |= symbol.groups
        return UsageGroup(groups)

    for bit in range(64):
        bit_value = 1 << bit
        if not value & bit_value:
            continue
        for symbol in registry.by_value.get(bit_value, ()):
            if not symbol.aggregate:
                groups |= symbol.groups
    return UsageGroup(groups)


def flags_of(groups: UsageGroup | int, registry: FlagRegistry | None = None) -> int:
    """OR of every base flag usable with *groups*.

    *groups* may be a single group or a union; a union yields the union of
    each member group's flags.
    """
    registry = registry or get_registry()
    raw = int(groups)
    if not raw:
        raise InvalidFlagArgumentError("No usage group given")
    if raw & ~int(ALL_GROUPS):
        raise InvalidFlagArgumentError(f"Undeclared usage group bits: 0x{raw & ~int(ALL_GROUPS):x}")
    value = 0
    for group in iter_groups(raw):
        value |= registry.groups[group].aggregate_value
    return value


def names_of(
    group: UsageGroup | int,
    include_aggregates: bool = False,
    registry: FlagRegistry | None = None,
) -> Mapping[str, int]:
    """Name -> value for the base flags of a single usage group.

    With ``include_aggregates`` the group's aggregate symbols are listed
    after the base flags.
    """
    info = (registry or get_registry()).group_info(group)
    if not include_aggregates:
        return info.by_name
    merged = dict(info.by_name)
    merged.update(info.aggregates)
    return MappingProxyType(merged)


def values_of(group: UsageGroup | int, registry: FlagRegistry | None = None) -> Mapping[int, str]:
    """Value -> name for the base flags of a single usage group."""
    return (registry or get_registry()).group_info(group).by_value


def flags_to_int(value: int | None) -> int:
    """Normalize an optional flag word: ``None`` is 0, otherwise unsigned 64-bit."""
    if value is None:
        return 0
    return to_u64(value)

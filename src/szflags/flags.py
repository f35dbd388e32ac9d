"""Flag declaration primitives.

BitFlag:       a base flag owning one bit (``1 << bit``)
AliasFlag:     a base flag re-using another base flag's bit under a new name
AggregateFlag: a named OR-composition of previously declared flags

A table of these records (see :mod:`szflags.flag_data`) is the single source
from which :class:`szflags.registry.FlagRegistry` builds its indices.
"""

from dataclasses import dataclass, field

from szflags.groups import UsageGroup, group_labels

KIND_BIT = "bit"
KIND_ALIAS = "alias"
KIND_AGGREGATE = "aggregate"


@dataclass(frozen=True)
class BitFlag:
    """A base flag defined by its bit index (0..63)."""

    name: str
    bit: int
    groups: UsageGroup


@dataclass(frozen=True)
class AliasFlag:
    """A base flag sharing the bit of a previously declared base flag."""

    name: str
    alias_of: str
    groups: UsageGroup


@dataclass(frozen=True)
class AggregateFlag:
    """A named combination of previously declared flags."""

    name: str
    flags: tuple[str, ...]
    groups: UsageGroup


FlagDecl = BitFlag | AliasFlag | AggregateFlag
FlagTable = list[FlagDecl]


@dataclass(frozen=True)
class FlagSymbol:
    """A registered flag symbol with its resolved 64-bit value."""

    name: str
    value: int
    groups: UsageGroup
    kind: str = KIND_BIT
    # "1 << N" for bit flags, the referenced names otherwise
    definition: tuple[str, ...] = ()
    # Base flag names making up the value (aggregates only)
    base_flags: tuple[str, ...] = field(default=())

    @property
    def aggregate(self) -> bool:
        return self.kind == KIND_AGGREGATE

    @property
    def bits(self) -> tuple[int, ...]:
        """Indices of the set bits, ascending."""
        return tuple(b for b in range(64) if self.value >> b & 1)

    def to_dict(self) -> dict:
        """JSON-serialisable form, using the companion description's keys."""
        data: dict = {
            "symbol": self.name,
            "kind": self.kind,
            "bits": list(self.bits),
            "value": self.value,
            "definition": self.definition[0] if self.kind == KIND_BIT else list(self.definition),
            "groups": group_labels(self.groups),
        }
        if self.aggregate:
            data["flags"] = list(self.base_flags)
        return data

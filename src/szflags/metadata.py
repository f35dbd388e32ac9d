"""Reader and cross-checker for the ``szflags.json`` companion description.

The description is a JSON array with one object per symbol::

    {
      "symbol": "SZ_ENTITY_CORE_FLAGS",
      "bits": [11, 12, 13, 14, 15],
      "value": 63488,
      "definition": ["SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES", ...],
      "groups": ["SZ_ENTITY_FLAGS", "SZ_SEARCH_FLAGS", ...],
      "flags": ["SZ_ENTITY_INCLUDE_REPRESENTATIVE_FEATURES", ...]
    }

``definition`` is the string ``"1 << N"`` for bit flags and a list of
previously declared names otherwise.  ``flags`` is present on aggregates
only and lists the base flags making up the value.

The runtime registry never reads this file; it is used by
``szflags check``, the table generator and the test suite.
"""

import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from szflags.errors import MetaDataError
from szflags.flags import (
    KIND_AGGREGATE,
    KIND_ALIAS,
    KIND_BIT,
    AggregateFlag,
    AliasFlag,
    BitFlag,
    FlagTable,
)
from szflags.groups import NO_GROUPS, UsageGroup, group_labels
from szflags.registry import FlagRegistry

_BIT_DEFINITION_RE = re.compile(r"^\s*1\s*<<\s*(\d+)\s*$")


@dataclass(frozen=True)
class FlagMetaData:
    """One entry of the companion description."""

    symbol: str
    bits: tuple[int, ...]
    value: int
    definition: tuple[str, ...]
    groups: UsageGroup
    flags: tuple[str, ...] | None = None

    @property
    def aggregate(self) -> bool:
        return self.flags is not None

    @property
    def bit(self) -> int | None:
        """Bit index for ``"1 << N"`` definitions, else ``None``."""
        if len(self.definition) != 1:
            return None
        m = _BIT_DEFINITION_RE.match(self.definition[0])
        return int(m.group(1)) if m else None

    @property
    def kind(self) -> str:
        if self.aggregate:
            return KIND_AGGREGATE
        return KIND_BIT if self.bit is not None else KIND_ALIAS


@dataclass(frozen=True)
class Mismatch:
    """A difference between the description and a registry."""

    symbol: str
    field: str
    expected: str
    actual: str

    def __str__(self) -> str:
        return f"{self.symbol}: {self.field} differs (description: {self.expected}, registry: {self.actual})"


class FlagsMetaData:
    """Parsed companion description, in file order."""

    def __init__(self, entries: list[FlagMetaData]) -> None:
        self._entries = list(entries)
        self._by_name: dict[str, FlagMetaData] = {}
        for entry in self._entries:
            if entry.symbol in self._by_name:
                raise MetaDataError(f"Duplicate symbol in description: {entry.symbol}")
            self._by_name[entry.symbol] = entry

    # -------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------

    @classmethod
    def from_json(cls, text: str) -> "FlagsMetaData":
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise MetaDataError(f"Invalid JSON: {exc}") from exc
        if not isinstance(raw, list):
            raise MetaDataError("Expected a JSON array of flag descriptions")
        return cls([_parse_entry(item, index) for index, item in enumerate(raw)])

    @classmethod
    def load(cls, path: Path) -> "FlagsMetaData":
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            raise MetaDataError(f"Cannot read {path}: {exc}") from exc
        return cls.from_json(text)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def get(self, name: str) -> FlagMetaData | None:
        return self._by_name.get(name)

    @property
    def base_flags(self) -> list[FlagMetaData]:
        return [e for e in self._entries if not e.aggregate]

    @property
    def aggregate_flags(self) -> list[FlagMetaData]:
        return [e for e in self._entries if e.aggregate]

    def flags_in_group(self, group: UsageGroup) -> list[FlagMetaData]:
        """Entries (base and aggregate) declared for *group*."""
        return [e for e in self._entries if e.groups & group]

    # -------------------------------------------------------------------
    # Conversion and comparison
    # -------------------------------------------------------------------

    def to_table(self) -> FlagTable:
        """Convert to a declarative table buildable by ``FlagRegistry.build``."""
        table: FlagTable = []
        for entry in self._entries:
            if entry.aggregate:
                table.append(AggregateFlag(entry.symbol, entry.definition, entry.groups))
            elif entry.bit is not None:
                table.append(BitFlag(entry.symbol, entry.bit, entry.groups))
            elif len(entry.definition) == 1:
                table.append(AliasFlag(entry.symbol, entry.definition[0], entry.groups))
            else:
                raise MetaDataError(
                    f"{entry.symbol}: base flag must be defined as '1 << N' or by one name"
                )
        return table

    def compare_registry(self, registry: FlagRegistry) -> list[Mismatch]:
        """List every difference between this description and *registry*."""
        mismatches: list[Mismatch] = []
        for entry in self._entries:
            symbol = registry.by_name.get(entry.symbol)
            if symbol is None:
                mismatches.append(Mismatch(entry.symbol, "presence", "declared", "missing"))
                continue

            fields: list[tuple[str, Any, Any]] = [
                ("value", entry.value, symbol.value),
                ("bits", list(entry.bits), list(symbol.bits)),
                ("kind", entry.kind, symbol.kind),
                ("groups", group_labels(entry.groups), group_labels(symbol.groups)),
                ("definition", list(entry.definition), list(symbol.definition)),
            ]
            if entry.aggregate or symbol.aggregate:
                fields.append(("flags", list(entry.flags or ()), list(symbol.base_flags)))
            for field, expected, actual in fields:
                if expected != actual:
                    mismatches.append(Mismatch(entry.symbol, field, str(expected), str(actual)))

        for symbol in registry.symbols:
            if symbol.name not in self._by_name:
                mismatches.append(Mismatch(symbol.name, "presence", "missing", "declared"))
        return mismatches


def _parse_entry(item: Any, index: int) -> FlagMetaData:
    if not isinstance(item, dict):
        raise MetaDataError(f"Entry {index}: expected an object")
    where = f"Entry {index}"

    symbol = item.get("symbol")
    if not isinstance(symbol, str) or not symbol:
        raise MetaDataError(f"{where}: missing 'symbol'")
    where = symbol

    bits = item.get("bits")
    if not isinstance(bits, list) or not all(_is_int(b) and 0 <= b <= 63 for b in bits):
        raise MetaDataError(f"{where}: 'bits' must be a list of bit indices 0..63")
    if bits != sorted(set(bits)):
        raise MetaDataError(f"{where}: 'bits' must be ascending without duplicates")

    value = item.get("value")
    if not _is_int(value):
        raise MetaDataError(f"{where}: 'value' must be an integer")
    expected = 0
    for b in bits:
        expected |= 1 << b
    if value != expected:
        raise MetaDataError(f"{where}: 'value' {value} does not match 'bits' {bits}")

    definition = item.get("definition")
    if isinstance(definition, str):
        definition = [definition]
    if (
        not isinstance(definition, list)
        or not definition
        or not all(isinstance(d, str) for d in definition)
    ):
        raise MetaDataError(f"{where}: 'definition' must be a string or a list of names")

    labels = item.get("groups")
    if not isinstance(labels, list) or not labels:
        raise MetaDataError(f"{where}: 'groups' must be a non-empty list")
    groups = NO_GROUPS
    for label in labels:
        if not isinstance(label, str):
            raise MetaDataError(f"{where}: group labels must be strings")
        try:
            groups |= UsageGroup.from_label(label)
        except ValueError as exc:
            raise MetaDataError(f"{where}: {exc}") from None

    flags = item.get("flags")
    if flags is not None:
        if not isinstance(flags, list) or not all(isinstance(f, str) for f in flags):
            raise MetaDataError(f"{where}: 'flags' must be a list of names")
        flags = tuple(flags)

    return FlagMetaData(
        symbol=symbol,
        bits=tuple(bits),
        value=value,
        definition=tuple(definition),
        groups=groups,
        flags=flags,
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

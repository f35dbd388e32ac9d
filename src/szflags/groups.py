"""Usage groups: the operation categories a flag can be passed to.

``UsageGroup`` is an ``IntFlag`` so that a set of groups is just an integer
bitmask: ``UsageGroup.SEARCH | UsageGroup.EXPORT`` is a valid group set and
``group in groups`` is a membership test.

The ``*_SET`` constants below are the group sets referenced by the
declarative flag table (see :mod:`szflags.flag_data`).
"""

from enum import IntFlag


class UsageGroup(IntFlag):
    """A usage group (single member) or a set of usage groups (composite)."""

    MODIFY = 1 << 0
    RECORD = 1 << 1
    ENTITY = 1 << 2
    FIND_PATH = 1 << 3
    FIND_NETWORK = 1 << 4
    SEARCH = 1 << 5
    EXPORT = 1 << 6
    WHY = 1 << 7
    HOW = 1 << 8
    VIRTUAL_ENTITY = 1 << 9
    RECORD_PREVIEW = 1 << 10

    @property
    def label(self) -> str:
        """External label used by szflags.json, e.g. ``SZ_SEARCH_FLAGS``.

        Only meaningful for a single group.
        """
        return f"SZ_{self.name}_FLAGS"

    @classmethod
    def from_label(cls, text: str) -> "UsageGroup":
        """Parse ``SZ_SEARCH_FLAGS``, ``SEARCH`` or ``search`` into a single group.

        Raises ``ValueError`` for anything else.
        """
        key = text.strip().upper().replace("-", "_")
        if key.startswith("SZ_") and key.endswith("_FLAGS"):
            key = key[3:-6]
        try:
            return cls[key]
        except KeyError:
            known = ", ".join(g.name.lower() for g in SINGLE_GROUPS)
            raise ValueError(f"Unknown usage group {text!r} (known: {known})") from None


# Declared groups in bit order.
SINGLE_GROUPS: tuple[UsageGroup, ...] = tuple(UsageGroup.__members__.values())

NO_GROUPS = UsageGroup(0)
ALL_GROUPS = UsageGroup(sum(SINGLE_GROUPS))


def iter_groups(groups: UsageGroup | int) -> list[UsageGroup]:
    """Return the single declared groups contained in *groups*, in bit order."""
    return [g for g in SINGLE_GROUPS if int(groups) & g]


def is_single_group(groups: UsageGroup | int) -> bool:
    """True when *groups* is exactly one declared usage group."""
    return int(groups) in {int(g) for g in SINGLE_GROUPS}


def group_labels(groups: UsageGroup | int) -> list[str]:
    """External labels for every declared group in *groups*."""
    return [g.label for g in iter_groups(groups)]


# ---------------------------------------------------------------------------
# Group sets used by the flag table
# ---------------------------------------------------------------------------

MODIFY_SET = UsageGroup.MODIFY
EXPORT_SET = UsageGroup.EXPORT
SEARCH_SET = UsageGroup.SEARCH
FIND_PATH_SET = UsageGroup.FIND_PATH
FIND_NETWORK_SET = UsageGroup.FIND_NETWORK
HOW_SET = UsageGroup.HOW
WHY_SET = UsageGroup.WHY
RECORD_SET = UsageGroup.RECORD
VIRTUAL_ENTITY_SET = UsageGroup.VIRTUAL_ENTITY

# Operations that return related entities.
RELATION_SET = (
    UsageGroup.ENTITY
    | UsageGroup.FIND_PATH
    | UsageGroup.FIND_NETWORK
    | UsageGroup.SEARCH
    | UsageGroup.EXPORT
    | UsageGroup.WHY
)
# Operations that return entity detail (relations or not).
ENTITY_SET = RELATION_SET | UsageGroup.VIRTUAL_ENTITY
ENTITY_RECORD_SET = ENTITY_SET | UsageGroup.RECORD
RECORD_PREVIEW_SET = ENTITY_RECORD_SET | UsageGroup.RECORD_PREVIEW
ENTITY_HOW_SET = RELATION_SET | UsageGroup.HOW
HOW_WHY_SEARCH_SET = UsageGroup.HOW | UsageGroup.WHY | UsageGroup.SEARCH
WHY_SEARCH_SET = UsageGroup.WHY | UsageGroup.SEARCH

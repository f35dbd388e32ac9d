"""Canonical human-readable rendering of flag values.

    >>> format_flags(0)
    '{ NONE } [0000 0000 0000 0000]'

Each set bit becomes one token, lowest bit first, joined with `` | ``:

- the group-scoped name when a single usage group is given and owns the bit,
- else the only base name registered for the bit,
- else every base name for the bit as ``{ a / b }`` (sorted),
- else the bit's value in hex.

The full value in hex is always appended in brackets.
"""

from szflags.groups import UsageGroup, is_single_group
from szflags.hexfmt import hex_format, to_u64
from szflags.registry import FlagRegistry, get_registry

NONE_TOKEN = "{ NONE }"


def format_flags(
    value: int | None,
    group: UsageGroup | int | None = None,
    registry: FlagRegistry | None = None,
) -> str:
    """Render *value* for diagnostics; never raises."""
    registry = registry or get_registry()
    value = to_u64(value or 0)
    if value == 0:
        return f"{NONE_TOKEN} [{hex_format(0)}]"

    scoped: dict[int, str] = {}
    if group is not None and is_single_group(group):
        scoped = dict(registry.groups[UsageGroup(int(group))].by_value)

    tokens = []
    for bit in range(64):
        bit_value = 1 << bit
        if not value & bit_value:
            continue
        if bit_value in scoped:
            tokens.append(scoped[bit_value])
            continue
        names = registry.names_for_value(bit_value)
        if len(names) == 1:
            tokens.append(names[0])
        elif names:
            tokens.append("{ " + " / ".join(names) + " }")
        else:
            tokens.append(hex_format(bit_value))
    return f"{' | '.join(tokens)} [{hex_format(value)}]"

#!/usr/bin/env python3
"""Regenerate src/szflags/flag_data.py from a szflags.json description.

Reads the companion description, checks that it builds into a valid
registry, and writes the declarative table using szflags' own
BitFlag/AliasFlag/AggregateFlag records.  Group sets are written with the
named ``*_SET`` constants of szflags.groups where one matches.

Usage:
    python tools/sync_flag_data.py tests/data/szflags.json            # writes flag_data.py
    python tools/sync_flag_data.py tests/data/szflags.json --dry-run  # print to stdout
"""

import argparse
import sys
from datetime import datetime, timezone
from pathlib import Path

from szflags import groups as groups_module
from szflags.errors import SzFlagsError
from szflags.flags import AggregateFlag, AliasFlag, BitFlag, FlagDecl, FlagTable
from szflags.groups import UsageGroup, iter_groups
from szflags.metadata import FlagsMetaData
from szflags.registry import FlagRegistry


def named_group_sets() -> dict[int, str]:
    """Map group-set bitmask -> constant name for every ``*_SET`` in szflags.groups."""
    names: dict[int, str] = {}
    for attr in sorted(dir(groups_module)):
        if attr.endswith("_SET"):
            value = int(getattr(groups_module, attr))
            names.setdefault(value, attr)
    return names


def format_groups(groups: UsageGroup, set_names: dict[int, str], used: set[str]) -> str:
    """Source expression for *groups*, recording the names it needs in *used*."""
    name = set_names.get(int(groups))
    if name is not None:
        used.add(name)
        return name
    used.add("UsageGroup")
    return " | ".join(f"UsageGroup.{g.name}" for g in iter_groups(groups))


def format_decl(decl: FlagDecl, set_names: dict[int, str], used: set[str]) -> list[str]:
    """Source lines for one table row."""
    groups = format_groups(decl.groups, set_names, used)
    if isinstance(decl, BitFlag):
        return [f'    BitFlag("{decl.name}", {decl.bit}, {groups}),']
    if isinstance(decl, AliasFlag):
        return [f'    AliasFlag("{decl.name}", "{decl.alias_of}", {groups}),']
    if isinstance(decl, AggregateFlag):
        lines = ["    AggregateFlag(", f'        "{decl.name}",', "        ("]
        lines.extend(f'            "{ref}",' for ref in decl.flags)
        lines.append("        ),")
        lines.append(f"        {groups},")
        lines.append("    ),")
        return lines
    raise TypeError(f"Unsupported declaration: {decl!r}")


def generate_flag_data_py(table: FlagTable, source: str, timestamp: str) -> str:
    """Generate the flag_data.py source code."""
    set_names = named_group_sets()
    used: set[str] = set()
    body = ["FLAG_TABLE: FlagTable = ["]
    for decl in table:
        body.extend(format_decl(decl, set_names, used))
    body.append("]")

    kinds = sorted({type(decl).__name__ for decl in table} | {"FlagTable"})
    group_imports = sorted(used)
    header = f'''\
"""Auto-generated flag table from szflags.json.

Source: {source}
Synced: {timestamp}

Do not edit manually, re-run tools/sync_flag_data.py to update.
"""

from szflags.flags import {", ".join(kinds)}
'''
    if group_imports:
        header += "from szflags.groups import (\n"
        header += "".join(f"    {name},\n" for name in group_imports)
        header += ")\n"
    return header + "\n" + "\n".join(body) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Regenerate flag_data.py from szflags.json")
    parser.add_argument("path", help="Path to szflags.json")
    parser.add_argument("--dry-run", action="store_true", help="Print to stdout only")
    parser.add_argument(
        "--output",
        default=None,
        help="Output file (default: src/szflags/flag_data.py)",
    )
    args = parser.parse_args(argv)

    project_root = Path(__file__).resolve().parent.parent
    output_path = Path(args.output) if args.output else (
        project_root / "src" / "szflags" / "flag_data.py"
    )

    print(f"Loading {args.path}...", file=sys.stderr)
    try:
        meta = FlagsMetaData.load(Path(args.path))
        table = meta.to_table()
        registry = FlagRegistry.build(table)
    except SzFlagsError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    n_aggregates = sum(1 for s in registry.symbols if s.aggregate)
    print(f"  → {len(registry.symbols) - n_aggregates} base flags", file=sys.stderr)
    print(f"  → {n_aggregates} aggregates", file=sys.stderr)

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    source = generate_flag_data_py(table, Path(args.path).as_posix(), timestamp)

    if args.dry_run:
        print(source, end="")
    else:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(source)
        print(f"Wrote {output_path}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())

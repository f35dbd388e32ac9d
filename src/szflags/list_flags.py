"""list_flags.py – Table of registered flag symbols.

Without ``--group`` every base flag is listed in declaration order; with a
group only the names usable with that group.  ``--aggregates`` adds the
default/preset symbols.
"""

import typer
from rich.console import Console
from rich.table import Table

from szflags.algebra import list_flags, names_of
from szflags.cli import GroupOption, JsonOption, error_exit, json_print, parse_group
from szflags.errors import SzFlagsError
from szflags.flags import FlagSymbol
from szflags.groups import UsageGroup, iter_groups
from szflags.hexfmt import hex_format
from szflags.registry import get_registry

app = typer.Typer(
    help="List registered flag symbols.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Examples:[/bold]

szflags list                           All base flags

szflags list -g search                 Flags usable with search calls

szflags list -g export --aggregates    Include export defaults

szflags list --json                    Machine-readable JSON output""",
)


def select_symbols(group: UsageGroup | None, aggregates: bool) -> list[FlagSymbol]:
    """Symbols to show for the given ``--group`` / ``--aggregates`` choice."""
    registry = get_registry()
    if group is None:
        return [s for s in list_flags() if aggregates or not s.aggregate]
    names = names_of(group, include_aggregates=aggregates)
    return [registry.by_name[name] for name in names]


@app.callback(invoke_without_command=True)
def main(
    group: str | None = GroupOption,
    aggregates: bool = typer.Option(
        False, "--aggregates", "-a", help="Include aggregate (default/preset) symbols"
    ),
    json_output: bool = JsonOption,
) -> None:
    """List flag symbols, optionally restricted to one usage group."""
    usage_group = parse_group(group, json_mode=json_output)
    try:
        symbols = select_symbols(usage_group, aggregates)
    except SzFlagsError as exc:
        error_exit(str(exc), json_mode=json_output)

    if json_output:
        json_print([s.to_dict() for s in symbols])
        return

    table = Table(title=f"{len(symbols)} flag symbol(s)")
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("Value", justify="right", style="magenta")
    table.add_column("Groups", style="dim")
    for s in symbols:
        groups = ", ".join(g.name.lower() for g in iter_groups(s.groups))
        table.add_row(s.name, s.kind, hex_format(s.value), groups)
    Console().print(table)


if __name__ == "__main__":
    app()

"""check.py – Cross-check the compiled-in flag table against szflags.json.

Every symbol of the companion description is compared field by field
(value, bits, kind, groups, definition, constituent flags) with the
registry, and symbols present on only one side are reported.  The
description must also build into a valid registry on its own.
"""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from szflags.cli import JsonOption, error_exit, get_config, json_print
from szflags.errors import SzFlagsError
from szflags.metadata import FlagsMetaData, Mismatch
from szflags.registry import FlagRegistry, get_registry

app = typer.Typer(
    help="Cross-check the flag registry against a companion description.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Examples:[/bold]

szflags check tests/data/szflags.json      Compare against a description

szflags check                              Use 'metadata' from szflags.toml

szflags check --json                       Machine-readable JSON output

[dim]Exit code is 1 when any mismatch is found.[/dim]""",
)


def run_check(path: Path) -> tuple[FlagsMetaData, list[Mismatch]]:
    """Load *path*, verify it builds, and compare it with the registry."""
    meta = FlagsMetaData.load(path)
    FlagRegistry.build(meta.to_table())
    return meta, meta.compare_registry(get_registry())


@app.callback(invoke_without_command=True)
def main(
    path: Path | None = typer.Argument(None, help="Path to szflags.json"),
    json_output: bool = JsonOption,
) -> None:
    """Compare the registry with a companion description."""
    if path is None:
        path = get_config(json_mode=json_output).metadata
    if path is None:
        error_exit(
            "No description given: pass PATH or set 'metadata' in szflags.toml",
            json_mode=json_output,
        )

    try:
        meta, mismatches = run_check(path)
    except SzFlagsError as exc:
        error_exit(str(exc), json_mode=json_output)

    if json_output:
        json_print(
            {
                "path": str(path),
                "symbols": len(meta),
                "mismatches": [
                    {"symbol": m.symbol, "field": m.field, "expected": m.expected, "actual": m.actual}
                    for m in mismatches
                ],
            }
        )
    elif not mismatches:
        Console().print(f"[green]OK:[/green] {len(meta)} symbols match {escape(str(path))}")
    else:
        table = Table(title=f"{len(mismatches)} mismatch(es) against {escape(str(path))}")
        table.add_column("Symbol", style="cyan")
        table.add_column("Field")
        table.add_column("Description")
        table.add_column("Registry")
        for m in mismatches:
            table.add_row(m.symbol, m.field, escape(m.expected), escape(m.actual))
        Console().print(table)

    if mismatches:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

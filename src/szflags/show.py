"""show.py – Details of one flag symbol, or the groups of a flag value."""

from typing import Any

import typer
from rich.console import Console
from rich.markup import escape

from szflags.algebra import get_flag, groups_of
from szflags.cli import JsonOption, json_print, parse_flags_value
from szflags.formatter import format_flags
from szflags.groups import UsageGroup, group_labels
from szflags.hexfmt import hex_format

app = typer.Typer(
    help="Show a flag symbol or decode a flag value.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Examples:[/bold]

szflags show SZ_SEARCH_INCLUDE_NAME_ONLY     Symbol details

szflags show 0x38fbc0                        Groups and names of a value

szflags show "SZ_WITH_INFO|SZ_ENTITY_CORE_FLAGS"

[dim]A value that is exactly one registered symbol reports that symbol's
groups; any other value is decomposed bit by bit.[/dim]""",
)


def describe(text: str, *, json_mode: bool = False) -> dict[str, Any]:
    """Build the report for a symbol name or a flag value."""
    symbol = get_flag(text.strip())
    if symbol is not None:
        data = symbol.to_dict()
        data["hex"] = hex_format(symbol.value)
        data["format"] = format_flags(symbol.value)
        return data

    value = parse_flags_value(text, json_mode=json_mode)
    return {
        "value": value,
        "hex": hex_format(value),
        "groups": group_labels(groups_of(value)),
        "format": format_flags(value),
    }


@app.callback(invoke_without_command=True)
def main(
    name_or_value: str = typer.Argument(..., help="Symbol name, or value (decimal, 0x hex, NAME|NAME)"),
    json_output: bool = JsonOption,
) -> None:
    """Describe a flag symbol or value."""
    data = describe(name_or_value, json_mode=json_output)
    if json_output:
        json_print(data)
        return

    console = Console(highlight=False)
    if "symbol" in data:
        console.print(f"[bold cyan]{data['symbol']}[/bold cyan] ({data['kind']})")
        definition = data["definition"]
        if isinstance(definition, list):
            definition = " | ".join(definition)
        console.print(f"  definition: {escape(definition)}")
    console.print(f"  value:      {data['value']} [dim]({data['hex']})[/dim]")
    groups = [UsageGroup.from_label(label).name.lower() for label in data["groups"]]
    console.print(f"  groups:     {', '.join(groups) or '-'}")
    if data.get("flags"):
        console.print(f"  flags:      {', '.join(data['flags'])}")
    console.print(f"  format:     {escape(data['format'])}")


if __name__ == "__main__":
    app()

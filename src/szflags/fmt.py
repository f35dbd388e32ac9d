"""fmt.py – Canonical rendering of a flag value (``szflags format``)."""

import typer

from szflags.cli import (
    GroupOption,
    JsonOption,
    get_config,
    json_print,
    parse_flags_value,
    parse_group,
)
from szflags.formatter import format_flags

app = typer.Typer(
    help="Render a flag value in canonical form.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Examples:[/bold]

szflags format 8                           { SZ_EXPORT_INCLUDE_NAME_ONLY / SZ_SEARCH_INCLUDE_NAME_ONLY } ...

szflags format 8 -g search                 SZ_SEARCH_INCLUDE_NAME_ONLY [0000 0000 0000 0008]

szflags format "0000 0000 0038 fbc0"       Decode a value copied from a log

[dim]Without --group the default_group from szflags.toml is used, if set.[/dim]""",
)


@app.callback(invoke_without_command=True)
def main(
    value: str = typer.Argument(..., help="Decimal, 0x hex, 'xxxx xxxx xxxx xxxx' or NAME|NAME"),
    group: str | None = GroupOption,
    json_output: bool = JsonOption,
) -> None:
    """Print the canonical rendering of VALUE."""
    flags = parse_flags_value(value, json_mode=json_output)
    usage_group = parse_group(group, json_mode=json_output)
    if usage_group is None:
        usage_group = get_config(json_mode=json_output).default_group

    text = format_flags(flags, usage_group)
    if json_output:
        json_print(
            {
                "value": flags,
                "group": usage_group.label if usage_group is not None else None,
                "format": text,
            }
        )
        return
    print(text)


if __name__ == "__main__":
    app()

"""Shared CLI utilities for the szflags commands.

Provides the common ``--group`` option, config loading, value parsing and
standardised output / error helpers so that every command gets the same
``--json`` behaviour without boilerplate.

Usage in a command::

    import typer
    from szflags.cli import GroupOption, error_exit, json_print, parse_group

    app = typer.Typer()

    @app.callback(invoke_without_command=True)
    def main(group: str | None = GroupOption) -> None:
        usage_group = parse_group(group)
        ...
"""

from __future__ import annotations

import json
import re
from typing import Any, NoReturn

import typer
from rich.console import Console
from rich.markup import escape

from szflags.config import ProjectConfig, load_config
from szflags.errors import FlagNotFoundError
from szflags.groups import UsageGroup
from szflags.hexfmt import to_u64
from szflags.registry import get_registry

# Re-usable Typer option for --group
GroupOption: str | None = typer.Option(
    None,
    "--group",
    "-g",
    help="Usage group, e.g. 'search' or 'SZ_SEARCH_FLAGS'.",
)

JsonOption: bool = typer.Option(False, "--json", help="Output results as JSON")


def get_config(*, json_mode: bool = False) -> ProjectConfig:
    """Load szflags.toml (or defaults), exiting on a malformed file."""
    try:
        return load_config()
    except ValueError as exc:
        error_exit(str(exc), json_mode=json_mode)


# ---------------------------------------------------------------------------
# Standardised output helpers
# ---------------------------------------------------------------------------

_err_console = Console(stderr=True)


def error_exit(msg: str, *, json_mode: bool = False, code: int = 1) -> NoReturn:
    """Print *msg* as an error and ``raise typer.Exit(code)``."""
    if json_mode:
        print(json.dumps({"error": msg}, indent=2))
    else:
        _err_console.print(f"[red bold]error:[/red bold] {escape(msg)}")
    raise typer.Exit(code=code)


def json_print(data: dict[str, Any] | list[Any]) -> None:
    """Print *data* as pretty-printed JSON to stdout."""
    print(json.dumps(data, indent=2))


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

_DECIMAL_RE = re.compile(r"^-?\d+$")
_HEX_RE = re.compile(r"^0x_?[0-9a-f]+(_[0-9a-f]+)*$", re.IGNORECASE)
_HEX_GROUPS_RE = re.compile(r"^[0-9a-f]{4}( [0-9a-f]{4}){3}$", re.IGNORECASE)


def parse_group(text: str | None, *, json_mode: bool = False) -> UsageGroup | None:
    """Parse a ``--group`` value; ``None`` passes through."""
    if text is None:
        return None
    try:
        return UsageGroup.from_label(text)
    except ValueError as exc:
        error_exit(str(exc), json_mode=json_mode)


def parse_flags_value(text: str, *, json_mode: bool = False) -> int:
    """Parse a flag word given on the command line, exiting on invalid input.

    Accepts decimal (negative values wrap to unsigned 64-bit), ``0x`` hex,
    the four-group form printed by the formatter (``0000 0000 0000 0008``)
    and symbol names, any of them joined with ``|``.
    """
    value = 0
    for token in text.split("|"):
        token = token.strip()
        if not token:
            error_exit(f"Invalid flag value: {text!r}", json_mode=json_mode)
        if _DECIMAL_RE.match(token):
            value |= to_u64(int(token))
        elif _HEX_RE.match(token):
            value |= to_u64(int(token, 16))
        elif _HEX_GROUPS_RE.match(token):
            value |= int(token.replace(" ", ""), 16)
        else:
            try:
                value |= get_registry().symbol(token).value
            except FlagNotFoundError as exc:
                error_exit(str(exc), json_mode=json_mode)
    return value

"""main.py – Umbrella CLI entry point for szflags.

Lazily imports and registers every subcommand module so that a broken
optional import in one command doesn't prevent the whole CLI from loading.

Each module exposes a single-callback Typer ``app`` plus its ``main``
function; ``main`` is registered as a flat ``app.command()`` entry.
"""

import importlib
import sys
from collections.abc import Callable

import typer

app = typer.Typer(
    help="Inspect the SDK flag symbols, their usage groups and values.",
    rich_markup_mode="rich",
    epilog="""\
[bold]Typical use:[/bold]
  szflags list -g search             Flags usable with search calls
  szflags show SZ_WITH_INFO          Value, groups and definition of a symbol
  szflags format 0x38fbc0            Render a value from a log line
  szflags check                      Compare the registry with szflags.json

[dim]Optional settings are read from szflags.toml.
Run 'szflags <cmd> --help' for details.[/dim]""",
)

# ---------------------------------------------------------------------------
# Subcommand registry
# ---------------------------------------------------------------------------

_SINGLE_COMMANDS: list[tuple[str, str, str]] = [
    ("list", "szflags.list_flags", "List registered flag symbols."),
    ("show", "szflags.show", "Show a flag symbol or decode a flag value."),
    ("format", "szflags.fmt", "Render a flag value in canonical form."),
    ("check", "szflags.check", "Cross-check the registry against szflags.json."),
]


def _make_stub_cmd(mod_name: str, err: ImportError) -> Callable[[], None]:
    """Create a stub command function that reports the failed import."""

    def _stub() -> None:
        print(f"Error: could not load '{mod_name}': {err}", file=sys.stderr)
        raise typer.Exit(code=1)

    return _stub


for _name, _module, _help in _SINGLE_COMMANDS:
    try:
        _mod = importlib.import_module(_module)
        _epilog = getattr(_mod.app.info, "epilog", None)
        if not isinstance(_epilog, str):
            _epilog = None
        app.command(name=_name, help=_help, epilog=_epilog)(_mod.main)
    except ImportError as _exc:
        app.command(name=_name, help=f"[unavailable] {_help}")(_make_stub_cmd(_module, _exc))


def main() -> None:
    app()


if __name__ == "__main__":
    main()

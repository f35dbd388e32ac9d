"""Optional project configuration for the szflags command line.

Reads ``szflags.toml`` from the nearest enclosing directory::

    [szflags]
    metadata = "tests/data/szflags.json"   # default PATH for `szflags check`
    default_group = "search"               # group for `szflags format`

The file is optional: without it every setting falls back to its default.
The core API (registry, queries, formatter) never reads configuration.
"""

import sys
import warnings
from dataclasses import dataclass
from pathlib import Path

from szflags.groups import UsageGroup

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib  # type: ignore[import]
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[import,no-redef]

CONFIG_FILENAME = "szflags.toml"

_KNOWN_KEYS = {"metadata", "default_group"}


@dataclass
class ProjectConfig:
    """Parsed ``[szflags]`` settings."""

    # Directory holding szflags.toml (cwd when there is none)
    root: Path

    # Companion description used by `szflags check` when no PATH is given
    metadata: Path | None = None

    # Group applied by `szflags format` when --group is omitted
    default_group: UsageGroup | None = None

    # Path of the loaded file, None when running on defaults
    source: Path | None = None


def _find_root(start: Path | None = None) -> Path | None:
    """Walk up from *start* (or cwd) to the directory holding szflags.toml.

    Returns ``None`` when no parent has one.
    """
    candidate = (start or Path.cwd()).resolve()
    while True:
        if (candidate / CONFIG_FILENAME).exists():
            return candidate
        if candidate == candidate.parent:
            return None
        candidate = candidate.parent


def _resolve(root: Path, rel: str) -> Path:
    """Resolve a path relative to the config directory."""
    p = Path(rel)
    if p.is_absolute():
        return p
    return root / p


def load_config(root: Path | None = None) -> ProjectConfig:
    """Load szflags.toml.

    Args:
        root: Directory to start the search from.  Defaults to cwd.

    Raises ``ValueError`` for a malformed file or an unknown ``default_group``.
    """
    start = (root or Path.cwd()).resolve()
    found = _find_root(start)
    if found is None:
        return ProjectConfig(root=start)

    toml_path = found / CONFIG_FILENAME
    try:
        with open(toml_path, "rb") as f:
            raw = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ValueError(f"Invalid {toml_path}: {exc}") from exc

    section = raw.get("szflags", {})
    if not isinstance(section, dict):
        raise ValueError(f"{toml_path}: [szflags] must be a table")

    unknown = sorted(set(section) - _KNOWN_KEYS)
    if unknown:
        warnings.warn(
            f"{toml_path}: ignoring unknown [szflags] key(s): {', '.join(unknown)}",
            stacklevel=2,
        )

    cfg = ProjectConfig(root=found, source=toml_path)

    metadata = section.get("metadata")
    if metadata is not None:
        if not isinstance(metadata, str):
            raise ValueError(f"{toml_path}: 'metadata' must be a path string")
        cfg.metadata = _resolve(found, metadata)

    group = section.get("default_group")
    if group is not None:
        if not isinstance(group, str):
            raise ValueError(f"{toml_path}: 'default_group' must be a string")
        cfg.default_group = UsageGroup.from_label(group)

    return cfg

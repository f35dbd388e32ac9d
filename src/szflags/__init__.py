"""szflags: flag symbols and usage groups of the entity-resolution SDK.

A declarative table of 64-bit flag symbols, each usable with one or more
usage groups (search, export, find-path, ...), compiled once into
immutable lookup indices.  On top of that: group / flag membership
queries, disambiguation of bits shared by several names, and a canonical
human-readable rendering of any flag word.
"""

__version__ = "0.1.0"
from .algebra import (
    flags_of as flags_of,
)
from .algebra import (
    flags_to_int as flags_to_int,
)
from .algebra import (
    get_flag as get_flag,
)
from .algebra import (
    groups_of as groups_of,
)
from .algebra import (
    list_flags as list_flags,
)
from .algebra import (
    names_of as names_of,
)
from .algebra import (
    values_of as values_of,
)
from .errors import (
    FlagConfigurationError as FlagConfigurationError,
)
from .errors import (
    FlagNotFoundError as FlagNotFoundError,
)
from .errors import (
    InvalidFlagArgumentError as InvalidFlagArgumentError,
)
from .errors import (
    MetaDataError as MetaDataError,
)
from .errors import (
    SzFlagsError as SzFlagsError,
)
from .flags import (
    FlagSymbol as FlagSymbol,
)
from .formatter import (
    format_flags as format_flags,
)
from .groups import (
    UsageGroup as UsageGroup,
)
from .hexfmt import (
    hex_format as hex_format,
)
from .registry import (
    FlagRegistry as FlagRegistry,
)
from .registry import (
    GroupInfo as GroupInfo,
)
from .registry import (
    get_registry as get_registry,
)

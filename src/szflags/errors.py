"""Exceptions raised by szflags.

Each concrete error also derives from the builtin a caller would naturally
catch (``KeyError`` for lookups, ``ValueError`` for bad arguments).
"""


class SzFlagsError(Exception):
    """Base class for all szflags errors."""


class FlagConfigurationError(SzFlagsError):
    """The declarative flag table is inconsistent (raised while building)."""


class FlagNotFoundError(SzFlagsError, KeyError):
    """A flag symbol name is not registered."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unrecognized flag name: {self.name!r}"


class InvalidFlagArgumentError(SzFlagsError, ValueError):
    """A query received a group or value it cannot answer for."""


class MetaDataError(SzFlagsError, ValueError):
    """The companion szflags.json description is malformed."""

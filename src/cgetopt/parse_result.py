"""Parse result container for cgetopt."""

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Tuple

from .types import OptionValue


class ParseResult:
    """Class to hold both the parsed options and the positional arguments."""

    __slots__ = ("_options", "_positionals")

    def __init__(
        self, options: Mapping[str, OptionValue], positionals: Iterable[str]
    ):
        object.__setattr__(self, "_options", MappingProxyType(dict(options)))
        object.__setattr__(self, "_positionals", tuple(positionals))

    @property
    def options(self) -> Mapping[str, OptionValue]:
        """Read-only mapping of prefixed option keys to their values."""
        return self._options

    @property
    def positionals(self) -> Tuple[str, ...]:
        """Positional arguments in their original order."""
        return self._positionals

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __iter__(self) -> Iterator:
        """Allow unpacking as ``options, positionals = result``."""
        yield self._options
        yield self._positionals

    def __contains__(self, key):
        """Allow checking if an option was given using 'in' operator."""
        return key in self._options

    def __getitem__(self, key):
        """Allow dictionary-style access to option values."""
        return self._options[key]

    def __eq__(self, other):
        """Allow comparison with another result or an (options, positionals) pair."""
        if isinstance(other, ParseResult):
            return (
                dict(self._options) == dict(other._options)
                and self._positionals == other._positionals
            )
        if isinstance(other, tuple) and len(other) == 2:
            options, positionals = other
            return dict(self._options) == options and self._positionals == tuple(
                positionals
            )
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return (
            f"{type(self).__name__}(options={dict(self._options)!r}, "
            f"positionals={list(self._positionals)!r})"
        )

    def get(self, key, default=None):
        """Allow .get() method access to option values."""
        return self._options.get(key, default)

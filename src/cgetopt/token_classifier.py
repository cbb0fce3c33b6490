"""Token classification for cgetopt."""

import re
from typing import Dict, Iterable, Mapping, NamedTuple, Optional

from .exceptions import (
    DuplicateOptionError,
    InvalidOptionError,
    UnrecognizedOptionError,
)
from .option_criterion import LONG_PREFIX, SHORT_PREFIX, OptionCriterion
from .types import OptionValue, TokenParts

OPTION_PATTERN = re.compile(r"(--?)([\w\-.]+)", re.ASCII)


class OptionMatch(NamedTuple):
    """An option token matched against its criterion."""

    token: str
    prefix: str
    criterion: OptionCriterion
    embedded_value: Optional[str] = None

    @property
    def key(self) -> str:
        return self.criterion.key(self.prefix)


class TokenClassifier:
    """Classifies tokens against the short and long option criteria of one parse."""

    def __init__(
        self,
        short_criteria: Iterable[OptionCriterion],
        long_criteria: Iterable[OptionCriterion],
    ):
        self._namespaces: Dict[str, Dict[str, OptionCriterion]] = {
            SHORT_PREFIX: {c.identifier: c for c in short_criteria},
            LONG_PREFIX: {c.identifier: c for c in long_criteria},
        }

    @staticmethod
    def is_option_like(token: str) -> bool:
        """Check whether a token looks like an option (starts with '-')."""
        return token.startswith("-")

    @staticmethod
    def split_token(token: str) -> TokenParts:
        """
        Split an option token into ``(prefix, identifier, embedded_value)``.

        * ``-i`` -> ``("-", "i", None)``
        * ``-ifile.txt`` -> ``("-", "i", "file.txt")``
        * ``--input`` -> ``("--", "input", None)``; long options never carry
          an embedded value.

        Raises InvalidOptionError when the token is not shaped like an option
        or its name does not start with a letter.
        """
        match = OPTION_PATTERN.fullmatch(token)
        if match is None:
            raise InvalidOptionError(token)

        prefix, suffix = match.groups()
        if not suffix[0].isalpha():
            raise InvalidOptionError(token, "option names must start with a letter")

        if prefix == SHORT_PREFIX and len(suffix) > 1:
            return prefix, suffix[0], suffix[1:]
        return prefix, suffix, None

    def lookup(self, prefix: str, identifier: str) -> Optional[OptionCriterion]:
        """Find the criterion for ``identifier`` in the namespace of ``prefix``."""
        return self._namespaces[prefix].get(identifier)

    def classify(
        self, token: str, recorded: Optional[Mapping[str, OptionValue]] = None
    ) -> OptionMatch:
        """Match an option token to its criterion, rejecting repeats of ``recorded`` keys."""
        prefix, identifier, embedded_value = self.split_token(token)

        criterion = self.lookup(prefix, identifier)
        if criterion is None:
            raise UnrecognizedOptionError(token)
        # Clustered flags such as '-rf' are not supported.
        if embedded_value is not None and not criterion.requires_value:
            raise UnrecognizedOptionError(token)

        option = OptionMatch(token, prefix, criterion, embedded_value)
        if recorded and option.key in recorded:
            raise DuplicateOptionError(option.key)
        return option

    def is_recognized(self, token: str) -> bool:
        """Check whether ``token`` names a known option."""
        if not self.is_option_like(token):
            return False
        try:
            self.classify(token)
        except (InvalidOptionError, UnrecognizedOptionError):
            return False
        return True

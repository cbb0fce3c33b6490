"""Token stream parsing for cgetopt."""

from typing import Sequence

from .exceptions import InvalidOptionValueError, MissingOptionValueError
from .parse_result import ParseResult
from .specification_parser import SpecificationParser
from .token_classifier import OptionMatch, TokenClassifier
from .types import ArgsList, LongSpec, OptionMap, OptionValue


class ParseEngine:
    """Splits a token stream into options and positional arguments."""

    def __init__(self, short_spec: str = "", long_spec: LongSpec = ()):
        self.classifier = TokenClassifier(
            SpecificationParser.parse_short_spec(short_spec),
            SpecificationParser.parse_long_spec(long_spec),
        )

    def parse(self, tokens: Sequence[str]) -> ParseResult:
        """
        Scan ``tokens`` once, left to right.

        Option tokens are recorded under their prefixed key; a value-requiring
        option without an embedded value takes the following token as its
        value. Everything else is positional. Options and positionals may be
        freely interleaved. The first error aborts the scan.
        """
        options: OptionMap = {}
        positionals: ArgsList = []

        i = 0
        while i < len(tokens):
            token = tokens[i]

            if not self.classifier.is_option_like(token):
                positionals.append(token)
                i += 1
                continue

            option = self.classifier.classify(token, options)
            value: OptionValue = None
            if option.criterion.requires_value:
                if option.embedded_value is not None:
                    value = option.embedded_value
                else:
                    value = self._take_value(option, tokens, i + 1)
                    i += 1

            options[option.key] = value
            i += 1

        return ParseResult(options, positionals)

    def _take_value(self, option: OptionMatch, tokens: Sequence[str], index: int) -> str:
        """Return the token at ``index`` as the value of ``option``."""
        if index >= len(tokens):
            raise MissingOptionValueError(option.key)

        value = tokens[index]
        if self.classifier.is_recognized(value):
            raise InvalidOptionValueError(option.key, value)
        return value


def parse(
    tokens: Sequence[str], short_spec: str = "", long_spec: LongSpec = ()
) -> ParseResult:
    """
    Parse ``tokens`` (argv without the program name) against option specs.

    ``short_spec`` is a string of option letters, each optionally followed by
    ``:`` when the option requires a value (``"hri:"``). ``long_spec`` is a
    list of words, each optionally ending in ``=`` (``["help", "input="]``).

    Returns a ParseResult that unpacks as ``(options, positionals)``.
    """
    return ParseEngine(short_spec, long_spec).parse(list(tokens))

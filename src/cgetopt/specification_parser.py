"""Option specification parsing for cgetopt."""

import re
from typing import Iterable, List

from .exceptions import InvalidSpecificationError
from .option_criterion import OptionCriterion
from .types import LongSpec

SHORT_SPEC_PATTERN = re.compile(r"\w:?", re.ASCII)
LONG_WORD_PATTERN = re.compile(r"[A-Za-z0-9_\-]+")


class SpecificationParser:
    """Turns short option strings and long option words into criteria."""

    @staticmethod
    def parse_short_spec(spec: str) -> List[OptionCriterion]:
        """
        Parse a short option string such as ``"hri:"``.

        Every word character yields one criterion; a ``:`` right after it marks
        the option as requiring a value. Characters that are not part of a
        ``word-char`` + optional ``:`` group (a leading ``:``, punctuation)
        are skipped.
        """
        if not spec or spec.isspace():
            return []

        criteria = [
            OptionCriterion(match.group()[0], match.group().endswith(":"))
            for match in SHORT_SPEC_PATTERN.finditer(spec)
        ]
        SpecificationParser._ensure_unique(criteria, spec)
        return criteria

    @staticmethod
    def parse_long_spec(words: LongSpec) -> List[OptionCriterion]:
        """Parse long option words such as ``["help", "input="]``."""
        criteria: List[OptionCriterion] = []
        for word in words:
            SpecificationParser.validate_long_word(word)
            requires_value = word.endswith("=")
            identifier = word[:-1] if requires_value else word
            criteria.append(OptionCriterion(identifier, requires_value))

        SpecificationParser._ensure_unique(criteria, ",".join(words))
        return criteria

    @staticmethod
    def validate_long_word(word: str) -> None:
        """Raise InvalidSpecificationError unless ``word`` is a valid long option."""
        if not word or not (word[0].isascii() and word[0].isalpha()):
            raise InvalidSpecificationError(word, "must start with a letter")

        name = word[:-1] if word.endswith("=") else word
        if not LONG_WORD_PATTERN.fullmatch(name):
            raise InvalidSpecificationError(
                word,
                "may only contain letters, digits, '_' and '-', "
                "optionally followed by one '='",
            )
        if len(name) < 2:
            raise InvalidSpecificationError(
                word, "must be at least two characters long"
            )
        if "--" in name:
            raise InvalidSpecificationError(word, "cannot contain consecutive '-'")
        if name.endswith("-"):
            raise InvalidSpecificationError(word, "cannot end on a '-'")

    @staticmethod
    def _ensure_unique(criteria: Iterable[OptionCriterion], spec: str) -> None:
        seen = set()
        for criterion in criteria:
            if criterion.identifier in seen:
                raise InvalidSpecificationError(
                    spec, f"option '{criterion.identifier}' declared more than once"
                )
            seen.add(criterion.identifier)

"""Option criterion value type for cgetopt."""

from typing import NamedTuple

SHORT_PREFIX = "-"
LONG_PREFIX = "--"


class OptionCriterion(NamedTuple):
    """A recognized option: its identifier and whether it takes a value."""

    identifier: str
    requires_value: bool = False

    def key(self, prefix: str) -> str:
        """Render the prefixed key used in parse results (e.g. '-i', '--input')."""
        return f"{prefix}{self.identifier}"

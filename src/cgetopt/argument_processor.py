"""Driver argument handling for cgetopt."""

from .types import ArgsList, SplitResult

SEPARATOR = "--"


class ArgumentProcessor:
    """Handles splitting and reshaping of driver arguments."""

    @staticmethod
    def split_at_separator(args: ArgsList) -> SplitResult:
        """Split arguments at the first '--' separator, dropping the separator."""
        if SEPARATOR in args:
            idx = args.index(SEPARATOR)
            return args[:idx], args[idx + 1 :]
        return args, []

    @staticmethod
    def split_long_words(value: str | None) -> ArgsList:
        """Split a comma-separated long option list ("help,input=") into words."""
        if not value:
            return []
        return [word.strip() for word in value.split(",") if word.strip()]

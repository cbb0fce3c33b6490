"""Custom exceptions for cgetopt."""


class CGetoptError(Exception):
    """Base exception for cgetopt errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidSpecificationError(CGetoptError):
    """Raised when a short or long option specification is malformed."""

    def __init__(self, spec: str, message: str = "Invalid option specification"):
        super().__init__(f"Invalid option specification '{spec}': {message}")
        self.spec = spec


class OptionError(CGetoptError):
    """Base exception for errors found while scanning the token stream."""


class InvalidOptionError(OptionError):
    """Raised when an option-like token does not have the shape of an option."""

    def __init__(self, token: str, message: str = "not a valid option"):
        super().__init__(f"Invalid option '{token}': {message}")
        self.token = token


class UnrecognizedOptionError(OptionError):
    """Raised when an option token names no known option."""

    def __init__(self, token: str):
        super().__init__(f"Unrecognized option '{token}'")
        self.token = token


class DuplicateOptionError(OptionError):
    """Raised when the same option is given more than once."""

    def __init__(self, option: str):
        super().__init__(f"Option '{option}' given more than once")
        self.option = option


class MissingOptionValueError(OptionError):
    """Raised when an option requiring a value is the last token."""

    def __init__(self, option: str):
        super().__init__(f"Option '{option}' requires a value")
        self.option = option


class InvalidOptionValueError(OptionError):
    """Raised when the token after a value-requiring option is itself an option."""

    def __init__(self, option: str, value: str):
        super().__init__(
            f"Option '{option}' requires a value, got option '{value}' instead"
        )
        self.option = option
        self.value = value

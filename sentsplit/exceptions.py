"""Exceptions raised by sentsplit."""


class SentsplitError(Exception):
    """Base class for all sentsplit errors."""


class InvalidInputError(SentsplitError, TypeError):
    """Raised when text arguments are not strings.

    This is the only hard failure of the splitter; every other problem is
    reported through confidence scores, issues and signals.
    """

    def __init__(self, argument: str, value: object):
        self.argument = argument
        self.value = value
        super().__init__(
            f"{argument} must be a string, got {type(value).__name__}"
        )


class ConfigError(SentsplitError, ValueError):
    """Raised when a configuration file cannot be loaded or validated."""

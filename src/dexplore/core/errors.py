"""Errors raised by the explorer core. The shell decides what to do with them."""


class ExplorerError(Exception):
    """Base class for every error the core raises."""


class SourceUnavailable(ExplorerError):
    """The backing word list could not be read."""

    def __init__(self, source: str, reason: str = "") -> None:
        self.source = source
        self.reason = reason
        message = f"word list unavailable: {source}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class InvalidPattern(ExplorerError):
    """A pattern search was given something that is not a valid regular expression."""

    def __init__(self, pattern: str, message: str) -> None:
        self.pattern = pattern
        self.message = message
        super().__init__(message)


class QueryCancelled(ExplorerError):
    """A Scrabble search was abandoned by its caller before it finished."""

# logdrain/errors.py


class ParseError(Exception):
    """Base error for a line that could not be turned into a LogEntry."""

    def __init__(self, message: str, stage: str | None = None):
        super().__init__(message)
        self.stage = stage

    def at(self, stage: str) -> "ParseError":
        """
        Return an error of the same class with the failing stage prefixed.
        Callers raise it `from` the original so the cause stays attached.
        """
        return type(self)(f"failed to {stage}: {self}", stage=stage)


class UnexpectedEndOfInput(ParseError):
    """A space-delimited field boundary was not found before the buffer ended."""


class InvalidTimestamp(ParseError):
    """The TIMESTAMP field is not a strict RFC3339 timestamp."""


class InvalidRouterToken(ParseError):
    """A router log token could not be rewritten (strict mode only)."""

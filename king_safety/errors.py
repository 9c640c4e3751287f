"""
Error Kinds

All errors raised by the king safety engine derive from KingSafetyError so
callers can catch the whole family at once. Each kind also subclasses the
closest built-in exception, so code that already handles ValueError or
LookupError keeps working.
"""


class KingSafetyError(Exception):
    """Base class for king safety engine errors."""


class InvalidSquare(KingSafetyError, ValueError):
    """A square index or (rank, file) coordinate lies outside the board."""


class KingNotFound(KingSafetyError, LookupError):
    """The requested side has no king on the board."""


class AdapterQueryFailure(KingSafetyError, RuntimeError):
    """The rules engine could not satisfy a board query."""

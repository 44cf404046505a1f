from __future__ import annotations


class OptionalError(Exception):
    """Base class for errors raised by Optional itself."""


class InvalidArgument(OptionalError, ValueError):
    def __init__(self, message: str = "The passed value was None."):
        super().__init__(message)


class IllegalState(OptionalError, LookupError):
    def __init__(self, message: str = "The optional is not present."):
        super().__init__(message)

"""Error codes and exceptions raised by the generator."""
from enum import Enum


class ErrorCode(str, Enum):
    """Reasons a generator call can be rejected."""

    INVALID_BOUND = "INVALID_BOUND"
    INVALID_SEED = "INVALID_SEED"
    INVALID_STATE = "INVALID_STATE"


class RandomError(ValueError):
    """
    Precondition violation on a generator call.

    These are programmer errors: the argument is never clamped or
    normalized, and retrying the same call fails the same way.
    """

    def __init__(self, code: ErrorCode, message: str | None = None):
        self.code = code
        self.message = message or f"Error: {code.value}"
        super().__init__(self.message)

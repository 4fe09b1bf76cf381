from enum import Enum


class DraftFailureReason(str, Enum):
    EMPTY_OUTPUT = "empty_output"


class DraftError(Exception):
    """Raised when the LLM produced no usable filing text."""

    def __init__(self, message: str, *, reason: DraftFailureReason) -> None:
        super().__init__(message)
        self.reason = reason


class InvalidFilingTypeError(ValueError):
    """Raised when a caller requests a filing type outside the supported set."""

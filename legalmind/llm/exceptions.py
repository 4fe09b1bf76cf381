class LlmError(Exception):
    """Base exception for all LLM boundary failures."""


class LlmConfigurationError(LlmError):
    """Raised when the client is not usable as configured (e.g. no API key)."""


class LlmTransportError(LlmError):
    """Raised on network failures and non-2xx responses. Retriable."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class LlmResponseError(LlmError):
    """Raised when a successful response carries no usable text."""

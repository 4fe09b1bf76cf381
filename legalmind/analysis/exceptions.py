from enum import Enum


class AnalysisFailureReason(str, Enum):
    NO_JSON_FOUND = "no_json_found"
    MALFORMED_JSON = "malformed_json"
    SCHEMA_VIOLATION = "schema_violation"


class AnalysisError(Exception):
    """Base exception for unusable analysis replies. Retriable by re-prompting."""

    reason: AnalysisFailureReason

    def __init__(self, message: str) -> None:
        super().__init__(message)


class NoJsonFoundError(AnalysisError):
    """Raised when the reply contains no ``{...}`` span."""

    reason = AnalysisFailureReason.NO_JSON_FOUND


class MalformedJsonError(AnalysisError):
    """Raised when the ``{...}`` span does not parse as a JSON object."""

    reason = AnalysisFailureReason.MALFORMED_JSON


class SchemaViolationError(AnalysisError):
    """Raised when a required field is missing, mistyped or an empty list."""

    reason = AnalysisFailureReason.SCHEMA_VIOLATION

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field

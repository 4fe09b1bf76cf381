class SessionError(Exception):
    """Base exception for actions invoked out of order on a session."""


class NoDocumentError(SessionError):
    """Raised when analysis is requested before a document was uploaded."""


class AnalysisRequiredError(SessionError):
    """Raised when a draft is requested without a successful analysis."""

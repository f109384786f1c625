"""LLM error taxonomy.

Every failure the client can report is one of a closed set of kinds.
Callers either catch the specific subclass or branch on ``err.kind``;
the message text is for display only.
"""

from enum import Enum


class ErrorKind(str, Enum):
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"
    MALFORMED_ERROR_RESPONSE = "malformed_error_response"
    EMPTY_RESPONSE = "empty_response"
    UNEXPECTED_CONTENT_KIND = "unexpected_content_kind"
    PROVIDER_REJECTED = "provider_rejected"


class LLMError(Exception):
    """Raised when LLM operations fail."""
    kind: ErrorKind


class TransportFailure(LLMError):
    """The request was never sent or produced no readable response."""
    kind = ErrorKind.TRANSPORT_FAILURE

    def __init__(self, cause: str):
        self.cause = cause
        super().__init__(f"Request failed: {cause}")


class MalformedResponse(LLMError):
    """A success body that is not a valid message envelope."""
    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"Malformed API response: {detail}")


class MalformedErrorResponse(LLMError):
    """An error body that is not a valid error envelope."""
    kind = ErrorKind.MALFORMED_ERROR_RESPONSE

    def __init__(self, detail: str, status: int | None = None):
        self.detail = detail
        self.status = status
        prefix = f"API error ({status})" if status else "API error"
        super().__init__(f"{prefix} with unreadable body: {detail}")


class EmptyResponse(LLMError):
    """The envelope parsed but carried no content blocks."""
    kind = ErrorKind.EMPTY_RESPONSE

    def __init__(self):
        super().__init__("API returned no content")


class UnexpectedContentKind(LLMError):
    """The first content block is not text."""
    kind = ErrorKind.UNEXPECTED_CONTENT_KIND

    def __init__(self, content_kind: str):
        self.content_kind = content_kind
        super().__init__(f"Expected a text block, got '{content_kind}'")


class ProviderRejected(LLMError):
    """The provider answered with an error envelope (auth, rate limit, bad model...)."""
    kind = ErrorKind.PROVIDER_REJECTED

    def __init__(self, message: str, error_type: str = "", status: int | None = None):
        self.message = message
        self.error_type = error_type
        self.status = status
        super().__init__(f"Claude API error: {message}")


__all__ = [
    "ErrorKind",
    "LLMError",
    "TransportFailure",
    "MalformedResponse",
    "MalformedErrorResponse",
    "EmptyResponse",
    "UnexpectedContentKind",
    "ProviderRejected",
]

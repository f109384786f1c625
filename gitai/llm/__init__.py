"""LLM Client Package"""

from gitai.llm.claude import ClaudeClient, ANTHROPIC_VERSION, DEFAULT_BASE_URL
from gitai.llm.errors import (
    ErrorKind,
    LLMError,
    TransportFailure,
    MalformedResponse,
    MalformedErrorResponse,
    EmptyResponse,
    UnexpectedContentKind,
    ProviderRejected,
)
from gitai.llm.transport import Transport, TransportError, HttpxTransport

__all__ = [
    "ClaudeClient",
    "ANTHROPIC_VERSION",
    "DEFAULT_BASE_URL",
    "Transport",
    "TransportError",
    "HttpxTransport",
    "ErrorKind",
    "LLMError",
    "TransportFailure",
    "MalformedResponse",
    "MalformedErrorResponse",
    "EmptyResponse",
    "UnexpectedContentKind",
    "ProviderRejected",
]

"""HTTP transport for LLM clients.

The client only needs "POST this JSON, give me the body back", so that is
all a transport offers. Tests swap in a fake; production uses httpx.
"""

import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Mapping

import httpx

logger = logging.getLogger(__name__)

# RFC 9110 token characters
_HEADER_NAME_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
_HEADER_VALUE_RE = re.compile(r"^[\t\x20-\x7e]*$")


class TransportError(Exception):
    """Raised when a request does not produce a 2xx response.

    ``body`` is only set when the remote answered with an error status;
    it holds the full response text so the caller can parse the error
    envelope. Connection-level failures leave it as None.
    """

    def __init__(self, message: str, status: int | None = None, body: str | None = None):
        super().__init__(message)
        self.status = status
        self.body = body


class Transport(ABC):
    """Abstract base for JSON-over-HTTP transports."""

    @abstractmethod
    def send_json(self, endpoint: str, headers: Mapping[str, str], body: Any) -> str:
        """POST ``body`` as JSON and return the raw response text."""
        pass


def validate_headers(headers: Mapping[str, str]) -> None:
    """Reject header names or values that cannot go on the wire."""
    for name, value in headers.items():
        if not isinstance(name, str) or not _HEADER_NAME_RE.match(name):
            raise TransportError(f"Invalid header name: {name!r}")
        if not isinstance(value, str) or not _HEADER_VALUE_RE.match(value):
            raise TransportError(f"Invalid value for header '{name}'")


class HttpxTransport(Transport):
    """Blocking transport backed by httpx.Client."""

    DEFAULT_TIMEOUT = 60.0

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, client: httpx.Client | None = None):
        self.timeout = timeout
        self._client = client or httpx.Client(timeout=timeout)

    def close(self) -> None:
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def send_json(self, endpoint: str, headers: Mapping[str, str], body: Any) -> str:
        validate_headers(headers)

        try:
            content = json.dumps(body).encode('utf-8')
        except (TypeError, ValueError) as e:
            raise TransportError(f"Could not serialize request body: {e}") from e

        logger.debug("POST %s (%d bytes)", endpoint, len(content))
        try:
            response = self._client.post(endpoint, headers=dict(headers), content=content)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timed out after {self.timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Request to {endpoint} failed: {e}") from e

        logger.debug("Response %d from %s", response.status_code, endpoint)
        if not response.is_success:
            raise TransportError(
                f"HTTP {response.status_code} from {endpoint}",
                status=response.status_code,
                body=response.text,
            )
        return response.text

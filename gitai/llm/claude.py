"""Claude (Anthropic Messages API) client"""

import json
import logging
from typing import Any

from gitai.llm.errors import (
    EmptyResponse,
    MalformedErrorResponse,
    MalformedResponse,
    ProviderRejected,
    TransportFailure,
    UnexpectedContentKind,
)
from gitai.llm.transport import Transport, TransportError

logger = logging.getLogger(__name__)

ANTHROPIC_VERSION = "2023-06-01"
DEFAULT_BASE_URL = "https://api.anthropic.com"
TEXT_BLOCK = "text"


class ClaudeClient:
    """Single-shot client for POST /v1/messages.

    The API key and base URL are fixed per instance, so several clients
    with different credentials can live side by side.
    """

    def __init__(self, transport: Transport, api_key: str, base_url: str = DEFAULT_BASE_URL):
        self.transport = transport
        self.api_key = api_key
        self.base_url = base_url.rstrip('/')

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/v1/messages"

    def _headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }

    @staticmethod
    def _payload(prompt: str, model: str, max_tokens: int) -> dict[str, Any]:
        return {
            "model": model,
            "max_tokens": max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }

    def generate(self, prompt: str, model: str, max_tokens: int) -> str:
        """Send ``prompt`` as one user turn and return the first text block.

        Raises an LLMError subclass for every failure; nothing is retried.
        """
        logger.debug("Requesting %s (max_tokens=%d, prompt=%d chars)", model, max_tokens, len(prompt))
        try:
            raw = self.transport.send_json(self.endpoint, self._headers(), self._payload(prompt, model, max_tokens))
        except TransportError as e:
            if e.body is None:
                raise TransportFailure(str(e)) from e
            raise self._parse_error(e.body, e.status) from e

        return self._parse_message(raw)

    def _parse_message(self, raw: str) -> str:
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedResponse(str(e)) from e

        if not isinstance(data, dict) or not isinstance(data.get("content"), list):
            raise MalformedResponse("missing 'content' list")

        content = data["content"]
        logger.debug("Received %d content block(s)", len(content))
        if not content:
            raise EmptyResponse()

        first = content[0]
        if not isinstance(first, dict) or not isinstance(first.get("type"), str):
            raise MalformedResponse("content block has no 'type'")
        if first["type"] != TEXT_BLOCK:
            raise UnexpectedContentKind(first["type"])

        text = first.get("text")
        if not isinstance(text, str):
            raise MalformedResponse("text block has no 'text'")
        return text

    @staticmethod
    def _parse_error(body: str, status: int | None) -> Exception:
        try:
            data = json.loads(body)
        except json.JSONDecodeError as e:
            return MalformedErrorResponse(str(e), status)

        error = data.get("error") if isinstance(data, dict) else None
        if not isinstance(error, dict) or not isinstance(error.get("message"), str):
            return MalformedErrorResponse("missing 'error.message'", status)

        error_type = error.get("type")
        return ProviderRejected(
            error["message"],
            error_type=error_type if isinstance(error_type, str) else "",
            status=status,
        )

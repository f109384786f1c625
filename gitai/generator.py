"""Commit message generation: diff in, message out."""

import logging

from gitai.llm import ClaudeClient, DEFAULT_BASE_URL, HttpxTransport, Transport
from gitai.prompts import build_prompt

logger = logging.getLogger(__name__)

MODEL = "claude-3-5-sonnet-20240620"
MAX_TOKENS = 1000


def generate_commit_message(
    api_key: str,
    diff: str,
    conventional: bool = False,
    *,
    transport: Transport | None = None,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = HttpxTransport.DEFAULT_TIMEOUT,
) -> str:
    """Ask Claude for a commit message describing ``diff``.

    Callers should not call this with an empty diff. Any LLMError from the
    client propagates as-is. ``timeout`` only applies to the default
    transport built when none is passed in.
    """
    prompt = build_prompt(diff, use_structured_style=conventional)
    logger.debug("Built %s prompt (%d chars)", "conventional" if conventional else "plain", len(prompt))

    if transport is not None:
        return ClaudeClient(transport, api_key, base_url).generate(prompt, MODEL, MAX_TOKENS)

    with HttpxTransport(timeout=timeout) as owned:
        return ClaudeClient(owned, api_key, base_url).generate(prompt, MODEL, MAX_TOKENS)

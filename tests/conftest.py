"""Shared test doubles."""

import json

import pytest

from gitai.llm import Transport, TransportError


class FakeTransport(Transport):
    """Records every request and replays a canned body or error."""

    def __init__(self, response: str = "", error: TransportError | None = None):
        self.response = response
        self.error = error
        self.calls = []

    def send_json(self, endpoint, headers, body):
        self.calls.append({
            "endpoint": endpoint,
            "headers": dict(headers),
            "body": json.loads(json.dumps(body)),
        })
        if self.error is not None:
            raise self.error
        return self.response

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def fake_transport():
    """Return a factory for FakeTransport."""
    def _make(response="", error=None):
        return FakeTransport(response=response, error=error)
    return _make


@pytest.fixture
def text_body():
    """Return a factory for a minimal success envelope."""
    def _make(text):
        return json.dumps({"content": [{"type": "text", "text": text}]})
    return _make

"""
Tests for HttpxTransport, using httpx.MockTransport instead of the network.

Run with:
    pytest tests/test_transport.py -v
"""

import json

import httpx
import pytest

from gitai.llm import ClaudeClient, HttpxTransport, TransportError, TransportFailure

URL = "https://api.example.test/v1/messages"


@pytest.fixture
def make_transport():
    """Return a factory wiring a request handler into HttpxTransport."""
    def _make(handler):
        client = httpx.Client(transport=httpx.MockTransport(handler))
        return HttpxTransport(client=client)
    return _make


class TestHttpxTransport:

    def test_posts_json_and_returns_body(self, make_transport):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["headers"] = request.headers
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, text='{"content": []}')

        transport = make_transport(handler)
        result = transport.send_json(URL, {"x-api-key": "k", "content-type": "application/json"}, {"a": [1, 2]})

        assert result == '{"content": []}'
        assert seen["method"] == "POST"
        assert seen["url"] == URL
        assert seen["headers"]["x-api-key"] == "k"
        assert seen["headers"]["content-type"] == "application/json"
        assert seen["body"] == {"a": [1, 2]}

    def test_error_status_carries_full_body(self, make_transport):
        body = '{"type":"error","error":{"type":"rate_limit_error","message":"slow down"}}'
        transport = make_transport(lambda request: httpx.Response(429, text=body))

        with pytest.raises(TransportError) as exc_info:
            transport.send_json(URL, {}, {})

        assert exc_info.value.status == 429
        assert exc_info.value.body == body

    def test_connection_error_has_no_body(self, make_transport):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError) as exc_info:
            make_transport(handler).send_json(URL, {}, {})

        assert exc_info.value.body is None
        assert exc_info.value.status is None

    def test_timeout_has_no_body(self, make_transport):
        def handler(request):
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(TransportError, match="timed out") as exc_info:
            make_transport(handler).send_json(URL, {}, {})
        assert exc_info.value.body is None

    def test_unserializable_body(self, make_transport):
        transport = make_transport(lambda request: httpx.Response(200, text="{}"))
        with pytest.raises(TransportError, match="serialize") as exc_info:
            transport.send_json(URL, {}, {"bad": object()})
        assert exc_info.value.body is None

    @pytest.mark.parametrize("headers", [
        {"bad header": "v"},
        {"x-api-key": "line\r\nbreak"},
        {"x-api-key": "café"},
        {"": "v"},
    ])
    def test_malformed_headers(self, make_transport, headers):
        calls = []
        transport = make_transport(lambda request: calls.append(request) or httpx.Response(200))

        with pytest.raises(TransportError, match="header"):
            transport.send_json(URL, headers, {})
        assert calls == []

    def test_bad_key_reported_as_request_failure(self, make_transport):
        calls = []
        transport = make_transport(lambda request: calls.append(request) or httpx.Response(200))

        with pytest.raises(TransportFailure) as exc_info:
            ClaudeClient(transport, "sk-ant-café").generate("p", "claude-test", 10)

        assert str(exc_info.value) == "Request failed: Invalid value for header 'x-api-key'"
        assert calls == []

"""Tests for the request dispatcher."""

import json
import logging

import anyio
import pytest
from asks.errors import ConnectivityError

from conftest import FakeResponse
from kaiheila.core.dispatch import encode_payload, request
from kaiheila.core.session import TRACE, Session
from kaiheila.exc import APIError, MalformedEnvelope, SerializationError, TransportError

pytestmark = pytest.mark.anyio


class TestRequestShape:
    async def test_get_has_no_body_or_content_type(self, session, transport):
        transport.queue_envelope({"url": "wss://x"})
        await request(session, "GET", "/gateway/index")

        method, url, kwargs = transport.last
        assert method == "GET"
        assert "data" not in kwargs
        assert "Content-Type" not in kwargs["headers"]

    async def test_post_sends_json(self, session, transport):
        transport.queue_envelope({})
        await request(session, "POST", "/message/create", {"a": 1})

        method, url, kwargs = transport.last
        assert method == "POST"
        assert kwargs["data"] == b'{"a":1}'
        assert kwargs["headers"]["Content-Type"] == "application/json"

    async def test_authorization_header(self, session, transport):
        transport.queue_envelope({})
        await request(session, "GET", "/user/me")

        assert transport.last[2]["headers"]["Authorization"] == "Bot test-token"

    async def test_relative_url_is_resolved(self, session, transport):
        transport.queue_envelope({})
        await request(session, "GET", "/user/me?x=1")

        assert transport.last[1] == "https://example.test/api/v3/user/me?x=1"

    async def test_absolute_url_is_kept(self, session, transport):
        transport.queue_envelope({})
        await request(session, "GET", "https://other.test/thing")

        assert transport.last[1] == "https://other.test/thing"

    async def test_streams_response(self, session, transport):
        transport.queue_envelope({})
        await request(session, "GET", "/user/me")

        assert transport.last[2]["stream"] is True

    async def test_timeout_is_forwarded(self, transport):
        session = Session(token="t", transport=transport, timeout=2.5)
        transport.queue_envelope({})
        await request(session, "GET", "/user/me")

        assert transport.last[2]["timeout"] == 2.5

    async def test_no_timeout_by_default(self, session, transport):
        transport.queue_envelope({})
        await request(session, "GET", "/user/me")

        assert "timeout" not in transport.last[2]


class TestOutcomes:
    async def test_success(self, session, transport):
        response = transport.queue(
            FakeResponse(b'{"code":0,"message":"","data":{"msg_id":"abc"}}')
        )

        assert await request(session, "POST", "/message/create", {}) == b'{"msg_id":"abc"}'
        assert response.body.closed

    async def test_api_error(self, session, transport):
        response = transport.queue(FakeResponse(b'{"code":40001,"message":"bad token"}',
                                                status_code=401))

        with pytest.raises(APIError) as exc_info:
            await request(session, "GET", "/user/me")

        assert exc_info.value.code == 40001
        assert exc_info.value.message == "bad token"
        assert response.body.closed

    async def test_malformed(self, session, transport):
        response = transport.queue(FakeResponse(b"<html>bad gateway</html>", status_code=502))

        with pytest.raises(MalformedEnvelope) as exc_info:
            await request(session, "GET", "/user/me")

        assert exc_info.value.raw == b"<html>bad gateway</html>"
        assert response.body.closed

    async def test_serialization_error_sends_nothing(self, session, transport):
        with pytest.raises(SerializationError):
            await request(session, "POST", "/message/create", {"a": object()})

        assert transport.calls == []

    async def test_nan_is_not_serializable(self, session, transport):
        with pytest.raises(SerializationError):
            await request(session, "POST", "/message/create", {"a": float("nan")})

        assert transport.calls == []

    @pytest.mark.parametrize("error", [
        ConnectionRefusedError("refused"),
        TimeoutError("timed out"),
        ConnectivityError("dns"),
    ])
    async def test_transport_error(self, session, transport, error):
        transport.queue(raises=error)

        with pytest.raises(TransportError) as exc_info:
            await request(session, "GET", "/user/me")

        assert exc_info.value.__cause__ is error
        assert len(transport.calls) == 1

    async def test_body_read_error(self, session, transport):
        response = transport.queue(FakeResponse(b'{"code":0}',
                                                read_error=ConnectionResetError("reset")))

        with pytest.raises(TransportError):
            await request(session, "GET", "/user/me")

        assert response.body.closed

    @pytest.mark.parametrize("error", [
        anyio.EndOfStream(),
        anyio.ClosedResourceError(),
        anyio.IncompleteRead(),
    ])
    async def test_body_stream_error(self, session, transport, error):
        response = transport.queue(FakeResponse(b'{"code":0}', read_error=error))

        with pytest.raises(TransportError) as exc_info:
            await request(session, "GET", "/user/me")

        assert exc_info.value.__cause__ is error
        assert response.body.closed

    async def test_transport_error_is_a_connection_error(self, session, transport):
        transport.queue(raises=OSError("boom"))

        with pytest.raises(ConnectionError):
            await request(session, "GET", "/user/me")


class TestDiagnostics:
    async def test_trace_records(self, session, transport, caplog):
        caplog.set_level(TRACE, logger="kaiheila.http")
        transport.queue(FakeResponse(b'{"code":0,"message":"","data":null}',
                                     headers={"X-Rate": "1"}))

        await request(session, "POST", "/message/create", {"a": 1})

        records = [r for r in caplog.records if r.levelno == TRACE]
        assert len(records) == 4

        sent, sent_headers, received, received_headers = records
        assert sent.method == "POST"
        assert sent.url == "https://example.test/api/v3/message/create"
        assert sent.payload == b'{"a":1}'
        assert "Content-Type" in sent_headers.headers
        assert received.status_code == 200
        assert received.status == "OK"
        assert received.body == b'{"code":0,"message":"","data":null}'
        assert received_headers.headers == {"X-Rate": "1"}

    async def test_token_is_not_logged(self, session, transport, caplog):
        caplog.set_level(TRACE, logger="kaiheila.http")
        transport.queue_envelope({})

        await request(session, "GET", "/user/me")

        assert "test-token" not in caplog.text
        headers = [r for r in caplog.records if hasattr(r, "headers")][0].headers
        assert "Authorization" in headers

    async def test_api_error_is_logged(self, session, transport, caplog):
        caplog.set_level(logging.ERROR, logger="kaiheila.http")
        transport.queue_envelope(code=40000, message="bad request")

        with pytest.raises(APIError):
            await request(session, "GET", "/user/me")

        assert "bad request" in caplog.text


class TestEncodePayload:
    def test_compact(self):
        assert encode_payload({"a": [1, 2], "b": None}) == b'{"a":[1,2],"b":null}'

    def test_unicode(self):
        assert encode_payload({"content": "你好"}) == '{"content":"你好"}'.encode("utf-8")


class BrokenHandler(logging.Handler):
    def emit(self, record):
        raise RuntimeError("sink is down")


class TestBrokenLogging:
    async def test_failing_handler_does_not_change_request(self, transport):
        logger = logging.getLogger("kaiheila.test.broken")
        logger.setLevel(TRACE)
        logger.propagate = False
        handler = BrokenHandler()
        logger.addHandler(handler)
        try:
            session = Session(token="t", transport=transport, logger=logger)
            transport.queue_envelope({"msg_id": "abc"})

            result = await request(session, "POST", "/message/create", {"a": 1})
        finally:
            logger.removeHandler(handler)

        assert json.loads(result) == {"msg_id": "abc"}
        assert len(transport.calls) == 1
        assert transport.last[2]["data"] == b'{"a":1}'

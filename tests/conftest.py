"""Shared fixtures: a fake asks transport with scripted responses."""

import json
import logging

import pytest

from kaiheila.core.session import Session


@pytest.fixture
def anyio_backend():
    return "asyncio"


class FakeBody:
    def __init__(self, chunks, error=None):
        self._chunks = list(chunks)
        self._error = error
        self.closed = False

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self._error is not None:
            raise self._error

        if not self._chunks:
            raise StopAsyncIteration

        return self._chunks.pop(0)

    async def close(self):
        self.closed = True


class FakeResponse:
    def __init__(self, body: bytes, status_code=200, reason_phrase="OK", headers=None,
                 read_error=None):
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.headers = headers or {"Content-Type": "application/json"}
        # split the body to make sure it is reassembled
        half = len(body) // 2
        self.body = FakeBody([body[:half], body[half:]], error=read_error)


class FakeTransport:
    """Records every request and answers with the queued responses in order."""

    def __init__(self):
        self.calls = []
        self.responses = []

    def queue(self, response=None, *, raises=None):
        self.responses.append((response, raises))
        return response

    def queue_envelope(self, data=None, code=0, message=""):
        envelope = {"code": code, "message": message}
        if data is not None:
            envelope["data"] = data

        return self.queue(FakeResponse(json.dumps(envelope).encode("utf-8")))

    async def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        response, raises = self.responses.pop(0)
        if raises is not None:
            raise raises

        return response

    @property
    def last(self):
        return self.calls[-1]


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def session(transport):
    return Session(token="Bot test-token", base_url="https://example.test/api/v3",
                   transport=transport, logger=logging.getLogger("kaiheila.http"))

# This file is part of kaiheila.
#
# kaiheila is free software: you can redistribute it and/or modify
# it under the terms of the GNU Lesser General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# kaiheila is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with kaiheila.  If not, see <http://www.gnu.org/licenses/>.

"""
The single path every HTTP exchange with the platform goes through.

.. currentmodule:: kaiheila.core.dispatch
"""
import json
from typing import Any, Dict

import anyio
import h11
from asks.errors import AsksException

import kaiheila
from kaiheila.core.envelope import decode_envelope
from kaiheila.core.session import TRACE, Session
from kaiheila.exc import APIError, MalformedEnvelope, SerializationError, TransportError

#: Exceptions that mean the exchange itself failed.
TRANSPORT_ERRORS = (OSError, AsksException, h11.ProtocolError, anyio.BrokenResourceError,
                    anyio.ClosedResourceError, anyio.EndOfStream, anyio.IncompleteRead)


def encode_payload(payload: Any) -> bytes:
    """
    Encodes a request payload as compact JSON.

    :raises SerializationError: If the payload cannot be represented as JSON.
    """
    try:
        return json.dumps(payload, separators=(",", ":"), ensure_ascii=False,
                          allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(payload, str(e)) from e


def build_headers(session: Session, body: bytes) -> Dict[str, str]:
    """
    Builds the headers for a request.

    ``Content-Type`` is only present when there is a body to describe.
    """
    headers = {
        "User-Agent": kaiheila.USER_AGENT,
        "Authorization": session.token,
    }

    if body:
        headers["Content-Type"] = "application/json"

    return headers


def _trace(logger, msg: str, *args, **fields) -> None:
    try:
        logger.log(TRACE, msg, *args, extra=fields)
    except Exception:
        # a broken handler must not change the outcome of the request
        pass


def _redacted(headers: Dict[str, str]) -> Dict[str, str]:
    return {k: ("<redacted>" if k == "Authorization" else v) for k, v in headers.items()}


async def _read_body(response) -> bytes:
    chunks = []
    async for chunk in response.body:
        chunks.append(chunk)

    return b"".join(chunks)


async def request(session: Session, method: str, url: str, payload: Any = None) -> bytes:
    """
    Performs a single request and returns the raw ``data`` of the response envelope.

    Nothing is retried. Every failure is raised to the caller.

    :param session: The :class:`.Session` to authenticate and transport the request with.
    :param method: The HTTP method.
    :param url: The URL or API path, with its query string already encoded.
    :param payload: The JSON payload to send, if any.
    :return: The raw JSON text of the response's ``data`` member.
    :raises SerializationError: If ``payload`` can't be encoded. Nothing is sent.
    :raises TransportError: If the exchange failed or the body could not be read.
    :raises MalformedEnvelope: If the response was not a well-formed envelope.
    :raises APIError: If the platform rejected the request.
    """
    logger = session.logger
    url = session.resolve(url)

    body = b""
    if payload is not None:
        body = encode_payload(payload)

    _trace(logger, "http api request %s %s", method, url,
           method=method, url=url, payload=body)

    headers = build_headers(session, body)
    _trace(logger, "http api request headers", headers=_redacted(headers))

    kwargs = {"headers": headers, "stream": True}
    if body:
        kwargs["data"] = body

    if session.timeout is not None:
        kwargs["timeout"] = session.timeout

    try:
        response = await session.transport.request(method, url, **kwargs)
    except TRANSPORT_ERRORS as e:
        logger.error("%s %s => failed: %r", method, url, e)
        raise TransportError(method, url, repr(e)) from e

    try:
        try:
            raw = await _read_body(response)
        except TRANSPORT_ERRORS as e:
            logger.error("%s %s => %s, body unreadable: %r", method, url, response.status_code, e)
            raise TransportError(method, url, "could not read body: {!r}".format(e)) from e

        _trace(logger, "http response %s %s", response.status_code, response.reason_phrase,
               status_code=response.status_code, status=response.reason_phrase, body=raw)
        _trace(logger, "http response headers", headers=dict(response.headers))

        try:
            return decode_envelope(raw)
        except MalformedEnvelope as e:
            logger.error("response unmarshal error: %s", e.reason)
            raise
        except APIError as e:
            logger.error("api response error %s: %s", e.code, e.message)
            raise
    finally:
        try:
            await response.body.close()
        except TRANSPORT_ERRORS:
            logger.exception("error closing response body")

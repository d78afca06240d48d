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
Decoding for the response wrapper the platform puts around every JSON body.

Every response looks like ``{"code": 0, "message": "", "data": ...}``. The ``data`` member is
handed back as the exact JSON text it was received as, so the endpoint that asked for it can
decode it into its own shape.

.. currentmodule:: kaiheila.core.envelope
"""
import json
from json.decoder import scanstring
from typing import Any, Dict, NamedTuple, Tuple

from kaiheila.exc import APIError, MalformedEnvelope

_decoder = json.JSONDecoder()
_WHITESPACE = " \t\n\r"


class ResponseEnvelope(NamedTuple):
    """
    The decoded wrapper of a single response.
    """

    #: The platform's result code. ``0`` means success.
    code: int

    #: The human readable description of ``code``.
    message: str

    #: The raw JSON text of the ``data`` member.
    data: bytes


def _skip_whitespace(text: str, idx: int) -> int:
    while idx < len(text) and text[idx] in _WHITESPACE:
        idx += 1

    return idx


def split_object(raw: bytes) -> Dict[str, Tuple[Any, str]]:
    """
    Splits a JSON object into its members, keeping the source text of every value.

    :param raw: The bytes of a JSON document.
    :return: A dict of ``key -> (decoded value, raw value text)``.
    :raises MalformedEnvelope: If ``raw`` is not a valid JSON object.
    """
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedEnvelope(raw, "body is not valid UTF-8") from e

    # validate up front so the scan below only ever sees well-formed input
    try:
        json.loads(text)
    except ValueError as e:
        raise MalformedEnvelope(raw, "invalid JSON: {}".format(e)) from e

    idx = _skip_whitespace(text, 0)
    if text[idx] != "{":
        raise MalformedEnvelope(raw, "expected a JSON object")

    members = {}
    idx = _skip_whitespace(text, idx + 1)
    if text[idx] == "}":
        return members

    while True:
        key, idx = scanstring(text, idx + 1)
        # skip the colon
        idx = _skip_whitespace(text, _skip_whitespace(text, idx) + 1)
        value, end = _decoder.raw_decode(text, idx)
        members[key] = (value, text[idx:end])

        idx = _skip_whitespace(text, end)
        if text[idx] == "}":
            return members

        # skip the comma
        idx = _skip_whitespace(text, idx + 1)


def parse_envelope(raw: bytes) -> ResponseEnvelope:
    """
    Parses a response body into a :class:`.ResponseEnvelope` without judging its code.

    :param raw: The full response body.
    :raises MalformedEnvelope: If the body is not a well-formed envelope.
    """
    members = split_object(raw)

    if "code" not in members:
        raise MalformedEnvelope(raw, "missing 'code'")

    code, _ = members["code"]
    # bool is a subclass of int, but true/false is never a valid code
    if not isinstance(code, int) or isinstance(code, bool):
        raise MalformedEnvelope(raw, "'code' is not an integer")

    message, _ = members.get("message", ("", '""'))
    if message is None:
        message = ""
    elif not isinstance(message, str):
        raise MalformedEnvelope(raw, "'message' is not a string")

    _, data = members.get("data", (None, "null"))
    return ResponseEnvelope(code=code, message=message, data=data.encode("utf-8"))


def decode_envelope(raw: bytes) -> bytes:
    """
    Decodes a response body, returning the raw ``data`` on success.

    :param raw: The full response body.
    :return: The JSON text of the ``data`` member, unchanged.
    :raises MalformedEnvelope: If the body is not a well-formed envelope.
    :raises APIError: If the envelope carries a non-zero code.
    """
    envelope = parse_envelope(raw)
    if envelope.code != 0:
        raise APIError(envelope.code, envelope.message)

    return envelope.data

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
Exceptions raised from within the library.

.. currentmodule:: kaiheila.exc
"""


class KaiheilaError(Exception):
    """
    The base class for all kaiheila exceptions.
    """


class SerializationError(KaiheilaError, ValueError):
    """
    Raised when a request payload cannot be encoded as JSON.

    The request is never sent when this is raised.
    """

    def __init__(self, payload, reason: str):
        #: The payload that could not be encoded.
        self.payload = payload
        self.reason = reason

    def __str__(self) -> str:
        return "Could not serialize payload of type {}: {}".format(
            type(self.payload).__name__, self.reason
        )

    __repr__ = __str__


class TransportError(KaiheilaError, ConnectionError):
    """
    Raised when the HTTP exchange could not complete, or the response body could not be read.
    """

    def __init__(self, method: str, url: str, reason: str):
        self.method = method
        self.url = url
        self.reason = reason

    def __str__(self) -> str:
        return "{} {} failed: {}".format(self.method, self.url, self.reason)

    __repr__ = __str__


class MalformedEnvelope(KaiheilaError, ValueError):
    """
    Raised when a response was received but did not have the expected envelope shape.
    """

    def __init__(self, raw: bytes, reason: str):
        #: The raw bytes that failed to decode.
        self.raw = raw
        self.reason = reason

    def __str__(self) -> str:
        preview = self.raw[:200]
        return "Malformed response ({}): {!r}".format(self.reason, preview)

    __repr__ = __str__


class APIError(KaiheilaError):
    """
    Raised when the platform rejects a request with a non-zero envelope code.
    """

    def __init__(self, code: int, message: str):
        #: The error code for this response.
        self.code = code

        #: The error message for this response.
        self.message = message

    def __str__(self) -> str:
        return "{}: {}".format(self.code, self.message)

    __repr__ = __str__

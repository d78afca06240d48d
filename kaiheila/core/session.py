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
The per-process capability bundle handed to every request.

.. currentmodule:: kaiheila.core.session
"""
import logging
from dataclasses import dataclass, field
from typing import Optional

import asks

#: The log level used for request and response diagnostics.
TRACE = 5
logging.addLevelName(TRACE, "TRACE")

#: The default API root.
DEFAULT_BASE_URL = "https://www.kaiheila.cn/api/v3"

logger = logging.getLogger("kaiheila.http")


@dataclass(frozen=True)
class Session:
    """
    Holds the credential, logger and HTTP transport used to talk to the platform.

    A session is never modified by a request, so a single instance can be shared between any
    number of concurrent calls.

    .. code-block:: python3

        session = Session.for_bot("1/MTA=/abcdef")
        data = await request(session, "GET", "/user/me")

    :param token: The full value sent in the ``Authorization`` header.
    :param base_url: The API root that relative paths are resolved against.
    :param timeout: The per-request timeout, in seconds, passed to the transport.
    :param logger: The logger that receives request and response diagnostics.
    :param transport: The :class:`asks.Session` used to perform requests.
    :param connections: The connection limit for the default transport.
    """

    token: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None
    logger: logging.Logger = field(default=logger, repr=False)
    transport: asks.Session = field(default=None, repr=False)
    connections: int = 10

    def __post_init__(self):
        if not self.token:
            raise ValueError("A session requires a token")

        if self.transport is None:
            # frozen, so bypass the generated __setattr__
            object.__setattr__(self, "transport", asks.Session(connections=self.connections))

    @classmethod
    def for_bot(cls, token: str, **kwargs) -> 'Session':
        """
        Creates a session for a bot token.

        :param token: The bare bot token, without the ``Bot`` prefix.
        :return: A new :class:`.Session` that authenticates as the bot.
        """
        return cls(token="Bot {}".format(token), **kwargs)

    def resolve(self, url: str) -> str:
        """
        Resolves a path relative to this session's base URL.

        Absolute URLs are returned unchanged.
        """
        if url.startswith("/"):
            return self.base_url.rstrip("/") + url

        return url

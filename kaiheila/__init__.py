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
kaiheila - An async Python library for the KaiHeiLa HTTP API.

.. currentmodule:: kaiheila

.. autosummary::
    :toctree:

    core
    dataclasses

    exc
    util
"""
import sys

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("kaiheila")
except PackageNotFoundError:
    __version__ = "0.0.0"

_fmt = "KaiheilaBot (kaiheila {0}) Python/{1[0]}.{1[1]}"
USER_AGENT = _fmt.format(__version__, sys.version_info)
del _fmt


from kaiheila.core.dispatch import request
from kaiheila.core.httpclient import Endpoints, HTTPClient
from kaiheila.core.pagination import PageInfo, PageSetting, request_with_page
from kaiheila.core.query import QueryOption, compose_url, with_flag, with_int, with_value
from kaiheila.core.session import Session
from kaiheila.dataclasses.channel import Channel, ChannelRoleIndex, ChannelType
from kaiheila.dataclasses.guild import Guild, GuildMuteList, MuteType
from kaiheila.dataclasses.message import Message, MessageListFlag, MessageResponse, \
    MessageType, UserChat
from kaiheila.dataclasses.role import Role, RolePermission
from kaiheila.dataclasses.user import ReactedUser, User
from kaiheila.exc import APIError, KaiheilaError, MalformedEnvelope, SerializationError, \
    TransportError

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
Wrappers for Message objects.

.. currentmodule:: kaiheila.dataclasses.message
"""
import enum

from kaiheila.dataclasses.bases import IDObject
from kaiheila.dataclasses.user import User
from kaiheila.util import to_datetime, try_enum


class MessageType(enum.IntEnum):
    """
    The content types a message can have.
    """

    TEXT = 1
    IMAGE = 2
    VIDEO = 3
    FILE = 4
    AUDIO = 8
    KMARKDOWN = 9
    CARD = 10
    SYSTEM = 255


class MessageListFlag(enum.Enum):
    """
    Where to fetch messages from, relative to a reference message.
    """

    BEFORE = "before"
    AROUND = "around"
    AFTER = "after"


class Message(IDObject):
    """
    Represents a message in a channel.
    """

    __slots__ = ("type", "content", "author", "mention", "mention_all", "mention_roles",
                 "mention_here", "embeds", "attachments", "reactions", "quote", "created_at",
                 "edited_at")

    def __init__(self, **kwargs):
        super().__init__(kwargs.get("id"))

        #: The :class:`.MessageType` of this message, or the raw int for an unknown type.
        self.type = try_enum(MessageType, kwargs.get("type", MessageType.TEXT))

        #: The content of this message.
        self.content = kwargs.get("content", None)

        #: The :class:`.User` that sent this message.
        self.author = User(**kwargs.get("author", {}))

        #: The IDs of users mentioned by this message.
        self.mention = kwargs.get("mention", [])
        self.mention_all = kwargs.get("mention_all", False)
        self.mention_roles = kwargs.get("mention_roles", [])
        self.mention_here = kwargs.get("mention_here", False)

        self.embeds = kwargs.get("embeds", [])
        self.attachments = kwargs.get("attachments", None)
        self.reactions = kwargs.get("reactions", [])

        #: The message this message quotes, as a raw dict.
        self.quote = kwargs.get("quote", None)

        self.created_at = to_datetime(kwargs.get("create_at"))
        self.edited_at = to_datetime(kwargs.get("updated_at") or None)

    def __repr__(self) -> str:
        return "<Message id={!r} author={!r}>".format(self.id, self.author)


class MessageResponse(object):
    """
    The result of sending a message.
    """

    __slots__ = ("id", "timestamp", "nonce")

    def __init__(self, **kwargs):
        #: The ID of the created message.
        self.id = kwargs.get("msg_id")

        #: When the message was created.
        self.timestamp = to_datetime(kwargs.get("msg_timestamp"))

        #: The nonce passed when creating the message, echoed back.
        self.nonce = kwargs.get("nonce", None)


class UserChat(object):
    """
    Represents a direct chat session with another user.
    """

    __slots__ = ("code", "last_read_time", "latest_msg_time", "unread_count", "target")

    def __init__(self, **kwargs):
        #: The chat code that identifies this session.
        self.code = kwargs.get("code")

        self.last_read_time = to_datetime(kwargs.get("last_read_time"))
        self.latest_msg_time = to_datetime(kwargs.get("latest_msg_time"))
        self.unread_count = kwargs.get("unread_count", 0)

        #: The :class:`.User` on the other end of this chat.
        self.target = User(**kwargs.get("target_info", {}))

    def __repr__(self) -> str:
        return "<UserChat code={!r} target={!r}>".format(self.code, self.target)

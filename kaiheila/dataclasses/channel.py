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
Wrappers for Channel objects.

.. currentmodule:: kaiheila.dataclasses.channel
"""
import enum
from typing import List

from kaiheila.dataclasses.bases import IDObject
from kaiheila.dataclasses.role import RolePermission
from kaiheila.dataclasses.user import User
from kaiheila.util import try_enum


class ChannelType(enum.IntEnum):
    """
    Returns a mapping from the platform's channel type.
    """

    #: A category; a parent of other channels.
    CATEGORY = 0

    #: A text channel.
    TEXT = 1

    #: A voice channel.
    VOICE = 2


class PermissionOverwrite(object):
    """
    A permission overwrite for one role in a channel.
    """

    __slots__ = ("role_id", "allow", "deny")

    def __init__(self, **kwargs):
        #: The ID of the role this overwrite applies to.
        self.role_id = kwargs.get("role_id")

        #: The permissions explicitly granted.
        self.allow = RolePermission(kwargs.get("allow", 0))

        #: The permissions explicitly revoked.
        self.deny = RolePermission(kwargs.get("deny", 0))

    def __repr__(self) -> str:
        return "<PermissionOverwrite role_id={!r} allow={} deny={}>".format(
            self.role_id, int(self.allow), int(self.deny)
        )


class UserPermissionOverwrite(object):
    """
    A permission overwrite for one user in a channel.
    """

    __slots__ = ("user", "allow", "deny")

    def __init__(self, **kwargs):
        #: The :class:`.User` this overwrite applies to.
        self.user = User(**kwargs.get("user", {}))

        self.allow = RolePermission(kwargs.get("allow", 0))
        self.deny = RolePermission(kwargs.get("deny", 0))


class ChannelRoleIndex(object):
    """
    The role and user permission overwrites of a channel.
    """

    __slots__ = ("permission_overwrites", "permission_users", "permission_sync")

    def __init__(self, **kwargs):
        #: The list of role :class:`.PermissionOverwrite` for this channel.
        self.permission_overwrites = [
            PermissionOverwrite(**o) for o in kwargs.get("permission_overwrites", [])
        ]  # type: List[PermissionOverwrite]

        #: The list of :class:`.UserPermissionOverwrite` for this channel.
        self.permission_users = [
            UserPermissionOverwrite(**o) for o in kwargs.get("permission_users", [])
        ]  # type: List[UserPermissionOverwrite]

        #: If this channel's permissions are synced with its category.
        self.permission_sync = bool(kwargs.get("permission_sync", 0))


class ChannelRoleOverwrite(object):
    """
    The result of updating a channel permission overwrite.
    """

    __slots__ = ("user_id", "role_id", "allow", "deny")

    def __init__(self, **kwargs):
        #: The user the overwrite applies to, if it is a user overwrite.
        self.user_id = kwargs.get("user_id")

        #: The role the overwrite applies to, if it is a role overwrite.
        self.role_id = kwargs.get("role_id")

        self.allow = RolePermission(kwargs.get("allow", 0))
        self.deny = RolePermission(kwargs.get("deny", 0))


class Channel(IDObject):
    """
    Represents a channel in a guild.
    """

    __slots__ = ("name", "type", "guild_id", "user_id", "parent_id", "topic", "is_category",
                 "level", "slow_mode", "limit_amount", "permission_overwrites", "permission_sync")

    def __init__(self, **kwargs):
        super().__init__(kwargs.get("id"))

        #: The name of this channel.
        self.name = kwargs.get("name", None)

        #: The :class:`.ChannelType` of this channel, or the raw int for an unknown type.
        self.type = try_enum(ChannelType, kwargs.get("type", ChannelType.TEXT))

        #: The ID of the guild this channel is in.
        self.guild_id = kwargs.get("guild_id", None)

        #: The ID of the user that created this channel.
        self.user_id = kwargs.get("user_id", None)

        #: The ID of the category of this channel. Empty for top-level channels.
        self.parent_id = kwargs.get("parent_id", "") or None

        #: The topic of this channel.
        self.topic = kwargs.get("topic", None)

        #: If this channel is a category.
        self.is_category = bool(kwargs.get("is_category", False))

        #: The sort order of this channel.
        self.level = kwargs.get("level", 0)

        #: The slow mode interval of this channel, in milliseconds.
        self.slow_mode = kwargs.get("slow_mode", 0)

        #: The user limit of this channel, for voice channels.
        self.limit_amount = kwargs.get("limit_amount", 0)

        self.permission_overwrites = [
            PermissionOverwrite(**o) for o in kwargs.get("permission_overwrites", [])
        ]

        self.permission_sync = bool(kwargs.get("permission_sync", 0))

    def __repr__(self) -> str:
        return "<Channel id={!r} name={!r} type={!r}>".format(self.id, self.name, self.type)

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
Wrappers for Role objects.

.. currentmodule:: kaiheila.dataclasses.role
"""
import enum

from kaiheila.dataclasses.bases import IDObject


class RolePermission(enum.IntFlag):
    """
    The permission bits a role or overwrite can grant.
    """

    ADMINISTRATOR = 1 << 0
    MANAGE_GUILD = 1 << 1
    VIEW_AUDIT_LOG = 1 << 2
    CREATE_INVITE = 1 << 3
    MANAGE_INVITE = 1 << 4
    MANAGE_CHANNEL = 1 << 5
    KICK_USER = 1 << 6
    BAN_USER = 1 << 7
    MANAGE_EMOJI = 1 << 8
    CHANGE_NICKNAME = 1 << 9
    MANAGE_ROLE = 1 << 10
    VIEW_CHANNEL = 1 << 11
    SEND_MESSAGE = 1 << 12
    MANAGE_MESSAGE = 1 << 13
    UPLOAD_FILE = 1 << 14
    CONNECT_VOICE = 1 << 15
    MANAGE_VOICE = 1 << 16
    MENTION_ALL = 1 << 17
    ADD_REACTION = 1 << 18
    FOLLOW_REACTION = 1 << 19
    PASSIVE_CONNECT_VOICE = 1 << 20
    SPEAK_ONLY_BY_KEY = 1 << 21
    FREE_SPEAK = 1 << 22
    SPEAK = 1 << 23
    DEAFEN_USER = 1 << 24
    MUTE_USER = 1 << 25
    CHANGE_OTHER_NICKNAME = 1 << 26
    PLAY_MUSIC = 1 << 27


class Role(IDObject):
    """
    Represents a role on a guild.
    """

    __slots__ = (
        "name",
        "colour",
        "position",
        "hoisted",
        "mentionable",
        "permissions",
    )

    def __init__(self, **kwargs):
        super().__init__(kwargs.get("role_id"))

        #: The name of this role.
        self.name = kwargs.get("name", None)

        #: The colour of this role, as an RGB integer.
        self.colour = kwargs.get("color", 0)

        #: The position of this role in the role list.
        self.position = kwargs.get("position", 0)

        #: If this role is shown separately in the member list.
        self.hoisted = bool(kwargs.get("hoist", 0))

        #: If this role can be mentioned.
        self.mentionable = bool(kwargs.get("mentionable", 0))

        #: The :class:`.RolePermission` granted by this role.
        self.permissions = RolePermission(kwargs.get("permissions", 0))

    def __repr__(self) -> str:
        return "<Role id={!r} name={!r}>".format(self.id, self.name)

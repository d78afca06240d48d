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
Wrappers for Guild objects.

.. currentmodule:: kaiheila.dataclasses.guild
"""
import enum
from typing import List

from kaiheila.dataclasses.bases import IDObject
from kaiheila.dataclasses.channel import Channel
from kaiheila.dataclasses.role import Role


class MuteType(enum.IntEnum):
    """
    The kinds of voice mute that can be applied to a member.
    """

    #: The member can't speak.
    MIC = 1

    #: The member can't hear.
    HEADSET = 2


class GuildMuteList(object):
    """
    The members of a guild that have been muted.
    """

    __slots__ = ("mic", "headset")

    def __init__(self, **kwargs):
        #: The IDs of users that can't use their microphone.
        self.mic = kwargs.get(str(int(MuteType.MIC)), [])  # type: List[str]

        #: The IDs of users that can't use their headset.
        self.headset = kwargs.get(str(int(MuteType.HEADSET)), [])  # type: List[str]


class Guild(IDObject):
    """
    Represents a guild (a server).
    """

    __slots__ = ("name", "topic", "owner_id", "icon", "notify_type", "region", "enable_open",
                 "open_id", "default_channel_id", "welcome_channel_id", "roles", "channels")

    def __init__(self, **kwargs):
        super().__init__(kwargs.get("id"))

        #: The name of this guild.
        self.name = kwargs.get("name", None)

        #: The topic of this guild.
        self.topic = kwargs.get("topic", None)

        #: The ID of the owner of this guild.
        self.owner_id = kwargs.get("master_id", None)

        #: The icon URL of this guild.
        self.icon = kwargs.get("icon", None)

        #: The default notification setting of this guild.
        self.notify_type = kwargs.get("notify_type", 0)

        #: The voice region of this guild.
        self.region = kwargs.get("region", None)

        #: If this guild is listed publicly.
        self.enable_open = bool(kwargs.get("enable_open", False))

        #: The public ID of this guild, if it is listed.
        self.open_id = kwargs.get("open_id", None)

        self.default_channel_id = kwargs.get("default_channel_id", None)
        self.welcome_channel_id = kwargs.get("welcome_channel_id", None)

        #: The list of :class:`.Role` in this guild. Only present on detailed fetches.
        self.roles = [Role(**r) for r in kwargs.get("roles", None) or []]

        #: The list of :class:`.Channel` in this guild. Only present on detailed fetches.
        self.channels = [Channel(**c) for c in kwargs.get("channels", None) or []]

    def __repr__(self) -> str:
        return "<Guild id={!r} name={!r}>".format(self.id, self.name)

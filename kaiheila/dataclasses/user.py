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
Wrappers for User objects.

.. currentmodule:: kaiheila.dataclasses.user
"""
from kaiheila.dataclasses.bases import IDObject
from kaiheila.util import to_datetime


class User(IDObject):
    """
    Represents a user, as seen from a guild or a direct chat.

    :ivar id: The ID of this user.
    """

    __slots__ = ("username", "identify_num", "nickname", "avatar", "online", "status", "bot",
                 "mobile_verified", "roles")

    def __init__(self, **kwargs):
        super().__init__(kwargs.get("id"))

        #: The username of this user.
        self.username = kwargs.get("username", None)

        #: The four digit number that tells apart users with the same name.
        self.identify_num = kwargs.get("identify_num", None)

        #: The nickname of this user in the guild it was fetched from, if any.
        self.nickname = kwargs.get("nickname", None)

        #: The avatar URL of this user.
        self.avatar = kwargs.get("avatar", None)

        #: If this user is currently online.
        self.online = kwargs.get("online", False)

        #: The account status of this user.
        self.status = kwargs.get("status", 0)

        #: If this user is a bot.
        self.bot = kwargs.get("bot", False)

        #: If this user has a verified phone number.
        self.mobile_verified = kwargs.get("mobile_verified", False)

        #: The IDs of the roles this user has in the guild it was fetched from.
        self.roles = kwargs.get("roles", [])

    @property
    def name(self) -> str:
        """
        :return: The ``username#identify_num`` form of this user's name.
        """
        if self.identify_num is None:
            return self.username

        return "{}#{}".format(self.username, self.identify_num)

    def __repr__(self) -> str:
        return "<User id={!r} name={!r} bot={}>".format(self.id, self.name, self.bot)


class ReactedUser(User):
    """
    A user that reacted to a message, with the time of the reaction.
    """

    __slots__ = ("reaction_time", "tag_info")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        #: When this user added the reaction.
        self.reaction_time = to_datetime(kwargs.get("reaction_time"))

        #: The tag shown beside this user, as ``{"color": ..., "text": ...}``.
        self.tag_info = kwargs.get("tag_info", {})

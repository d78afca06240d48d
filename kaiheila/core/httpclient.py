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
The main KaiHeiLa HTTP interface.

.. currentmodule:: kaiheila.core.httpclient
"""
import json
from typing import Iterable, List, Tuple

from kaiheila.core.dispatch import request
from kaiheila.core.pagination import PageInfo, PageSetting, request_with_page
from kaiheila.core.query import QueryOption, compose_url, with_flag, with_int, with_value
from kaiheila.core.session import Session
from kaiheila.dataclasses.channel import Channel, ChannelRoleIndex, ChannelRoleOverwrite, \
    ChannelType
from kaiheila.dataclasses.guild import Guild, GuildMuteList, MuteType
from kaiheila.dataclasses.message import Message, MessageListFlag, MessageResponse, \
    MessageType, UserChat
from kaiheila.dataclasses.role import Role, RolePermission
from kaiheila.dataclasses.user import ReactedUser, User
from kaiheila.exc import MalformedEnvelope
from kaiheila.util import without_none


class Endpoints:
    """
    The API paths, relative to :attr:`.Session.base_url`.
    """

    GATEWAY = "/gateway/index"

    USER_ME = "/user/me"

    MESSAGE_LIST = "/message/list"
    MESSAGE_CREATE = "/message/create"
    MESSAGE_UPDATE = "/message/update"
    MESSAGE_DELETE = "/message/delete"
    MESSAGE_REACTION_LIST = "/message/reaction-list"
    MESSAGE_ADD_REACTION = "/message/add-reaction"
    MESSAGE_DELETE_REACTION = "/message/delete-reaction"

    CHANNEL_LIST = "/channel/list"
    CHANNEL_VIEW = "/channel/view"
    CHANNEL_CREATE = "/channel/create"
    CHANNEL_DELETE = "/channel/delete"
    CHANNEL_MOVE_USER = "/channel/move-user"

    CHANNEL_ROLE_INDEX = "/channel-role/index"
    CHANNEL_ROLE_CREATE = "/channel-role/create"
    CHANNEL_ROLE_UPDATE = "/channel-role/update"
    CHANNEL_ROLE_DELETE = "/channel-role/delete"

    USER_CHAT_CREATE = "/user-chat/create"
    USER_CHAT_DELETE = "/user-chat/delete"

    DIRECT_MESSAGE_CREATE = "/direct-message/create"
    DIRECT_MESSAGE_UPDATE = "/direct-message/update"
    DIRECT_MESSAGE_DELETE = "/direct-message/delete"

    GUILD_LIST = "/guild/list"
    GUILD_VIEW = "/guild/view"
    GUILD_USER_LIST = "/guild/user-list"
    GUILD_NICKNAME = "/guild/nickname"
    GUILD_LEAVE = "/guild/leave"
    GUILD_KICKOUT = "/guild/kickout"

    GUILD_MUTE_LIST = "/guild-mute/list"
    GUILD_MUTE_CREATE = "/guild-mute/create"
    GUILD_MUTE_DELETE = "/guild-mute/delete"

    GUILD_ROLE_LIST = "/guild-role/list"


# message list options
def message_list_msg_id(msg_id: str) -> QueryOption:
    """
    Fetches messages relative to the message with this ID.
    """
    return with_value("msg_id", msg_id)


def message_list_pin(pin: bool) -> QueryOption:
    """
    Only fetches pinned (or only unpinned) messages.
    """
    return with_flag("pin", pin)


def message_list_flag(flag: MessageListFlag) -> QueryOption:
    """
    Sets where messages are fetched from, relative to :func:`.message_list_msg_id`.
    """
    return with_value("flag", MessageListFlag(flag).value)


# guild user list options
def guild_users_channel_id(channel_id: str) -> QueryOption:
    return with_value("channel_id", channel_id)


def guild_users_search(search: str) -> QueryOption:
    return with_value("search", search)


def guild_users_role_id(role_id: int) -> QueryOption:
    return with_int("role_id", role_id)


def guild_users_mobile_verified(verified: bool) -> QueryOption:
    return with_flag("mobile_verified", verified)


def guild_users_active_time(active_time: bool) -> QueryOption:
    """
    Sorts by last active time; ``True`` is ascending.
    """
    return with_flag("active_time", active_time)


def guild_users_joined_at(joined_at: bool) -> QueryOption:
    """
    Sorts by join time; ``True`` is ascending.
    """
    return with_flag("joined_at", joined_at)


class HTTPClient(object):
    """
    The HTTP client object used to make requests to the platform.

    If a particular method is not listed here, use :func:`kaiheila.core.dispatch.request` or
    :func:`kaiheila.core.pagination.request_with_page` with :attr:`HTTPClient.session` to
    make a manual request.

    :param session: The :class:`.Session` used for every request.
    """

    def __init__(self, session: Session):
        #: The session used for all requests.
        self.session = session

    async def get(self, url: str) -> bytes:
        """
        Makes a GET request.

        :param url: The URL to request.
        """
        return await request(self.session, "GET", url)

    async def post(self, url: str, payload=None) -> bytes:
        """
        Makes a POST request.

        :param url: The URL to request.
        :param payload: The JSON payload to send.
        """
        return await request(self.session, "POST", url, payload)

    async def get_page(self, url: str, page: PageSetting) -> Tuple[list, PageInfo]:
        """
        Gets one page of a list endpoint, decoding the items into Python objects.
        """
        items, meta = await request_with_page(self.session, "GET", url, page)
        return json.loads(items), meta

    # Non-generic methods
    async def get_gateway(self, compress: bool = False) -> str:
        """
        :param compress: If the gateway should send compressed frames.
        :return: The websocket gateway URL to connect to.
        """
        url = compose_url(Endpoints.GATEWAY, with_flag("compress", compress))
        raw = await self.get(url)
        data = json.loads(raw)
        if not isinstance(data, dict) or not isinstance(data.get("url"), str):
            raise MalformedEnvelope(raw, "gateway response has no 'url'")

        return data["url"]

    async def get_me(self) -> User:
        """
        Gets the current user.
        """
        data = json.loads(await self.get(Endpoints.USER_ME))
        return User(**data)

    async def list_messages(self, target_id: str, *options: QueryOption) -> List[Message]:
        """
        Gets messages from a channel.

        :param target_id: The ID of the channel.
        :param options: Any of the ``message_list_*`` options.
        """
        url = compose_url(Endpoints.MESSAGE_LIST, with_value("target_id", target_id), *options)
        data = json.loads(await self.get(url))
        # the list is either bare, or wrapped in an items object
        if isinstance(data, dict):
            data = data.get("items", [])

        return [Message(**m) for m in data]

    async def create_message(self, target_id: str, content: str, *,
                             type_: MessageType = None,
                             quote: str = None,
                             nonce: str = None,
                             temp_target_id: str = None) -> MessageResponse:
        """
        Sends a message to a channel.

        :param target_id: The ID of the channel to send to.
        :param content: The content of the message.
        :param type_: The :class:`.MessageType` of the message. Defaults to the platform's.
        :param quote: The ID of a message to quote.
        :param nonce: A nonce to echo back on the created message.
        :param temp_target_id: Only show this message to this user.
        """
        payload = without_none(
            type=int(type_) if type_ is not None else None,
            target_id=target_id,
            content=content,
            quote=quote,
            nonce=nonce,
            temp_target_id=temp_target_id,
        )

        data = json.loads(await self.post(Endpoints.MESSAGE_CREATE, payload))
        return MessageResponse(**data)

    async def update_message(self, msg_id: str, content: str, quote: str = None,
                             temp_target_id: str = None) -> None:
        """
        Edits a message.

        :param msg_id: The ID of the message to edit.
        :param content: The new content.
        :param quote: The ID of a message to quote.
        :param temp_target_id: The user a temporary message was shown to.
        """
        payload = without_none(msg_id=msg_id, content=content, quote=quote,
                               temp_target_id=temp_target_id)
        await self.post(Endpoints.MESSAGE_UPDATE, payload)

    async def delete_message(self, msg_id: str) -> None:
        """
        Deletes a message.

        :param msg_id: The ID of the message to delete.
        """
        await self.post(Endpoints.MESSAGE_DELETE, {"msg_id": msg_id})

    async def list_reactions(self, msg_id: str, emoji: str) -> List[ReactedUser]:
        """
        Gets the users that reacted to a message with an emoji.

        :param msg_id: The ID of the message.
        :param emoji: The emoji to get the users of.
        """
        url = compose_url(Endpoints.MESSAGE_REACTION_LIST,
                          with_value("msg_id", msg_id), with_value("emoji", emoji))
        data = json.loads(await self.get(url))
        return [ReactedUser(**u) for u in data]

    async def add_reaction(self, msg_id: str, emoji: str) -> None:
        """
        Reacts to a message.

        :param msg_id: The ID of the message to react to.
        :param emoji: The emoji to react with.
        """
        await self.post(Endpoints.MESSAGE_ADD_REACTION, {"msg_id": msg_id, "emoji": emoji})

    async def delete_reaction(self, msg_id: str, emoji: str, user_id: str = None) -> None:
        """
        Removes a reaction from a message.

        :param msg_id: The ID of the message.
        :param emoji: The emoji of the reaction.
        :param user_id: The user whose reaction to remove. Defaults to the current user.
        """
        payload = without_none(msg_id=msg_id, emoji=emoji, user_id=user_id)
        await self.post(Endpoints.MESSAGE_DELETE_REACTION, payload)

    async def list_channels(self, guild_id: str,
                            page: PageSetting = None) -> Tuple[List[Channel], PageInfo]:
        """
        Gets a page of channels in a guild.

        :param guild_id: The ID of the guild.
        :param page: The :class:`.PageSetting` to fetch.
        """
        url = compose_url(Endpoints.CHANNEL_LIST, with_value("guild_id", guild_id))
        items, meta = await self.get_page(url, page or PageSetting())
        return [Channel(**c) for c in items], meta

    async def get_channel(self, channel_id: str) -> Channel:
        """
        Gets a channel.

        :param channel_id: The channel ID to get.
        """
        url = compose_url(Endpoints.CHANNEL_VIEW, with_value("target_id", channel_id))
        data = json.loads(await self.get(url))
        return Channel(**data)

    async def create_channel(self, guild_id: str, name: str, *,
                             type_: ChannelType = None,
                             parent_id: str = None,
                             limit_amount: int = None,
                             voice_quality: int = None) -> Channel:
        """
        Creates a channel in a guild.

        :param guild_id: The ID of the guild to create the channel in.
        :param name: The name of the channel.
        :param type_: The :class:`.ChannelType` of the channel.
        :param parent_id: The ID of the category to put the channel in.
        :param limit_amount: The user limit, for voice channels.
        :param voice_quality: The voice quality, for voice channels.
        """
        payload = without_none(
            guild_id=guild_id,
            parent_id=parent_id,
            name=name,
            type=int(type_) if type_ is not None else None,
            limit_amount=limit_amount,
            voice_quality=voice_quality,
        )

        data = json.loads(await self.post(Endpoints.CHANNEL_CREATE, payload))
        return Channel(**data)

    async def delete_channel(self, channel_id: str) -> None:
        """
        Deletes a channel.

        :param channel_id: The ID of the channel to delete.
        """
        await self.post(Endpoints.CHANNEL_DELETE, {"channel_id": channel_id})

    async def move_users(self, channel_id: str, user_ids: Iterable[str]) -> None:
        """
        Moves users into a voice channel.

        :param channel_id: The ID of the voice channel to move users into.
        :param user_ids: The IDs of the users to move.
        """
        await self.post(Endpoints.CHANNEL_MOVE_USER,
                        {"target_id": channel_id, "user_ids": list(user_ids)})

    async def get_channel_roles(self, channel_id: str) -> ChannelRoleIndex:
        """
        Gets the permission overwrites of a channel.

        :param channel_id: The ID of the channel.
        """
        url = compose_url(Endpoints.CHANNEL_ROLE_INDEX, with_value("channel_id", channel_id))
        data = json.loads(await self.get(url))
        return ChannelRoleIndex(**data)

    async def create_channel_role(self, channel_id: str, type_: str = None,
                                  value: str = None) -> None:
        """
        Creates a permission overwrite in a channel.

        :param channel_id: The ID of the channel.
        :param type_: ``"role_id"`` or ``"user_id"``.
        :param value: The ID of the role or user.
        """
        payload = without_none(channel_id=channel_id, type=type_, value=value)
        await self.post(Endpoints.CHANNEL_ROLE_CREATE, payload)

    async def update_channel_role(self, channel_id: str, type_: str = None, value: str = None,
                                  *,
                                  allow: RolePermission = None,
                                  deny: RolePermission = None) -> ChannelRoleOverwrite:
        """
        Edits a permission overwrite in a channel.

        :param channel_id: The ID of the channel.
        :param type_: ``"role_id"`` or ``"user_id"``.
        :param value: The ID of the role or user.
        :param allow: The permissions to grant.
        :param deny: The permissions to revoke.
        """
        payload = without_none(
            channel_id=channel_id,
            type=type_,
            value=value,
            allow=int(allow) if allow else None,
            deny=int(deny) if deny else None,
        )

        data = json.loads(await self.post(Endpoints.CHANNEL_ROLE_UPDATE, payload))
        return ChannelRoleOverwrite(**data)

    async def delete_channel_role(self, channel_id: str, type_: str = None,
                                  value: str = None) -> None:
        """
        Removes a permission overwrite from a channel.

        :param channel_id: The ID of the channel.
        :param type_: ``"role_id"`` or ``"user_id"``.
        :param value: The ID of the role or user.
        """
        payload = without_none(channel_id=channel_id, type=type_, value=value)
        await self.post(Endpoints.CHANNEL_ROLE_DELETE, payload)

    async def create_user_chat(self, user_id: str) -> UserChat:
        """
        Opens a direct chat with a user.

        :param user_id: The ID of the user.
        """
        data = json.loads(await self.post(Endpoints.USER_CHAT_CREATE, {"target_id": user_id}))
        return UserChat(**data)

    async def delete_user_chat(self, chat_code: str) -> None:
        """
        Closes a direct chat.

        :param chat_code: The code of the chat to close.
        """
        await self.post(Endpoints.USER_CHAT_DELETE, {"chat_code": chat_code})

    async def create_direct_message(self, content: str, *,
                                    target_id: str = None,
                                    chat_code: str = None,
                                    type_: MessageType = None,
                                    quote: str = None,
                                    nonce: str = None) -> MessageResponse:
        """
        Sends a direct message.

        One of ``target_id`` or ``chat_code`` identifies the recipient.

        :param content: The content of the message.
        :param target_id: The ID of the user to send to.
        :param chat_code: The code of the chat to send to.
        """
        payload = without_none(
            type=int(type_) if type_ is not None else None,
            target_id=target_id,
            chat_code=chat_code,
            content=content,
            quote=quote,
            nonce=nonce,
        )

        data = json.loads(await self.post(Endpoints.DIRECT_MESSAGE_CREATE, payload))
        return MessageResponse(**data)

    async def update_direct_message(self, msg_id: str, content: str,
                                    quote: str = None) -> None:
        """
        Edits a direct message.
        """
        payload = without_none(msg_id=msg_id, content=content, quote=quote)
        await self.post(Endpoints.DIRECT_MESSAGE_UPDATE, payload)

    async def delete_direct_message(self, msg_id: str) -> None:
        """
        Deletes a direct message.
        """
        await self.post(Endpoints.DIRECT_MESSAGE_DELETE, {"msg_id": msg_id})

    async def list_guilds(self, page: PageSetting = None) -> Tuple[List[Guild], PageInfo]:
        """
        Gets a page of the guilds the current user is in.

        :param page: The :class:`.PageSetting` to fetch.
        """
        items, meta = await self.get_page(Endpoints.GUILD_LIST, page or PageSetting())
        return [Guild(**g) for g in items], meta

    async def get_guild(self, guild_id: str) -> Guild:
        """
        Gets a guild by guild ID, including its roles and channels.

        :param guild_id: The ID of the guild to get.
        """
        url = compose_url(Endpoints.GUILD_VIEW, with_value("guild_id", guild_id))
        data = json.loads(await self.get(url))
        return Guild(**data)

    async def list_guild_users(self, guild_id: str, page: PageSetting = None,
                               *options: QueryOption) -> Tuple[List[User], PageInfo]:
        """
        Gets a page of the members of a guild.

        :param guild_id: The ID of the guild.
        :param page: The :class:`.PageSetting` to fetch.
        :param options: Any of the ``guild_users_*`` options.
        """
        url = compose_url(Endpoints.GUILD_USER_LIST, with_value("guild_id", guild_id), *options)
        items, meta = await self.get_page(url, page or PageSetting())
        return [User(**u) for u in items], meta

    async def change_nickname(self, guild_id: str, nickname: str = None, *,
                              user_id: str = None) -> None:
        """
        Changes the nickname of a member.

        :param guild_id: The ID of the guild.
        :param nickname: The new nickname. ``None`` resets it.
        :param user_id: The member to change. Defaults to the current user.
        """
        payload = without_none(guild_id=guild_id, nickname=nickname, user_id=user_id)
        await self.post(Endpoints.GUILD_NICKNAME, payload)

    async def leave_guild(self, guild_id: str) -> None:
        """
        Leaves a guild.

        :param guild_id: The ID of the guild to leave.
        """
        await self.post(Endpoints.GUILD_LEAVE, {"guild_id": guild_id})

    async def kick_member(self, guild_id: str, user_id: str) -> None:
        """
        Kicks a member from a guild.

        :param guild_id: The guild ID to kick in.
        :param user_id: The user ID to kick.
        """
        await self.post(Endpoints.GUILD_KICKOUT, {"guild_id": guild_id, "target_id": user_id})

    async def list_guild_mutes(self, guild_id: str) -> GuildMuteList:
        """
        Gets the members of a guild that are muted.

        :param guild_id: The ID of the guild.
        """
        url = compose_url(Endpoints.GUILD_MUTE_LIST, with_value("guild_id", guild_id))
        data = json.loads(await self.get(url))
        return GuildMuteList(**data)

    async def create_guild_mute(self, guild_id: str, user_id: str, type_: MuteType) -> None:
        """
        Mutes a member of a guild.

        :param guild_id: The ID of the guild.
        :param user_id: The ID of the member.
        :param type_: The :class:`.MuteType` to apply.
        """
        payload = {"guild_id": guild_id, "user_id": user_id, "type": int(type_)}
        await self.post(Endpoints.GUILD_MUTE_CREATE, payload)

    async def delete_guild_mute(self, guild_id: str, user_id: str, type_: MuteType) -> None:
        """
        Unmutes a member of a guild.

        :param guild_id: The ID of the guild.
        :param user_id: The ID of the member.
        :param type_: The :class:`.MuteType` to lift.
        """
        payload = {"guild_id": guild_id, "user_id": user_id, "type": int(type_)}
        await self.post(Endpoints.GUILD_MUTE_DELETE, payload)

    async def list_guild_roles(self, guild_id: str,
                               page: PageSetting = None) -> Tuple[List[Role], PageInfo]:
        """
        Gets a page of the roles in a guild.

        :param guild_id: The ID of the guild.
        :param page: The :class:`.PageSetting` to fetch.
        """
        url = compose_url(Endpoints.GUILD_ROLE_LIST, with_value("guild_id", guild_id))
        items, meta = await self.get_page(url, page or PageSetting())
        return [Role(**r) for r in items], meta

"""Tests for the endpoint methods of the HTTP client."""

import json
from urllib.parse import parse_qs, urlsplit

import pytest

from kaiheila.core.httpclient import HTTPClient, guild_users_active_time, \
    guild_users_mobile_verified, guild_users_role_id, guild_users_search, message_list_flag, \
    message_list_pin
from kaiheila.core.pagination import PageSetting
from kaiheila.dataclasses.channel import ChannelType
from kaiheila.dataclasses.guild import MuteType
from kaiheila.dataclasses.message import MessageListFlag, MessageType
from kaiheila.dataclasses.role import RolePermission
from kaiheila.exc import APIError, MalformedEnvelope

pytestmark = pytest.mark.anyio


@pytest.fixture
def http(session):
    return HTTPClient(session)


def _sent(transport):
    method, url, kwargs = transport.last
    split = urlsplit(url)
    body = json.loads(kwargs["data"]) if "data" in kwargs else None
    return method, split.path, parse_qs(split.query), body


class TestGateway:
    async def test_compress_off(self, http, transport):
        transport.queue_envelope({"url": "wss://gw.test/?compress=0"})
        assert await http.get_gateway() == "wss://gw.test/?compress=0"

        method, path, query, body = _sent(transport)
        assert (method, path, query, body) == ("GET", "/api/v3/gateway/index",
                                               {"compress": ["0"]}, None)

    async def test_compress_on(self, http, transport):
        transport.queue_envelope({"url": "wss://gw.test/"})
        await http.get_gateway(compress=True)

        assert _sent(transport)[2] == {"compress": ["1"]}

    async def test_missing_url(self, http, transport):
        transport.queue_envelope({"other": 1})

        with pytest.raises(MalformedEnvelope):
            await http.get_gateway()


class TestMessages:
    async def test_create(self, http, transport):
        transport.queue_envelope({"msg_id": "abc", "msg_timestamp": 1609459200000, "nonce": "n"})
        resp = await http.create_message("chan", "hello", type_=MessageType.KMARKDOWN,
                                         nonce="n")

        assert resp.id == "abc"
        assert resp.nonce == "n"
        assert resp.timestamp.year == 2021
        assert _sent(transport) == ("POST", "/api/v3/message/create", {},
                                    {"type": 9, "target_id": "chan", "content": "hello",
                                     "nonce": "n"})

    async def test_list_with_options(self, http, transport):
        transport.queue_envelope([{"id": "m1", "type": 1, "content": "hi",
                                   "author": {"id": "u1", "username": "laura"},
                                   "create_at": 1609459200000}])
        messages = await http.list_messages("chan", message_list_pin(False),
                                            message_list_flag(MessageListFlag.BEFORE))

        assert messages[0].id == "m1"
        assert messages[0].author.username == "laura"
        assert _sent(transport)[2] == {"target_id": ["chan"], "pin": ["0"], "flag": ["before"]}

    async def test_list_wrapped_in_items(self, http, transport):
        transport.queue_envelope({"items": [{"id": "m1"}]})
        messages = await http.list_messages("chan")

        assert [m.id for m in messages] == ["m1"]

    async def test_list_keeps_unknown_type(self, http, transport):
        transport.queue_envelope([{"id": "m1", "type": 1}, {"id": "m2", "type": 12}])
        messages = await http.list_messages("chan")

        assert messages[0].type is MessageType.TEXT
        assert messages[1].type == 12

    async def test_delete_reaction_omits_user(self, http, transport):
        transport.queue_envelope([])
        await http.delete_reaction("m1", "👍")

        assert _sent(transport)[3] == {"msg_id": "m1", "emoji": "👍"}

    async def test_list_reactions(self, http, transport):
        transport.queue_envelope([{"id": "u1", "username": "a", "reaction_time": 1000}])
        users = await http.list_reactions("m1", "👍")

        assert users[0].reaction_time.timestamp() == 1
        assert _sent(transport)[2] == {"msg_id": ["m1"], "emoji": ["👍"]}

    async def test_api_error(self, http, transport):
        transport.queue_envelope(code=40000, message="content too long")

        with pytest.raises(APIError):
            await http.update_message("m1", "x" * 10000)


class TestChannels:
    async def test_list(self, http, transport):
        transport.queue_envelope({"items": [{"id": "c1", "name": "general", "type": 1}],
                                  "meta": {"page": 1, "page_total": 1}})
        channels, meta = await http.list_channels("g1", PageSetting(page=1))

        assert channels[0].name == "general"
        assert channels[0].type is ChannelType.TEXT
        assert meta.page_total == 1
        assert _sent(transport)[2] == {"guild_id": ["g1"], "page": ["1"]}

    async def test_list_keeps_unknown_type(self, http, transport):
        transport.queue_envelope({"items": [{"id": "c1", "name": "stage", "type": 7}]})
        channels, _ = await http.list_channels("g1")

        assert channels[0].type == 7
        assert repr(channels[0]) == "<Channel id='c1' name='stage' type=7>"

    async def test_delete_uses_channel_path(self, http, transport):
        transport.queue_envelope([])
        await http.delete_channel("c1")

        assert _sent(transport)[1:] == ("/api/v3/channel/delete", {}, {"channel_id": "c1"})

    async def test_create(self, http, transport):
        transport.queue_envelope({"id": "c2", "name": "voice", "type": 2, "limit_amount": 5})
        channel = await http.create_channel("g1", "voice", type_=ChannelType.VOICE,
                                            limit_amount=5)

        assert channel.type is ChannelType.VOICE
        assert _sent(transport)[3] == {"guild_id": "g1", "name": "voice", "type": 2,
                                       "limit_amount": 5}

    async def test_roles(self, http, transport):
        transport.queue_envelope({
            "permission_overwrites": [{"role_id": 0, "allow": 2048, "deny": 4096}],
            "permission_users": [{"user": {"id": "u1"}, "allow": 0, "deny": 0}],
            "permission_sync": 1,
        })
        index = await http.get_channel_roles("c1")

        assert index.permission_overwrites[0].allow == RolePermission.VIEW_CHANNEL
        assert index.permission_overwrites[0].deny == RolePermission.SEND_MESSAGE
        assert index.permission_users[0].user.id == "u1"
        assert index.permission_sync is True

    async def test_update_role(self, http, transport):
        transport.queue_envelope({"role_id": 3, "allow": 2048, "deny": 0})
        result = await http.update_channel_role("c1", "role_id", "3",
                                                allow=RolePermission.VIEW_CHANNEL)

        assert result.role_id == 3
        assert _sent(transport)[3] == {"channel_id": "c1", "type": "role_id", "value": "3",
                                       "allow": 2048}


class TestGuilds:
    async def test_user_list_options_and_page(self, http, transport):
        transport.queue_envelope({"items": [{"id": "u1", "username": "a", "identify_num": "0001"}],
                                  "meta": {"page": 2, "page_total": 2, "total": 51}})
        users, meta = await http.list_guild_users(
            "g1", PageSetting(page=2, page_size=50),
            guild_users_search("a"), guild_users_role_id(7),
            guild_users_mobile_verified(True), guild_users_active_time(False),
        )

        assert users[0].name == "a#0001"
        assert meta.total == 51
        assert _sent(transport)[2] == {
            "guild_id": ["g1"], "search": ["a"], "role_id": ["7"], "mobile_verified": ["1"],
            "active_time": ["0"], "page": ["2"], "page_size": ["50"],
        }

    async def test_list_without_page(self, http, transport):
        transport.queue_envelope({"items": [{"id": "g1", "name": "home", "master_id": "u1"}],
                                  "meta": {}})
        guilds, _ = await http.list_guilds()

        assert guilds[0].owner_id == "u1"
        assert _sent(transport)[2] == {}

    async def test_view(self, http, transport):
        transport.queue_envelope({"id": "g1", "name": "home",
                                  "roles": [{"role_id": 0, "name": "@everyone",
                                             "permissions": 6144}],
                                  "channels": [{"id": "c1", "type": 2}]})
        guild = await http.get_guild("g1")

        assert guild.roles[0].permissions == RolePermission.VIEW_CHANNEL | \
            RolePermission.SEND_MESSAGE
        assert guild.channels[0].type is ChannelType.VOICE

    async def test_mutes(self, http, transport):
        transport.queue_envelope({"1": ["u1"], "2": ["u2", "u3"]})
        mutes = await http.list_guild_mutes("g1")

        assert mutes.mic == ["u1"]
        assert mutes.headset == ["u2", "u3"]

    async def test_mute_create(self, http, transport):
        transport.queue_envelope([])
        await http.create_guild_mute("g1", "u1", MuteType.HEADSET)

        assert _sent(transport)[1:] == ("/api/v3/guild-mute/create", {},
                                        {"guild_id": "g1", "user_id": "u1", "type": 2})

    async def test_kick(self, http, transport):
        transport.queue_envelope([])
        await http.kick_member("g1", "u1")

        assert _sent(transport)[3] == {"guild_id": "g1", "target_id": "u1"}


class TestUserChat:
    async def test_create(self, http, transport):
        transport.queue_envelope({"code": "abc", "unread_count": 2,
                                  "target_info": {"id": "u1", "username": "a"}})
        chat = await http.create_user_chat("u1")

        assert chat.code == "abc"
        assert chat.target.id == "u1"
        assert _sent(transport)[3] == {"target_id": "u1"}

    async def test_direct_message(self, http, transport):
        transport.queue_envelope({"msg_id": "m1", "msg_timestamp": 0})
        resp = await http.create_direct_message("hi", chat_code="abc")

        assert resp.id == "m1"
        assert _sent(transport)[3] == {"chat_code": "abc", "content": "hi"}

    async def test_me(self, http, transport):
        transport.queue_envelope({"id": "1", "username": "bot", "identify_num": "1234",
                                  "bot": True})
        me = await http.get_me()

        assert me.bot is True
        assert me.name == "bot#1234"

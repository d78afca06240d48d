"""Tests for query option composition."""

from urllib.parse import parse_qsl, urlsplit

from multidict import MultiDict

from kaiheila.core.query import apply_options, compose_url, with_flag, with_int, with_value


def _query(url):
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


class TestOptions:
    def test_flag_true(self):
        params = apply_options(MultiDict(), [with_flag("pin", True)])
        assert params["pin"] == "1"

    def test_flag_false(self):
        params = apply_options(MultiDict(), [with_flag("pin", False)])
        assert params["pin"] == "0"

    def test_flag_never_true_false(self):
        for flag in (True, False, 1, 0, "", "yes"):
            params = apply_options(MultiDict(), [with_flag("x", flag)])
            assert params["x"] in ("1", "0")

    def test_int(self):
        params = apply_options(MultiDict(), [with_int("role_id", 42)])
        assert params["role_id"] == "42"

    def test_value(self):
        params = apply_options(MultiDict(), [with_value("search", "laura")])
        assert params["search"] == "laura"

    def test_last_writer_wins(self):
        params = apply_options(MultiDict(), [with_value("pin", "true"), with_flag("pin", False)])
        assert params.getall("pin") == ["0"]

    def test_last_writer_wins_reversed(self):
        params = apply_options(MultiDict(), [with_flag("pin", False), with_value("pin", "x")])
        assert params.getall("pin") == ["x"]

    def test_value_encodes_bools_as_flags(self):
        params = apply_options(MultiDict(), [with_value("pin", True), with_value("top", False)])
        assert params["pin"] == "1"
        assert params["top"] == "0"

    def test_last_writer_wins_with_bool_value(self):
        params = apply_options(MultiDict(), [with_flag("pin", False), with_value("pin", True)])
        assert params.getall("pin") == ["1"]

    def test_no_options(self):
        params = MultiDict(a="1")
        assert apply_options(params, []) is params
        assert list(params.items()) == [("a", "1")]


class TestComposeUrl:
    def test_no_options_keeps_url(self):
        assert compose_url("/guild/list") == "/guild/list"

    def test_appends_to_existing_query(self):
        url = compose_url("/guild/user-list?guild_id=1", with_value("search", "a b"))
        assert urlsplit(url).path == "/guild/user-list"
        assert _query(url) == [("guild_id", "1"), ("search", "a b")]

    def test_overwrites_existing_key(self):
        url = compose_url("/message/list?target_id=1", with_value("target_id", "2"))
        assert _query(url) == [("target_id", "2")]

    def test_absolute_url(self):
        url = compose_url("https://example.test/api/v3/gateway/index", with_flag("compress", True))
        assert url == "https://example.test/api/v3/gateway/index?compress=1"

    def test_option_order_is_kept(self):
        url = compose_url("/x", with_value("b", "1"), with_value("a", "2"))
        assert _query(url) == [("b", "1"), ("a", "2")]

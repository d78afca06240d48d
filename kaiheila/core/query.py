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
Optional query parameters, expressed as composable option functions.

An option is a callable that takes the mutable parameter set and sets one key on it. Endpoints
accept any number of options and apply them in the order they were given, so a later option
for the same key replaces an earlier one.

.. code-block:: python3

    url = compose_url("/guild/user-list?guild_id=1",
                      with_value("search", "laura"),
                      with_flag("mobile_verified", True))

.. currentmodule:: kaiheila.core.query
"""
from typing import Any, Callable, Iterable
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from multidict import MultiDict

#: The type of a single query option.
QueryOption = Callable[[MultiDict], None]


def with_value(key: str, value: Any) -> QueryOption:
    """
    :return: An option that sets ``key`` to the string form of ``value``. Booleans are sent
        as ``"1"`` or ``"0"``, the same as :func:`.with_flag`.
    """
    if isinstance(value, bool):
        return with_flag(key, value)

    def option(params: MultiDict) -> None:
        params[key] = str(value)

    return option


def with_int(key: str, value: int) -> QueryOption:
    """
    :return: An option that sets ``key`` to the decimal form of ``value``.
    """
    def option(params: MultiDict) -> None:
        params[key] = str(int(value))

    return option


def with_flag(key: str, flag: bool) -> QueryOption:
    """
    :return: An option that sets ``key`` to ``"1"`` or ``"0"``.
    """
    def option(params: MultiDict) -> None:
        params[key] = "1" if flag else "0"

    return option


def apply_options(params: MultiDict, options: Iterable[QueryOption]) -> MultiDict:
    """
    Applies options to a parameter set in order.

    :param params: The parameter set to mutate.
    :param options: The options to apply.
    :return: The same parameter set, for chaining.
    """
    for option in options:
        option(params)

    return params


def compose_url(url: str, *options: QueryOption) -> str:
    """
    Applies options on top of any query string already present on ``url``.

    :param url: The URL or path to extend.
    :return: The URL with the combined query string encoded once.
    """
    scheme, netloc, path, query, fragment = urlsplit(url)
    params = MultiDict(parse_qsl(query, keep_blank_values=True))
    apply_options(params, options)

    return urlunsplit((scheme, netloc, path, urlencode(list(params.items())), fragment))

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
Support for endpoints that return paged collections.

A paged response carries ``{"items": [...], "meta": {...}}`` as its ``data``.

.. currentmodule:: kaiheila.core.pagination
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from kaiheila.core.dispatch import request
from kaiheila.core.envelope import split_object
from kaiheila.core.query import compose_url, with_int, with_value
from kaiheila.core.session import Session
from kaiheila.exc import MalformedEnvelope


@dataclass(frozen=True)
class PageSetting:
    """
    The page a caller wants back from a list endpoint.

    Any field left as ``None`` is not sent, and the platform's default is used instead.
    """

    page: Optional[int] = None
    page_size: Optional[int] = None
    sort: Optional[str] = None

    def options(self):
        """
        :return: The query options for the fields that are set.
        """
        options = []
        if self.page is not None:
            options.append(with_int("page", self.page))

        if self.page_size is not None:
            options.append(with_int("page_size", self.page_size))

        if self.sort is not None:
            options.append(with_value("sort", self.sort))

        return options


@dataclass(frozen=True)
class PageInfo:
    """
    The pagination state reported by the server.

    The known fields are exposed directly; the full mapping is kept in :attr:`raw`.
    """

    page: Optional[int] = None
    page_total: Optional[int] = None
    page_size: Optional[int] = None
    total: Optional[int] = None
    raw: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_dict(cls, meta: Dict[str, Any]) -> 'PageInfo':
        return cls(
            page=meta.get("page"),
            page_total=meta.get("page_total"),
            page_size=meta.get("page_size"),
            total=meta.get("total"),
            raw=meta,
        )


def decode_list_envelope(data: bytes) -> Tuple[bytes, PageInfo]:
    """
    Splits the ``data`` of a paged response into its items and page metadata.

    :param data: The raw ``data`` returned by :func:`.request`.
    :return: A tuple of (raw JSON text of the items array, :class:`.PageInfo`).
    :raises MalformedEnvelope: If ``data`` is not a paged collection.
    """
    members = split_object(data)

    if "items" not in members:
        raise MalformedEnvelope(data, "missing 'items'")

    items, items_raw = members["items"]
    if not isinstance(items, list):
        raise MalformedEnvelope(data, "'items' is not an array")

    if "meta" not in members:
        raise MalformedEnvelope(data, "missing 'meta'")

    meta, _ = members["meta"]
    if not isinstance(meta, dict):
        raise MalformedEnvelope(data, "'meta' is not an object")

    return items_raw.encode("utf-8"), PageInfo.from_dict(meta)


async def request_with_page(session: Session, method: str, url: str,
                            page: PageSetting) -> Tuple[bytes, PageInfo]:
    """
    Requests one page of a list endpoint.

    :param session: The :class:`.Session` to make the request with.
    :param method: The HTTP method.
    :param url: The URL or API path, possibly with a query string already.
    :param page: The :class:`.PageSetting` to apply.
    :return: A tuple of (raw JSON text of the items, :class:`.PageInfo`).
    """
    if not isinstance(page, PageSetting):
        raise TypeError("page must be a PageSetting, not {}".format(type(page).__name__))

    url = compose_url(url, *page.options())
    data = await request(session, method, url)
    return decode_list_envelope(data)

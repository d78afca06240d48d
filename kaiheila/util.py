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
Misc utilities shared throughout the library.

.. currentmodule:: kaiheila.util
"""
import datetime
from typing import Any, Dict, Optional, Type

import pytz


def to_datetime(timestamp: Optional[int]) -> Optional[datetime.datetime]:
    """
    Converts a millisecond Unix timestamp, as sent by the platform, to a datetime object.

    :param timestamp: The timestamp to convert.
    :return: The aware UTC :class:`datetime.datetime` for this timestamp.
    """
    if timestamp is None:
        return None

    return datetime.datetime.fromtimestamp(int(timestamp) / 1000, tz=pytz.UTC)


def without_none(**fields: Any) -> Dict[str, Any]:
    """
    Builds a request payload, dropping any field that is ``None``.
    """
    return {k: v for k, v in fields.items() if v is not None}


def try_enum(enum_type: Type, value: Any) -> Any:
    """
    Converts ``value`` to a member of ``enum_type``, returning the raw value if it is not one.

    The platform adds new types over time; an unknown one should not make a response unreadable.
    """
    try:
        return enum_type(value)
    except ValueError:
        return value

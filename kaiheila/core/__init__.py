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
The core of kaiheila.

This package contains the network interface with the platform: building authenticated
requests, decoding the response envelope, and paging through list endpoints.

.. currentmodule:: kaiheila.core

.. autosummary::
    :toctree: core

    session
    envelope
    query
    pagination
    dispatch
    httpclient
"""

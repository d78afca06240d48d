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
Dataclasses for the objects the platform returns.

Each class is built from the decoded JSON of a response, and only holds data; none of them
make requests themselves.

.. currentmodule:: kaiheila.dataclasses

.. autosummary::
    :toctree: dataclasses

    bases
    channel
    guild
    message
    role
    user
"""

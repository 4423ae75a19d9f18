"""Court format lookup: roster size to side sizes."""

# Court Grouper
# Copyright (C) 2025  Court Grouper developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from courtgrouper.constants import COURT_FORMATS
from courtgrouper.exceptions import UnsupportedRosterSizeException
from courtgrouper.type_hints import CourtFormat


def resolve_format(player_count: int) -> CourtFormat:
    """Get the court format for a given player count.

    Singles are kept to a minimum and placed on the second court, so the
    first court holds doubles whenever the roster allows it::

        4 players: 1v1 + 1v1
        5 players: 1v2 + 1v1
        6 players: 2v2 + 1v1
        7 players: 2v2 + 2v1
        8 players: 2v2 + 2v2

    Returns
    -------
    tuple of int
        (court1.side1, court1.side2, court2.side1, court2.side2) sizes.

    Raises
    ------
    UnsupportedRosterSizeException
        If ``player_count`` is outside 4..8.
    """
    try:
        return COURT_FORMATS[player_count]
    except KeyError:
        raise UnsupportedRosterSizeException(player_count) from None

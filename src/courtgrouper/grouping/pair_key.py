"""Symmetric keys for unordered pairs of participants."""

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

from courtgrouper.type_hints import PairKey, ParticipantId


def pair_key(a: ParticipantId, b: ParticipantId) -> PairKey:
    """Return the key for the unordered pair ``{a, b}``.

    The key is the two ids as a sorted tuple, so ``pair_key(a, b) ==
    pair_key(b, a)`` and no separator can ever collide with an id.
    ``a == b`` is accepted.
    """
    return (a, b) if a <= b else (b, a)

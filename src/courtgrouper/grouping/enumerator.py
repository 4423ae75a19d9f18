"""Exhaustive enumeration of court assignments."""

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

import itertools
from math import comb
from typing import Iterator, Sequence

from courtgrouper.models.participant import Participant
from courtgrouper.type_hints import Assignment


def enumerate_assignments(
    roster: Sequence[Participant], sizes: Sequence[int]
) -> Iterator[Assignment]:
    """Yield every way to split ``roster`` into ordered groups of ``sizes``.

    The first group is every combination of ``sizes[0]`` participants, then
    the remaining participants are split recursively over the remaining
    sizes. Each distinct split is produced exactly once, and each call
    returns a fresh generator.

    Parameters
    ----------
    roster : sequence of Participant
        Participants to place. Ids must be unique.
    sizes : sequence of int
        Group sizes, in output order.

    Yields
    ------
    tuple of tuple of Participant
        One group per entry of ``sizes``.
    """
    if not sizes:
        yield ()
        return

    first, rest = sizes[0], sizes[1:]
    for combo in itertools.combinations(roster, first):
        chosen = {p.id for p in combo}
        remaining = [p for p in roster if p.id not in chosen]
        for tail in enumerate_assignments(remaining, rest):
            yield (combo,) + tail


def count_assignments(player_count: int, sizes: Sequence[int]) -> int:
    """Number of splits ``enumerate_assignments`` yields for a roster size."""
    total, left = 1, player_count
    for size in sizes:
        total *= comb(left, size)
        left -= size
    return total

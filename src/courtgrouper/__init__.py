"""Court Grouper: fair groupings of 4-8 players over two courts."""

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

from courtgrouper.controllers.session import SessionManager
from courtgrouper.exceptions import (
    CourtGrouperException,
    GenerationFailedException,
    UnsupportedRosterSizeException,
)
from courtgrouper.grouping.court_format import resolve_format
from courtgrouper.grouping.enumerator import enumerate_assignments
from courtgrouper.grouping.pair_key import pair_key
from courtgrouper.grouping.scorer import score_round
from courtgrouper.grouping.selector import generate_round
from courtgrouper.models import (
    Court,
    MatchHistory,
    Participant,
    Round,
    ScoringWeights,
    SessionConfig,
    Side,
    court_label,
    create_history,
    record_round,
    round_player_ids,
)

__version__ = "0.1.0"

__all__ = [
    "Participant",
    "Side",
    "Court",
    "Round",
    "MatchHistory",
    "ScoringWeights",
    "SessionConfig",
    "SessionManager",
    "pair_key",
    "resolve_format",
    "enumerate_assignments",
    "score_round",
    "generate_round",
    "create_history",
    "record_round",
    "court_label",
    "round_player_ids",
    "CourtGrouperException",
    "UnsupportedRosterSizeException",
    "GenerationFailedException",
]

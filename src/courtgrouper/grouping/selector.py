"""Round selection: pick the fairest grouping for the next round."""

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

import math
import random
from typing import Optional, Sequence

from courtgrouper.exceptions import GenerationFailedException
from courtgrouper.grouping.court_format import resolve_format
from courtgrouper.grouping.enumerator import count_assignments, enumerate_assignments
from courtgrouper.grouping.scorer import score_round
from courtgrouper.models.court import Round
from courtgrouper.models.match_history import MatchHistory
from courtgrouper.models.participant import Participant
from courtgrouper.models.session_config import DEFAULT_WEIGHTS, ScoringWeights
from courtgrouper.utils import setup_logger

logger = setup_logger(__name__)


def generate_round(
    roster: Sequence[Participant],
    history: MatchHistory,
    rng: Optional[random.Random] = None,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> Round:
    """Generate the best next round for the given roster and history.

    The roster is shuffled first so that ties, which are universal while the
    history is empty, do not always resolve to the same grouping. Every
    valid grouping is then scored and the lowest wins, first seen on ties.
    The search stops as soon as a grouping scores 0.

    Args:
        roster: Active participants, 4 to 8 of them
        history: Ledger of previous rounds, only read
        rng: Source of randomness for the shuffle; a fresh one if omitted
        weights: Fairness tier weights

    Returns:
        The chosen Round. It is not recorded into ``history``.

    Raises:
        UnsupportedRosterSizeException: If the roster size is outside 4..8
        GenerationFailedException: If no candidate grouping was produced
    """
    sizes = resolve_format(len(roster))
    rng = rng if rng is not None else random.Random()

    shuffled = list(roster)
    rng.shuffle(shuffled)

    best_round: Optional[Round] = None
    best_score = math.inf
    examined = 0

    for groups in enumerate_assignments(shuffled, sizes):
        examined += 1
        candidate = Round.from_groups(groups)
        score = score_round(history, candidate, weights)
        if score < best_score:
            best_score = score
            best_round = candidate
            # nothing scores below 0
            if score == 0:
                break

    if best_round is None:
        raise GenerationFailedException(
            f"No grouping produced for {len(roster)} players with format {sizes}"
        )

    logger.debug(
        "Round %d: examined %d of %d groupings, best score %.3f",
        history.rounds_played + 1,
        examined,
        count_assignments(len(shuffled), sizes),
        best_score,
    )
    return best_round

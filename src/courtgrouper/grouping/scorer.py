"""Fairness scoring of candidate rounds.

A round's score is the sum of three weighted tiers, highest priority first:

- singles: participants sitting alone again
- partners: pairs sharing a side again
- opponents: pairs facing each other again

Each item also adds a recency term in ``[0, 1)``. It only separates
candidates with equal repeat counts, preferring the participant or pair
used least recently, so singles and pairs are recycled in FIFO order once
all of them have been used.
"""

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

from typing import Hashable, Mapping

from courtgrouper.models.court import Round
from courtgrouper.models.match_history import MatchHistory
from courtgrouper.models.session_config import DEFAULT_WEIGHTS, ScoringWeights


def recency(key: Hashable, last_rounds: Mapping, rounds_played: int) -> float:
    """Fraction in ``[0, 1)`` that grows with how recently ``key`` was used."""
    return last_rounds.get(key, 0) / (rounds_played + 1)


def score_round(
    history: MatchHistory,
    round_: Round,
    weights: ScoringWeights = DEFAULT_WEIGHTS,
) -> float:
    """Score a candidate round. Lower is better.

    An empty history scores every round 0. The history is only read.
    """
    played = history.rounds_played
    score = 0.0

    for court in round_.courts:
        for side in court.sides:
            if side.is_single:
                pid = side.players[0].id
                score += weights.single * history.single_count.get(pid, 0)
                score += recency(pid, history.last_single_round, played)
            else:
                key = side.partner_key()
                score += weights.partner * history.partner_count.get(key, 0)
                score += recency(key, history.last_partner_round, played)
        for key in court.opponent_pairs():
            score += weights.opponent * history.opponent_count.get(key, 0)
            score += recency(key, history.last_opponent_round, played)

    return score

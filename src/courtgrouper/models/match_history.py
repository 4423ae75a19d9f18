"""The fairness ledger consulted when scoring rounds."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List

from courtgrouper.grouping.pair_key import pair_key
from courtgrouper.models.court import Round
from courtgrouper.type_hints import PairCounts, PlayerCounts


def _bump(counts: Dict, key) -> None:
    counts[key] = counts.get(key, 0) + 1


def _pairs_to_list(counts: PairCounts) -> List[List[Any]]:
    return [[a, b, value] for (a, b), value in sorted(counts.items())]


def _pairs_from_list(entries: List[List[Any]]) -> PairCounts:
    return {pair_key(str(a), str(b)): int(value) for a, b, value in entries}


@dataclass
class MatchHistory:
    """
    Tracks how often, and how recently, each participant sat alone on a
    side and each pair partnered or opposed each other.

    Counts only grow. Every ``last_*_round`` value is a 1-based round
    index no greater than ``rounds_played``. ``record`` is the only method
    that changes a history.

    Attributes
    ----------
    single_count : dict of str to int
        Times each participant played alone on a side.
    partner_count : dict of tuple to int
        Times each pair shared a side, keyed by ``pair_key``.
    opponent_count : dict of tuple to int
        Times each pair faced each other across a court.
    last_single_round : dict of str to int
        Round index of each participant's most recent singles play.
    last_partner_round : dict of tuple to int
        Round index of each pair's most recent partnership.
    last_opponent_round : dict of tuple to int
        Round index of each pair's most recent meeting as opponents.
    rounds_played : int
        Number of rounds recorded. Also the clock for the ``last_*`` maps.
    """

    single_count: PlayerCounts = field(default_factory=dict)
    partner_count: PairCounts = field(default_factory=dict)
    opponent_count: PairCounts = field(default_factory=dict)
    last_single_round: PlayerCounts = field(default_factory=dict)
    last_partner_round: PairCounts = field(default_factory=dict)
    last_opponent_round: PairCounts = field(default_factory=dict)
    rounds_played: int = 0

    def record(self, round_: Round) -> None:
        """Merge a played round into the ledger."""
        round_index = self.rounds_played + 1
        for court in round_.courts:
            for side in court.sides:
                if side.is_single:
                    pid = side.players[0].id
                    _bump(self.single_count, pid)
                    self.last_single_round[pid] = round_index
                else:
                    key = side.partner_key()
                    _bump(self.partner_count, key)
                    self.last_partner_round[key] = round_index
            for key in court.opponent_pairs():
                _bump(self.opponent_count, key)
                self.last_opponent_round[key] = round_index
        self.rounds_played = round_index

    def copy(self) -> "MatchHistory":
        """Return an independent copy of the ledger."""
        return MatchHistory(
            single_count=dict(self.single_count),
            partner_count=dict(self.partner_count),
            opponent_count=dict(self.opponent_count),
            last_single_round=dict(self.last_single_round),
            last_partner_round=dict(self.last_partner_round),
            last_opponent_round=dict(self.last_opponent_round),
            rounds_played=self.rounds_played,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match history to dictionary."""
        return {
            "single_count": dict(self.single_count),
            "partner_count": _pairs_to_list(self.partner_count),
            "opponent_count": _pairs_to_list(self.opponent_count),
            "last_single_round": dict(self.last_single_round),
            "last_partner_round": _pairs_to_list(self.last_partner_round),
            "last_opponent_round": _pairs_to_list(self.last_opponent_round),
            "rounds_played": self.rounds_played,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchHistory":
        """Deserialize match history from dictionary."""
        return cls(
            single_count={
                str(k): int(v) for k, v in data.get("single_count", {}).items()
            },
            partner_count=_pairs_from_list(data.get("partner_count", [])),
            opponent_count=_pairs_from_list(data.get("opponent_count", [])),
            last_single_round={
                str(k): int(v) for k, v in data.get("last_single_round", {}).items()
            },
            last_partner_round=_pairs_from_list(data.get("last_partner_round", [])),
            last_opponent_round=_pairs_from_list(data.get("last_opponent_round", [])),
            rounds_played=int(data.get("rounds_played", 0)),
        )


def create_history() -> MatchHistory:
    """Create an empty match history."""
    return MatchHistory()


def record_round(history: MatchHistory, round_: Round) -> None:
    """Record a round into the history (mutates history)."""
    history.record(round_)

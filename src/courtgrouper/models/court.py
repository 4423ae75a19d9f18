"""Data models for sides, courts and rounds."""

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

from dataclasses import dataclass
from typing import Any, Dict, Iterator, Sequence, Set, Tuple

from courtgrouper.exceptions import InvalidRoundException
from courtgrouper.grouping.pair_key import pair_key
from courtgrouper.models.participant import Participant
from courtgrouper.type_hints import PairKey, ParticipantId


@dataclass(frozen=True)
class Side:
    """One half of a court, played by one or two participants.

    Attributes
    ----------
    players : tuple of Participant
        The participants on this side. Order carries no meaning.
    """

    players: Tuple[Participant, ...]

    def __post_init__(self) -> None:
        if len(self.players) not in (1, 2):
            raise InvalidRoundException(
                f"A side holds 1 or 2 players, got {len(self.players)}"
            )

    @property
    def size(self) -> int:
        return len(self.players)

    @property
    def is_single(self) -> bool:
        return len(self.players) == 1

    def partner_key(self) -> PairKey:
        """Pair key of the two partners on a doubles side."""
        if len(self.players) != 2:
            raise InvalidRoundException("Only a doubles side has partners")
        first, second = self.players
        return pair_key(first.id, second.id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize side to dictionary."""
        return {"players": [p.to_dict() for p in self.players]}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Side":
        """Deserialize side from dictionary."""
        return cls(
            players=tuple(Participant.from_dict(p) for p in data.get("players", []))
        )


@dataclass(frozen=True)
class Court:
    """A court with two opposing sides."""

    side1: Side
    side2: Side

    @property
    def sides(self) -> Tuple[Side, Side]:
        return (self.side1, self.side2)

    @property
    def label(self) -> str:
        """Format label such as ``"2v1"``."""
        return f"{self.side1.size}v{self.side2.size}"

    @property
    def players(self) -> Tuple[Participant, ...]:
        return self.side1.players + self.side2.players

    def opponent_pairs(self) -> Iterator[PairKey]:
        """Yield the pair key of every cross-side pair."""
        for p1 in self.side1.players:
            for p2 in self.side2.players:
                yield pair_key(p1.id, p2.id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize court to dictionary."""
        return {"side1": self.side1.to_dict(), "side2": self.side2.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Court":
        """Deserialize court from dictionary."""
        return cls(
            side1=Side.from_dict(data["side1"]), side2=Side.from_dict(data["side2"])
        )


@dataclass(frozen=True)
class Round:
    """One complete assignment of the roster over both courts.

    Attributes
    ----------
    court1 : Court
        The first court. Holds the doubles game whenever there is one.
    court2 : Court
        The second court.
    """

    court1: Court
    court2: Court

    def __post_init__(self) -> None:
        ids = [p.id for p in self.players]
        if len(ids) != len(set(ids)):
            raise InvalidRoundException("A participant appears twice in the round")

    @property
    def courts(self) -> Tuple[Court, Court]:
        return (self.court1, self.court2)

    @property
    def players(self) -> Tuple[Participant, ...]:
        return self.court1.players + self.court2.players

    @classmethod
    def from_groups(cls, groups: Sequence[Sequence[Participant]]) -> "Round":
        """Build a round from four groups.

        Groups map positionally to court1.side1, court1.side2,
        court2.side1 and court2.side2.
        """
        if len(groups) != 4:
            raise InvalidRoundException(f"A round needs 4 groups, got {len(groups)}")
        s1, s2, s3, s4 = (Side(players=tuple(g)) for g in groups)
        return cls(court1=Court(s1, s2), court2=Court(s3, s4))

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round to dictionary."""
        return {"court1": self.court1.to_dict(), "court2": self.court2.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round from dictionary."""
        return cls(
            court1=Court.from_dict(data["court1"]),
            court2=Court.from_dict(data["court2"]),
        )


def court_label(court: Court) -> str:
    """Return the ``"{n}v{m}"`` label of a court."""
    return court.label


def round_player_ids(round_: Round) -> Set[ParticipantId]:
    """Return the ids of everyone placed in the round."""
    return {p.id for p in round_.players}

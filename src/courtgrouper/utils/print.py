"""
Plain-text rendering of rounds, rosters and the fairness ledger.
Shared by the command line front end.
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

from typing import Dict, Iterable, List, Set

from courtgrouper.models.court import Court, Round, Side
from courtgrouper.models.match_history import MatchHistory
from courtgrouper.models.participant import Participant


def format_side(side: Side) -> str:
    return " & ".join(p.name for p in side.players)


def format_court(court: Court, number: int) -> str:
    """One line such as ``Court 1 (2v1): Ann & Bob  vs  Cat``."""
    return (
        f"Court {number} ({court.label}): "
        f"{format_side(court.side1)}  vs  {format_side(court.side2)}"
    )


def format_round(round_: Round, round_number: int) -> str:
    """Render a round with a header line and one line per court."""
    lines = [f"Round {round_number}"]
    lines.extend(
        f"  {format_court(court, i)}" for i, court in enumerate(round_.courts, 1)
    )
    return "\n".join(lines)


def format_roster(participants: Iterable[Participant], active_ids: Set[str]) -> str:
    """Numbered roster listing, inactive participants marked."""
    lines = []
    for i, p in enumerate(participants, 1):
        marker = " " if p.id in active_ids else "x"
        lines.append(f"  [{marker}] {i:2}. {p.name}  ({p.id})")
    return "\n".join(lines) if lines else "  (no players)"


def format_history(history: MatchHistory, participants: Iterable[Participant]) -> str:
    """Summarize the ledger: singles per participant and repeated pairs."""
    names: Dict[str, str] = {p.id: p.name for p in participants}

    def name(pid: str) -> str:
        return names.get(pid, pid)

    lines: List[str] = [f"Rounds played: {history.rounds_played}", "Singles:"]
    for pid in names:
        lines.append(f"  {name(pid):20} {history.single_count.get(pid, 0)}")

    repeats = [
        ("Partners", history.partner_count),
        ("Opponents", history.opponent_count),
    ]
    for title, counts in repeats:
        repeated = sorted(
            ((k, v) for k, v in counts.items() if v > 1), key=lambda kv: -kv[1]
        )
        lines.append(f"{title} more than once:")
        if not repeated:
            lines.append("  none")
        for (a, b), value in repeated:
            lines.append(f"  {name(a)} & {name(b)}: {value}")
    return "\n".join(lines)

"""Session management for a court grouping evening.

This module keeps the roster, the rounds played so far and the fairness
ledger together, and coordinates round generation with history updates.
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

import random
from typing import Iterable, List, Optional, Set

from courtgrouper.constants import MAX_ROSTER_SIZE, MIN_ROSTER_SIZE
from courtgrouper.exceptions import (
    DuplicateParticipantException,
    InvalidParticipantDataException,
    ParticipantNotFoundException,
)
from courtgrouper.grouping.selector import generate_round
from courtgrouper.models.court import Round
from courtgrouper.models.match_history import MatchHistory, create_history
from courtgrouper.models.participant import Participant
from courtgrouper.models.session_config import SessionConfig
from courtgrouper.utils import setup_logger

logger = setup_logger(__name__)


class SessionManager:
    """Manages the roster, round progression and history of one session.

    This class is responsible for:
    - Keeping the ordered roster and which participants are active
    - Generating the next round from the active roster
    - Recording every generated round into the match history
    - Resetting or undoing rounds
    """

    def __init__(
        self,
        participants: Optional[Iterable[Participant]] = None,
        config: Optional[SessionConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """Initialize the session manager.

        Args:
            participants: Initial roster, all active
            config: Session settings; defaults if omitted
            rng: Random source for shuffling; seeded from ``config.seed`` if omitted
        """
        self.config = config or SessionConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.participants: List[Participant] = []
        self.active_ids: Set[str] = set()
        self.history: MatchHistory = create_history()
        self.rounds: List[Round] = []
        self.replace_roster(participants or [])

    # ----- roster -----

    @property
    def active_participants(self) -> List[Participant]:
        """Active participants, in roster order."""
        return [p for p in self.participants if p.id in self.active_ids]

    @property
    def active_count(self) -> int:
        return len(self.active_participants)

    @property
    def can_generate(self) -> bool:
        """Whether the active roster fits on two courts."""
        return MIN_ROSTER_SIZE <= self.active_count <= MAX_ROSTER_SIZE

    def find_participant(self, participant_id: str) -> Participant:
        """Get a participant by id.

        Raises:
            ParticipantNotFoundException: If no participant has that id
        """
        for participant in self.participants:
            if participant.id == participant_id:
                return participant
        raise ParticipantNotFoundException(f"No player with id {participant_id}")

    def add_participant(self, name: str) -> Participant:
        """Add a new, active participant.

        Args:
            name: Display name; surrounding whitespace is dropped

        Returns:
            The created participant

        Raises:
            InvalidParticipantDataException: If the name is empty or too long
        """
        name = (name or "").strip()
        if not name:
            raise InvalidParticipantDataException("Player name cannot be empty")
        if len(name) > self.config.max_name_length:
            raise InvalidParticipantDataException(
                f"Player name is longer than {self.config.max_name_length} characters"
            )
        participant = Participant.create(name)
        self._append(participant)
        logger.info(f"Added player {participant.name} ({participant.id})")
        return participant

    def _append(self, participant: Participant) -> None:
        if any(p.id == participant.id for p in self.participants):
            raise DuplicateParticipantException(
                f"A player with id {participant.id} already exists"
            )
        self.participants.append(participant)
        self.active_ids.add(participant.id)

    def remove_participant(self, participant_id: str) -> Participant:
        """Remove a participant from the roster.

        Their history entries stay, so they are treated fairly if re-added
        with the same id.
        """
        participant = self.find_participant(participant_id)
        self.participants.remove(participant)
        self.active_ids.discard(participant_id)
        logger.info(f"Removed player {participant.name} ({participant.id})")
        return participant

    def toggle_participant(self, participant_id: str) -> bool:
        """Flip whether a participant is active.

        Returns:
            True if the participant is now active
        """
        self.find_participant(participant_id)
        if participant_id in self.active_ids:
            self.active_ids.discard(participant_id)
            return False
        self.active_ids.add(participant_id)
        return True

    def replace_roster(self, participants: Iterable[Participant]) -> None:
        """Replace the roster, keeping the first of any repeated id."""
        self.participants = []
        self.active_ids = set()
        for participant in participants:
            if participant.id in self.active_ids:
                logger.warning(f"Skipping repeated player id {participant.id}")
                continue
            self._append(participant)

    # ----- rounds -----

    @property
    def current_round_number(self) -> int:
        """Get the current round number (1-indexed), 0 before any round."""
        return len(self.rounds)

    def get_round(self, round_number: int) -> Optional[Round]:
        """Get a specific round (1-indexed), or None if it does not exist."""
        if 1 <= round_number <= len(self.rounds):
            return self.rounds[round_number - 1]
        return None

    def create_next_round(self) -> Round:
        """Generate the next round and record it into the history.

        Returns:
            The new round

        Raises:
            UnsupportedRosterSizeException: If fewer than 4 or more than 8
                participants are active
        """
        active = self.active_participants
        round_ = generate_round(active, self.history, self.rng, self.config.weights)
        self.history.record(round_)
        self.rounds.append(round_)
        logger.info(
            f"Created round {len(self.rounds)} with {len(active)} active players: "
            f"{round_.court1.label} + {round_.court2.label}"
        )
        return round_

    def reset(self) -> None:
        """Forget all rounds and start a fresh history."""
        self.rounds = []
        self.history = create_history()
        logger.info("Session reset")

    def undo_last_round(self) -> bool:
        """Remove the last round and rebuild the history without it.

        Returns:
            True if a round was removed, False if there was none
        """
        if not self.rounds:
            logger.warning("Cannot undo: no rounds exist")
            return False

        self.rounds.pop()
        history = create_history()
        for round_ in self.rounds:
            history.record(round_)
        self.history = history
        logger.info(f"Undid round {len(self.rounds) + 1}")
        return True

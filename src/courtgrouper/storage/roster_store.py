"""Roster persistence in a JSON file."""

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

import json
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from courtgrouper.constants import ROSTER_FILE_NAME
from courtgrouper.exceptions import FileSaveException, InvalidParticipantDataException
from courtgrouper.models.participant import Participant
from courtgrouper.utils import app_data_dir, setup_logger

logger = setup_logger(__name__)


def default_roster_path() -> Path:
    """Location of the roster file when none is configured."""
    return Path(app_data_dir()) / ROSTER_FILE_NAME


def participants_from_payload(payload: Any) -> List[Participant]:
    """Build participants from decoded JSON, skipping malformed entries.

    Anything other than a list gives an empty roster.
    """
    if not isinstance(payload, list):
        return []
    participants = []
    for entry in payload:
        try:
            participants.append(Participant.from_dict(entry))
        except InvalidParticipantDataException:
            logger.debug("Skipping malformed roster entry: %r", entry)
    return participants


def load_roster(path: Optional[Union[str, Path]] = None) -> List[Participant]:
    """Load the stored roster.

    A missing, unreadable or corrupted file gives an empty roster.
    """
    path = Path(path) if path is not None else default_roster_path()
    if not path.exists():
        return []
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read roster file {path}: {e}")
        return []
    return participants_from_payload(payload)


def save_roster(
    path: Optional[Union[str, Path]], participants: Sequence[Participant]
) -> Path:
    """Write the roster as a JSON list of ``{id, name}`` objects.

    Returns:
        The path written to

    Raises:
        FileSaveException: If the file cannot be written
    """
    path = Path(path) if path is not None else default_roster_path()
    try:
        os.makedirs(path.parent, exist_ok=True)
        path.write_text(
            json.dumps([p.to_dict() for p in participants], indent=2),
            encoding="utf-8",
        )
    except OSError as e:
        logger.error(f"Could not save roster to {path}: {e}")
        raise FileSaveException(f"Could not save roster to {path}: {e}") from e
    logger.info(f"Saved {len(participants)} players to {path}")
    return path

"""A participant on the roster."""

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
from typing import Any, Dict

from courtgrouper.exceptions import InvalidParticipantDataException
from courtgrouper.utils import generate_id


@dataclass(frozen=True)
class Participant:
    """
    A person who can be placed on a court.

    Identity is the ``id``; ``name`` is only for display, so two
    participants with the same id compare equal even if their names differ.

    Attributes
    ----------
    id : str
        Opaque unique identifier.
    name : str
        Display name.

    Examples
    --------
    Creating a participant with a fresh id::

        ann = Participant.create("Ann")
    """

    id: str
    name: str = field(compare=False)

    @classmethod
    def create(cls, name: str) -> "Participant":
        """Create a participant with a newly generated id."""
        return cls(id=generate_id(), name=name)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize participant to dictionary."""
        return {"id": self.id, "name": self.name}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        """Deserialize participant from dictionary.

        Raises
        ------
        InvalidParticipantDataException
            If ``id`` or ``name`` is missing or not a string.
        """
        if not isinstance(data, dict):
            raise InvalidParticipantDataException(f"Not a participant: {data!r}")
        pid, name = data.get("id"), data.get("name")
        if not isinstance(pid, str) or not isinstance(name, str):
            raise InvalidParticipantDataException(f"Not a participant: {data!r}")
        return cls(id=pid, name=name)

    def __str__(self) -> str:
        return self.name

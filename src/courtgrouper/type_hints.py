"""Type hints used in Court Grouper."""

from typing import Dict, List, Tuple

# Opaque participant identifier
ParticipantId = str

# Sorted pair of participant ids, symmetric in its arguments
PairKey = Tuple[ParticipantId, ParticipantId]

# Side sizes: (court1.side1, court1.side2, court2.side1, court2.side2)
CourtFormat = Tuple[int, int, int, int]

# A group of participants destined for one side
Group = Tuple["Participant", ...]

# One candidate split of the roster, positionally matching CourtFormat
Assignment = Tuple[Group, ...]

Roster = List["Participant"]

# Ledger maps
PlayerCounts = Dict[ParticipantId, int]
PairCounts = Dict[PairKey, int]

#  LocalWords:  CourtFormat PairKey

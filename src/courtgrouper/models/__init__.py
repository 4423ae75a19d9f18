from courtgrouper.models.court import (
    Court,
    Round,
    Side,
    court_label,
    round_player_ids,
)
from courtgrouper.models.match_history import (
    MatchHistory,
    create_history,
    record_round,
)
from courtgrouper.models.participant import Participant
from courtgrouper.models.session_config import (
    DEFAULT_WEIGHTS,
    ScoringWeights,
    SessionConfig,
)

__all__ = [
    "Participant",
    "Side",
    "Court",
    "Round",
    "court_label",
    "round_player_ids",
    "MatchHistory",
    "create_history",
    "record_round",
    "ScoringWeights",
    "SessionConfig",
    "DEFAULT_WEIGHTS",
]

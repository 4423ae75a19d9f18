"""SessionConfig data class."""

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
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from courtgrouper.constants import (
    DEFAULT_SHARE_BASE_URL,
    MAX_NAME_LENGTH,
    OPPONENT_WEIGHT,
    PARTNER_WEIGHT,
    SINGLE_WEIGHT,
)
from courtgrouper.exceptions import FileLoadException, InvalidConfigurationException


@dataclass(frozen=True)
class ScoringWeights:
    """Weights of the three fairness tiers.

    The defaults keep one repeat at a higher tier above any realistic
    mix of repeats at the tiers below it.

    Attributes
    ----------
    single : float
        Cost per previous singles play of a participant sitting alone.
    partner : float
        Cost per previous partnership of a pair sharing a side.
    opponent : float
        Cost per previous meeting of a pair facing each other.
    """

    single: float = SINGLE_WEIGHT
    partner: float = PARTNER_WEIGHT
    opponent: float = OPPONENT_WEIGHT

    def __post_init__(self) -> None:
        for name in ("single", "partner", "opponent"):
            value = getattr(self, name)
            if (
                isinstance(value, bool)
                or not isinstance(value, (int, float))
                or value < 0
            ):
                raise InvalidConfigurationException(
                    f"Weight '{name}' must be a non-negative number, got {value!r}"
                )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize weights to dictionary."""
        return {"single": self.single, "partner": self.partner, "opponent": self.opponent}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScoringWeights":
        """Deserialize weights from dictionary."""
        return cls(
            single=data.get("single", SINGLE_WEIGHT),
            partner=data.get("partner", PARTNER_WEIGHT),
            opponent=data.get("opponent", OPPONENT_WEIGHT),
        )


DEFAULT_WEIGHTS = ScoringWeights()


@dataclass
class SessionConfig:
    """Session configuration settings.

    Attributes
    ----------
    weights : ScoringWeights
        Fairness tier weights used when scoring candidate rounds.
    seed : int or None
        Seed for the session's random source. ``None`` draws a fresh seed.
    roster_path : str or None
        Where the roster is stored. ``None`` means the default location.
    share_base_url : str
        Base URL used when building share links.
    max_name_length : int
        Longest accepted participant name.
    """

    weights: ScoringWeights = field(default_factory=ScoringWeights)
    seed: Optional[int] = None
    roster_path: Optional[str] = None
    share_base_url: str = DEFAULT_SHARE_BASE_URL
    max_name_length: int = MAX_NAME_LENGTH

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "weights": self.weights.to_dict(),
            "seed": self.seed,
            "roster_path": self.roster_path,
            "share_base_url": self.share_base_url,
            "max_name_length": self.max_name_length,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SessionConfig":
        """Deserialize configuration from dictionary."""
        if not isinstance(data, dict):
            raise InvalidConfigurationException("Configuration must be a JSON object")
        seed = data.get("seed")
        if seed is not None and not isinstance(seed, int):
            raise InvalidConfigurationException(f"Seed must be an integer, got {seed!r}")
        max_name_length = data.get("max_name_length", MAX_NAME_LENGTH)
        if not isinstance(max_name_length, int) or max_name_length < 1:
            raise InvalidConfigurationException(
                f"max_name_length must be a positive integer, got {max_name_length!r}"
            )
        weights = data.get("weights") or {}
        if not isinstance(weights, dict):
            raise InvalidConfigurationException("weights must be a JSON object")
        return cls(
            weights=ScoringWeights.from_dict(weights),
            seed=seed,
            roster_path=data.get("roster_path"),
            share_base_url=data.get("share_base_url", DEFAULT_SHARE_BASE_URL),
            max_name_length=max_name_length,
        )

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "SessionConfig":
        """Load configuration from a JSON file.

        Raises
        ------
        FileLoadException
            If the file cannot be read.
        InvalidConfigurationException
            If the file is not valid JSON or holds invalid settings.
        """
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise FileLoadException(f"Cannot read config file {path}: {e}") from e
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidConfigurationException(
                f"Config file {path} is not valid JSON: {e}"
            ) from e
        return cls.from_dict(data)

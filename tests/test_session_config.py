import json

import pytest

from courtgrouper.constants import DEFAULT_SHARE_BASE_URL
from courtgrouper.exceptions import FileLoadException, InvalidConfigurationException
from courtgrouper.models import ScoringWeights, SessionConfig


def test_defaults():
    config = SessionConfig()
    assert config.weights == ScoringWeights(1000, 100, 10)
    assert config.seed is None
    assert config.share_base_url == DEFAULT_SHARE_BASE_URL


def test_from_file(tmp_path):
    path = tmp_path / "session.json"
    path.write_text(
        json.dumps({"seed": 3, "weights": {"partner": 50}, "max_name_length": 12}),
        encoding="utf-8",
    )
    config = SessionConfig.from_file(path)
    assert config.seed == 3
    assert config.weights.partner == 50
    assert config.weights.single == 1000
    assert config.max_name_length == 12


def test_dict_round_trip():
    config = SessionConfig(weights=ScoringWeights(10, 5, 1), seed=4, roster_path="x.json")
    assert SessionConfig.from_dict(config.to_dict()) == config


def test_missing_file(tmp_path):
    with pytest.raises(FileLoadException):
        SessionConfig.from_file(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{oops", encoding="utf-8")
    with pytest.raises(InvalidConfigurationException):
        SessionConfig.from_file(path)


@pytest.mark.parametrize(
    "data",
    [
        [],
        {"seed": "abc"},
        {"max_name_length": 0},
        {"weights": [1, 2, 3]},
        {"weights": {"single": -1}},
        {"weights": {"opponent": "ten"}},
        {"weights": {"partner": True}},
    ],
)
def test_invalid_settings(data):
    with pytest.raises(InvalidConfigurationException):
        SessionConfig.from_dict(data)


@pytest.mark.parametrize("value", [True, False])
def test_boolean_weights_are_rejected(value):
    with pytest.raises(InvalidConfigurationException):
        ScoringWeights(single=value)

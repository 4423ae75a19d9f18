import pytest

from courtgrouper.grouping.court_format import resolve_format
from courtgrouper.grouping.enumerator import enumerate_assignments
from courtgrouper.grouping.pair_key import pair_key
from courtgrouper.grouping.scorer import recency, score_round
from courtgrouper.models import Participant, Round, ScoringWeights, create_history


def _make_participants(count):
    return [Participant(id=f"p{i + 1}", name=f"Player {i + 1}") for i in range(count)]


def _singles_round(players):
    return Round.from_groups([[players[0]], [players[1]], [players[2]], [players[3]]])


@pytest.mark.parametrize("count", [4, 5, 6, 7, 8])
def test_empty_history_scores_zero(count):
    roster = _make_participants(count)
    history = create_history()
    for groups in enumerate_assignments(roster, resolve_format(count)):
        assert score_round(history, Round.from_groups(groups)) == 0


def test_repeated_single_is_heavily_penalized():
    players = _make_participants(4)
    history = create_history()
    history.single_count["p1"] = 1

    assert score_round(history, _singles_round(players)) >= 1000


def test_repeated_partnership_is_penalized():
    p1, p2, p3, p4, p5, p6 = _make_participants(6)
    round_ = Round.from_groups([[p1, p2], [p3, p4], [p5], [p6]])
    history = create_history()
    history.partner_count[pair_key("p1", "p2")] = 1

    score = score_round(history, round_)
    assert 100 <= score < 1000


def test_repeated_opponents_are_penalized():
    players = _make_participants(4)
    history = create_history()
    history.opponent_count[pair_key("p1", "p2")] = 1

    score = score_round(history, _singles_round(players))
    assert 10 <= score < 100


def test_tier_ordering():
    p1, p2, p3, p4, p5, p6 = _make_participants(6)
    round_ = Round.from_groups([[p1, p2], [p3, p4], [p5], [p6]])

    single = create_history()
    single.single_count["p5"] = 1
    partner = create_history()
    partner.partner_count[pair_key("p1", "p2")] = 1
    opponent = create_history()
    opponent.opponent_count[pair_key("p1", "p3")] = 1

    assert score_round(single, round_) > score_round(partner, round_)
    assert score_round(partner, round_) > score_round(opponent, round_)


def test_recency_prefers_the_older_repeat():
    p1, p2, p3, p4, p5, p6 = _make_participants(6)
    history = create_history()
    history.rounds_played = 4
    history.single_count.update({"p1": 1, "p5": 1})
    history.last_single_round.update({"p1": 1, "p5": 3})

    # same shape, only the participant sitting alone beside p6 differs
    p1_alone = Round.from_groups([[p5, p2], [p3, p4], [p1], [p6]])
    p5_alone = Round.from_groups([[p1, p2], [p3, p4], [p5], [p6]])

    assert score_round(history, p1_alone) < score_round(history, p5_alone)


def test_recency_term():
    assert recency("x", {}, 3) == 0
    assert recency("x", {"x": 3}, 3) == pytest.approx(0.75)
    assert 0 <= recency("x", {"x": 10}, 10) < 1


def test_custom_weights():
    players = _make_participants(4)
    history = create_history()
    history.single_count["p1"] = 1
    weights = ScoringWeights(single=5, partner=3, opponent=1)

    assert score_round(history, _singles_round(players), weights) == 5


def test_scoring_does_not_change_history():
    players = _make_participants(4)
    history = create_history()
    history.single_count["p1"] = 2
    before = history.to_dict()
    score_round(history, _singles_round(players))
    assert history.to_dict() == before

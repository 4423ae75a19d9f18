from courtgrouper.models import Participant, Round, create_history, record_round
from courtgrouper.utils.print import format_court, format_history, format_roster, format_round


def _make_participants(count):
    names = ["Ann", "Bob", "Cat", "Dan", "Eve", "Fay", "Gus", "Hal"]
    return [Participant(id=f"p{i + 1}", name=names[i]) for i in range(count)]


def test_format_court():
    ann, bob, cat, dan, eve = _make_participants(5)
    round_ = Round.from_groups([[cat], [ann, bob], [dan], [eve]])
    assert format_court(round_.court1, 1) == "Court 1 (1v2): Cat  vs  Ann & Bob"


def test_format_round():
    players = _make_participants(4)
    text = format_round(Round.from_groups([[p] for p in players]), 3)
    assert text.splitlines() == [
        "Round 3",
        "  Court 1 (1v1): Ann  vs  Bob",
        "  Court 2 (1v1): Cat  vs  Dan",
    ]


def test_format_roster_marks_inactive():
    players = _make_participants(2)
    text = format_roster(players, {"p1"})
    assert "[ ]  1. Ann" in text
    assert "[x]  2. Bob" in text
    assert format_roster([], set()) == "  (no players)"


def test_format_history_lists_repeats():
    players = _make_participants(4)
    round_ = Round.from_groups([[p] for p in players])
    history = create_history()
    record_round(history, round_)
    record_round(history, round_)

    text = format_history(history, players)
    assert "Rounds played: 2" in text
    assert "Ann & Bob: 2" in text
    assert "Partners more than once:\n  none" in text

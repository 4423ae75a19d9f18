import random

import pytest

from courtgrouper.controllers.session import SessionManager
from courtgrouper.exceptions import (
    DuplicateParticipantException,
    InvalidParticipantDataException,
    ParticipantNotFoundException,
    UnsupportedRosterSizeException,
)
from courtgrouper.models import Participant, SessionConfig


def _make_participants(count):
    return [Participant(id=f"p{i + 1}", name=f"Player {i + 1}") for i in range(count)]


def _manager(count, seed=7):
    return SessionManager(_make_participants(count), rng=random.Random(seed))


def test_new_participants_are_active():
    manager = SessionManager()
    ann = manager.add_participant("  Ann ")
    assert ann.name == "Ann"
    assert manager.active_participants == [ann]
    assert ann.id.startswith("p_")


@pytest.mark.parametrize("name", ["", "   ", "x" * 31])
def test_add_rejects_bad_names(name):
    with pytest.raises(InvalidParticipantDataException):
        SessionManager().add_participant(name)


def test_names_need_not_be_unique():
    manager = SessionManager()
    first = manager.add_participant("Sam")
    second = manager.add_participant("Sam")
    assert first.id != second.id
    assert len(manager.participants) == 2


def test_toggle_and_can_generate():
    manager = _manager(5)
    assert manager.can_generate
    assert manager.toggle_participant("p5") is False
    assert manager.active_count == 4
    assert manager.can_generate
    manager.toggle_participant("p4")
    assert not manager.can_generate
    assert manager.toggle_participant("p4") is True


def test_nine_players_cannot_generate():
    manager = _manager(9)
    assert not manager.can_generate
    with pytest.raises(UnsupportedRosterSizeException):
        manager.create_next_round()


def test_remove_participant():
    manager = _manager(5)
    removed = manager.remove_participant("p2")
    assert removed.id == "p2"
    assert [p.id for p in manager.participants] == ["p1", "p3", "p4", "p5"]
    with pytest.raises(ParticipantNotFoundException):
        manager.remove_participant("p2")


def test_replace_roster_skips_repeated_ids():
    manager = SessionManager()
    manager.replace_roster(
        [Participant("a", "Ann"), Participant("a", "Other"), Participant("b", "Bob")]
    )
    assert [p.name for p in manager.participants] == ["Ann", "Bob"]


def test_duplicate_append_raises():
    manager = _manager(4)
    with pytest.raises(DuplicateParticipantException):
        manager._append(Participant("p1", "Again"))


def test_inactive_participants_sit_out():
    manager = _manager(6)
    manager.toggle_participant("p6")
    round_ = manager.create_next_round()
    assert "p6" not in {p.id for p in round_.players}
    assert len(round_.players) == 5


def test_rounds_are_recorded():
    manager = _manager(6)
    manager.create_next_round()
    manager.create_next_round()
    assert manager.current_round_number == 2
    assert manager.history.rounds_played == 2
    assert manager.get_round(1) is manager.rounds[0]
    assert manager.get_round(3) is None


def test_undo_rebuilds_history():
    manager = _manager(7)
    manager.create_next_round()
    after_one = manager.history.to_dict()
    manager.create_next_round()

    assert manager.undo_last_round() is True
    assert manager.current_round_number == 1
    assert manager.history.to_dict() == after_one


def test_undo_without_rounds():
    assert _manager(4).undo_last_round() is False


def test_reset_clears_history():
    manager = _manager(8)
    manager.create_next_round()
    manager.reset()
    assert manager.rounds == []
    assert manager.history.rounds_played == 0
    assert len(manager.participants) == 8


def test_seeded_sessions_repeat():
    config = SessionConfig(seed=99)
    first = SessionManager(_make_participants(8), config)
    second = SessionManager(_make_participants(8), config)
    for _ in range(3):
        assert first.create_next_round().to_dict() == second.create_next_round().to_dict()

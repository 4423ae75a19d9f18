import argparse
import random

from courtgrouper.cli.__main__ import (
    COMMANDS,
    create_completer,
    create_main_parser,
    handle_interactive_command,
    main,
    resolve_participant,
    run_rounds_command,
)
from courtgrouper.controllers.session import SessionManager
from courtgrouper.models import Participant
from courtgrouper.storage import build_share_url, encode_roster, load_roster, save_roster


def _make_participants(count):
    return [Participant(id=f"p{i + 1}", name=f"Player {i + 1}") for i in range(count)]


def test_completer_covers_commands():
    completer = create_completer()
    for cmd in COMMANDS:
        assert cmd in completer.options
        assert f"/{cmd}" in completer.options


def test_rounds_command_prints_courts(capsys):
    args = argparse.Namespace(
        players=["Ann", "Bob", "Cat", "Dan", "Eve", "Fay"],
        count=2,
        seed=1,
        config=None,
        roster=None,
        show_history=False,
    )
    assert run_rounds_command(args) == 0
    out = capsys.readouterr().out
    assert "Round 1" in out
    assert "Round 2" in out
    assert "Court 1 (2v2):" in out
    assert "Court 2 (1v1):" in out


def test_rounds_command_rejects_small_roster(capsys):
    assert main(["rounds", "--players", "Ann", "Bob", "Cat"]) == 1
    assert "Select 4-8 players (3 selected)" in capsys.readouterr().out


def test_parser_subcommands():
    args = create_main_parser().parse_args(["rounds", "--players", "A", "B", "--count", "3"])
    assert args.command == "rounds"
    assert args.count == 3
    args = create_main_parser().parse_args(["import", "abc", "--roster", "r.json"])
    assert args.link == "abc"
    assert args.roster == "r.json"


def test_share_and_import_commands(tmp_path, capsys):
    source = tmp_path / "source.json"
    target = tmp_path / "target.json"
    save_roster(source, _make_participants(4))

    assert main(["share", "--roster", str(source), "--base-url", "https://x.test/"]) == 0
    link = capsys.readouterr().out.strip()
    assert link.startswith("https://x.test/?players=")

    assert main(["import", link, "--roster", str(target)]) == 0
    assert [p.id for p in load_roster(target)] == ["p1", "p2", "p3", "p4"]


def test_import_rejects_empty_link(tmp_path, capsys):
    target = tmp_path / "target.json"
    assert main(["import", "https://x.test/", "--roster", str(target)]) == 1
    assert not target.exists()


def test_interactive_session(tmp_path, capsys):
    roster_path = tmp_path / "players.json"
    manager = SessionManager(rng=random.Random(2))

    for name in ("Ann", "Bob", "Cat", "Dan", "Eve"):
        assert handle_interactive_command(manager, f"add {name}", roster_path)
    assert len(load_roster(roster_path)) == 5

    handle_interactive_command(manager, "/toggle Eve", roster_path)
    assert manager.active_count == 4

    handle_interactive_command(manager, "next", roster_path)
    out = capsys.readouterr().out
    assert "Round 1" in out
    assert "Court 1 (1v1):" in out

    handle_interactive_command(manager, "undo", roster_path)
    assert manager.current_round_number == 0

    handle_interactive_command(manager, "remove 1", roster_path)
    assert [p.name for p in load_roster(roster_path)] == ["Bob", "Cat", "Dan", "Eve"]

    assert handle_interactive_command(manager, "exit", roster_path) is False


def test_interactive_next_needs_enough_players(tmp_path, capsys):
    manager = SessionManager(_make_participants(3))
    handle_interactive_command(manager, "next", tmp_path / "players.json")
    assert "3 selected" in capsys.readouterr().out
    assert manager.current_round_number == 0


def test_interactive_import(tmp_path):
    roster_path = tmp_path / "players.json"
    manager = SessionManager(_make_participants(2))
    link = build_share_url("https://x.test/", _make_participants(6))

    handle_interactive_command(manager, f"import {link}", roster_path)
    assert len(manager.participants) == 6

    handle_interactive_command(manager, f"import {encode_roster(_make_participants(4))}", roster_path)
    assert len(load_roster(roster_path)) == 4


def test_resolve_participant_by_number_id_and_name():
    manager = SessionManager(_make_participants(3))
    assert resolve_participant(manager, "2").id == "p2"
    assert resolve_participant(manager, "p3").id == "p3"
    assert resolve_participant(manager, "Player 1").id == "p1"


def test_unknown_command(tmp_path, capsys):
    manager = SessionManager()
    assert handle_interactive_command(manager, "bogus", tmp_path / "p.json")
    assert "Unknown command: bogus" in capsys.readouterr().out

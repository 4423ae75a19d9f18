import base64
import json

from courtgrouper.models import Participant
from courtgrouper.storage import (
    build_share_url,
    decode_roster,
    encode_roster,
    load_roster,
    roster_from_url,
    save_roster,
)


def _roster():
    return [Participant("a", "Alice"), Participant("b", "Bob")]


def test_save_and_load(tmp_path):
    path = tmp_path / "nested" / "players.json"
    save_roster(path, _roster())
    loaded = load_roster(path)
    assert [(p.id, p.name) for p in loaded] == [("a", "Alice"), ("b", "Bob")]


def test_missing_file_gives_empty_roster(tmp_path):
    assert load_roster(tmp_path / "missing.json") == []


def test_corrupted_file_gives_empty_roster(tmp_path):
    path = tmp_path / "players.json"
    path.write_text("{bad json", encoding="utf-8")
    assert load_roster(path) == []


def test_share_token_round_trip():
    token = encode_roster(_roster())
    assert isinstance(token, str) and token
    decoded = decode_roster(token)
    assert [(p.id, p.name) for p in decoded] == [("a", "Alice"), ("b", "Bob")]


def test_share_token_keeps_unicode_names():
    decoded = decode_roster(encode_roster([Participant("z", "Zoë")]))
    assert decoded[0].name == "Zoë"


def test_invalid_base64():
    assert decode_roster("!!!invalid!!!") == []


def test_non_list_payload():
    token = base64.b64encode(b'{"not": "array"}').decode("ascii")
    assert decode_roster(token) == []


def test_malformed_entries_are_dropped():
    payload = json.dumps(
        [{"id": "a", "name": "Alice"}, {"id": 123, "name": "Bad"}, {"name": "NoId"}, None]
    )
    token = base64.b64encode(payload.encode("utf-8")).decode("ascii")
    assert [(p.id, p.name) for p in decode_roster(token)] == [("a", "Alice")]


def test_share_url_round_trip():
    url = build_share_url("https://example.org/grouper/?old=1", _roster())
    assert url.startswith("https://example.org/grouper/?players=")
    assert "old=1" not in url
    assert [p.id for p in roster_from_url(url)] == ["a", "b"]


def test_url_without_roster():
    assert roster_from_url("https://example.org/grouper/") == []

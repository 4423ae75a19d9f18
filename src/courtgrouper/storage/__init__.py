"""Roster storage and share links."""

from courtgrouper.storage.roster_store import (
    default_roster_path,
    load_roster,
    participants_from_payload,
    save_roster,
)
from courtgrouper.storage.share_link import (
    build_share_url,
    decode_roster,
    encode_roster,
    roster_from_url,
)

__all__ = [
    "default_roster_path",
    "load_roster",
    "save_roster",
    "participants_from_payload",
    "encode_roster",
    "decode_roster",
    "build_share_url",
    "roster_from_url",
]

"""Encode a roster into a shareable link and back."""

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

import base64
import json
from typing import List, Sequence
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from courtgrouper.constants import SHARE_QUERY_PARAM
from courtgrouper.models.participant import Participant
from courtgrouper.storage.roster_store import participants_from_payload
from courtgrouper.utils import setup_logger

logger = setup_logger(__name__)


def encode_roster(participants: Sequence[Participant]) -> str:
    """Encode participants as base64 of their JSON ``{id, name}`` list."""
    payload = json.dumps([p.to_dict() for p in participants], ensure_ascii=False)
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_roster(token: str) -> List[Participant]:
    """Decode a share token.

    Invalid base64, invalid JSON and non-list payloads give an empty
    roster; entries without a string ``id`` and ``name`` are dropped.
    """
    try:
        payload = json.loads(base64.b64decode(token, validate=True).decode("utf-8"))
    except ValueError as e:
        logger.warning(f"Ignoring invalid share token: {e}")
        return []
    return participants_from_payload(payload)


def build_share_url(base_url: str, participants: Sequence[Participant]) -> str:
    """Return ``base_url`` with its query replaced by the encoded roster."""
    scheme, netloc, path, _query, fragment = urlsplit(base_url)
    query = urlencode({SHARE_QUERY_PARAM: encode_roster(participants)})
    return urlunsplit((scheme, netloc, path, query, fragment))


def roster_from_url(url: str) -> List[Participant]:
    """Read the roster carried by a share link, ``[]`` if it has none."""
    values = parse_qs(urlsplit(url).query).get(SHARE_QUERY_PARAM)
    if not values:
        return []
    return decode_roster(values[0])

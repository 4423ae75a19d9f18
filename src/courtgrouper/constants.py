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

# --- Constants ---
APP_NAME = "Court Grouper"
APP_SLUG = "court-grouper"
SAVE_FILE_EXTENSION = ".json"
ROSTER_FILE_NAME = f"players{SAVE_FILE_EXTENSION}"
LOG_FILE_NAME = f"{APP_SLUG}.log"

# Environment variable overriding the console log level (e.g. "DEBUG")
LOG_LEVEL_ENV = "COURT_GROUPER_LOG_LEVEL"

# Roster bounds for two courts
MIN_ROSTER_SIZE = 4
MAX_ROSTER_SIZE = 8
MAX_NAME_LENGTH = 30

# Side sizes per roster size:
# (court1.side1, court1.side2, court2.side1, court2.side2)
COURT_FORMATS = {
    4: (1, 1, 1, 1),  # 1v1 + 1v1
    5: (1, 2, 1, 1),  # 1v2 + 1v1
    6: (2, 2, 1, 1),  # 2v2 + 1v1
    7: (2, 2, 2, 1),  # 2v2 + 2v1
    8: (2, 2, 2, 2),  # 2v2 + 2v2
}

# Fairness tiers, highest priority first
SINGLE_WEIGHT = 1000.0  # repeat singles play
PARTNER_WEIGHT = 100.0  # repeat partnerships
OPPONENT_WEIGHT = 10.0  # repeat opponents

# Share links
SHARE_QUERY_PARAM = "players"
DEFAULT_SHARE_BASE_URL = "http://localhost:8000/"

# Participant id prefix used by generate_id
PARTICIPANT_ID_PREFIX = "p_"

"""Utility function used in Court Grouper."""

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


import os
import random
import sys
import tempfile
import time
from pathlib import Path

from courtgrouper.constants import APP_NAME, APP_SLUG, PARTICIPANT_ID_PREFIX


# --- Utility Functions ---
def generate_id(prefix: str = PARTICIPANT_ID_PREFIX) -> str:
    """Generate a simple unique ID."""
    return f"{prefix}{random.randint(100000, 999999)}_{time.time_ns() // 1_000_000}"


def app_data_dir() -> str:
    """Return the per-user folder for Court Grouper data.

    Uses ``%APPDATA%\\Court Grouper`` on Windows, otherwise
    ``$XDG_DATA_HOME/court-grouper`` (``~/.local/share`` when unset).
    Falls back to the temp location when no home folder can be found.
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return os.path.join(appdata, APP_NAME)
    else:
        xdg = os.environ.get("XDG_DATA_HOME")
        if xdg:
            return os.path.join(xdg, APP_SLUG)
        try:
            return str(Path.home() / ".local" / "share" / APP_SLUG)
        except RuntimeError:
            pass
    return os.path.join(tempfile.gettempdir(), APP_SLUG)

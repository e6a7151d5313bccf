# Sports Meet
# Copyright (C) 2025  Sports Meet developers
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
SAVE_FILE_EXTENSION = ".json"
DEFAULT_DATA_FILE = f"sportsmeet{SAVE_FILE_EXTENSION}"
DEFAULT_EVENT_NAME = "Annual Sports Meet"

# Environment variable read by setup_logger
LOG_LEVEL_ENV_VAR = "SPORTSMEET_LOG_LEVEL"

# Categories (age bands derived from class/grade)
CATEGORY_JUNIORS = "Juniors (4-5)"
CATEGORY_MIDDLE = "Middle (6-7)"
CATEGORY_SENIORS = "Seniors (8-10)"
CATEGORY_UNKNOWN = "Unknown"

# (category name, lowest grade, highest grade), both bounds inclusive
DEFAULT_CATEGORY_BANDS = [
    (CATEGORY_JUNIORS, 4, 5),
    (CATEGORY_MIDDLE, 6, 7),
    (CATEGORY_SENIORS, 8, 10),
]

# Gender groups
GENDER_BOYS = "Boys"
GENDER_GIRLS = "Girls"
DEFAULT_GENDER_GROUPS = [GENDER_BOYS, GENDER_GIRLS]

# Separator between category and gender in a category group key
CATEGORY_GROUP_SEPARATOR = " - "

# Registration limits
MAX_SPORTS_PER_PARTICIPANT = 3

# Match sizing
DEFAULT_PLAYERS_PER_MATCH = 2
MIN_PLAYERS_PER_MATCH = 2
TEAM_MATCH_SIZE = 4  # 2 vs 2

# Match status values
STATUS_SCHEDULED = "scheduled"
STATUS_FINISHED = "finished"
MATCH_STATUSES = (STATUS_SCHEDULED, STATUS_FINISHED)

# Participation status values (per participant and sport)
PARTICIPATION_NOT_PLAYED = "not-played"
PARTICIPATION_PLAYING = "playing"
PARTICIPATION_PLAYED = "played"

# Auto-schedule no-op reasons
NOOP_NO_SPORT = "no sport selected"
NOOP_NO_PAIRINGS = "not enough eligible participants to form a new match"

# Default sports catalog: (name, players per match, fixed size)
DEFAULT_SPORTS = [
    ("Badminton", DEFAULT_PLAYERS_PER_MATCH, False),
    ("Chess", DEFAULT_PLAYERS_PER_MATCH, False),
    ("Table Tennis", DEFAULT_PLAYERS_PER_MATCH, False),
    ("Carrom", DEFAULT_PLAYERS_PER_MATCH, False),
    ("Carrom (2vs2)", TEAM_MATCH_SIZE, True),
    ("100m Race", DEFAULT_PLAYERS_PER_MATCH, False),
    ("Football", DEFAULT_PLAYERS_PER_MATCH, False),
    ("Basketball", DEFAULT_PLAYERS_PER_MATCH, False),
]

# Number of finished matches shown as "recent results"
RECENT_RESULTS_LIMIT = 4

# Esports Season
# Copyright (C) 2025  Esports Season developers
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

from pathlib import Path

# --- Constants ---
CSV_DELIMITER = ","
CSV_ENCODING = "utf-8"

# Season shape
SEASON_LENGTH = 15  # Matches per competitor
TITLES_PER_MATCH = 3
MIN_ROUNDS = 1
MAX_ROUNDS = 10

# Skill multiplier: 1.0 + min(experience, EXPERIENCE_CAP) * EXPERIENCE_STEP
EXPERIENCE_CAP = 10
EXPERIENCE_STEP = 0.02

# Bonus table, checked top-down against raw points
BONUS_TIERS = (
    (600, 100),
    (400, 50),
    (200, 25),
)
BASE_BONUS = 10  # raw below the lowest tier (including 0)

# Medal thresholds on season total points
GOLD_THRESHOLD = 2000
SILVER_THRESHOLD = 1200
BRONZE_THRESHOLD = 700

# Bundled sample data
RESOURCES_DIR = Path(__file__).resolve().parent / "resources"
DEFAULT_GAMES_FILE = RESOURCES_DIR / "games.csv"
DEFAULT_GAMERS_FILE = RESOURCES_DIR / "gamers.csv"

# Environment variable holding an optional JSON config path
CONFIG_ENV_VAR = "ESPORTS_SEASON_CONFIG"

DEFAULT_SEASON_NAME = "Esports Season"

# Query labels, in report order
QUERY_TITLES = {
    1: "Highest-Scoring Match",
    2: "Lowest-Scoring Match & Most Contributing Game",
    3: "Match with the Lowest Bonus Points",
    4: "Highest-Scoring Gamer",
    5: "Total Tournament Points",
    6: "Medal Distribution",
}

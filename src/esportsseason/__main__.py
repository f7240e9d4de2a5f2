"""Run one season with the bundled data and print the query report.

Set ESPORTS_SEASON_CONFIG to a JSON config file to use other inputs.
"""

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

import os
import sys

from esportsseason.app import run_season
from esportsseason.constants import CONFIG_ENV_VAR
from esportsseason.exceptions import EsportsSeasonException
from esportsseason.reporting import render_report
from esportsseason.season import SeasonConfig
from esportsseason.utils import setup_logger

logger = setup_logger(__name__)


def main() -> int:
    config_path = os.environ.get(CONFIG_ENV_VAR)
    try:
        config = SeasonConfig.from_file(config_path) if config_path else SeasonConfig()
        outcome = run_season(config)
    except EsportsSeasonException as e:
        logger.error("%s", e)
        return 1

    print(render_report(outcome.report))
    return 0


if __name__ == "__main__":
    sys.exit(main())

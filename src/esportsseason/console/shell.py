"""Interactive season console.

Type commands at the prompt to simulate seasons and inspect the results.
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
from dataclasses import dataclass, replace
from typing import Callable, Dict, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from esportsseason.app import SeasonOutcome, run_season
from esportsseason.constants import CONFIG_ENV_VAR, QUERY_TITLES
from esportsseason.exceptions import EsportsSeasonException
from esportsseason.reporting import render_query, render_report, render_standings
from esportsseason.season import SeasonConfig
from esportsseason.utils import setup_logger

logger = setup_logger(__name__)


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


# Command definitions with their arguments
COMMANDS = {
    "simulate": {
        "description": "Simulate a new season",
        "options": {"<seed>": "Optional integer seed for reproducible results"},
    },
    "query": {
        "description": "Show one query result",
        "options": {str(n): title for n, title in QUERY_TITLES.items()},
    },
    "report": {"description": "Show all six query results", "options": {}},
    "standings": {"description": "Show the season table", "options": {}},
    "help": {
        "description": "Show help for a specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the console", "options": {}},
}

EXIT_WORDS = ("exit", "quit", "q")


@dataclass
class ConsoleState:
    """What the console remembers between commands."""

    config: SeasonConfig
    outcome: Optional[SeasonOutcome] = None


@dataclass
class CommandResult:
    output: str
    keep_running: bool = True


def print_banner() -> None:
    """Print the console banner."""
    print(
        f"""
{Colors.OKBLUE}+---------------------------------------------------------------+
|                                                               |
|                  ESPORTS SEASON - CONSOLE                     |
|                                                               |
+---------------------------------------------------------------+{Colors.ENDC}

Type {Colors.BOLD}help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave
"""
    )


def commands_list() -> str:
    lines = ["Available Commands:", ""]
    for cmd, info in COMMANDS.items():
        lines.append(f"  {cmd:15} - {info['description']}")
    return "\n".join(lines)


def command_help(command: str) -> str:
    if command not in COMMANDS:
        return f"Unknown command: {command}\n\n{commands_list()}"

    info = COMMANDS[command]
    lines = [f"Command: {command}", f"Description: {info['description']}"]
    if info["options"]:
        lines.append("Arguments:")
        for option, description in info["options"].items():
            lines.append(f"  {option:20} {description}")
    return "\n".join(lines)


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for the console."""
    completions = {}
    for cmd, info in COMMANDS.items():
        words = [o for o in info["options"] if not o.startswith("<")]
        completions[cmd] = WordCompleter(words) if words else None
    if "help" in completions:
        completions["help"] = WordCompleter(list(COMMANDS))
    return NestedCompleter.from_nested_dict(completions)


def _require_outcome(state: ConsoleState) -> Optional[str]:
    if state.outcome is None:
        return "No season simulated yet. Run 'simulate' first."
    return None


def _cmd_simulate(state: ConsoleState, args: List[str]) -> CommandResult:
    config = state.config
    if args:
        try:
            config = replace(config, seed=int(args[0]))
        except ValueError:
            return CommandResult(f"Seed must be an integer, got '{args[0]}'")

    try:
        state.outcome = run_season(config)
    except EsportsSeasonException as e:
        logger.error("Simulation failed: %s", e)
        return CommandResult(f"Simulation failed: {e}")

    simulator = state.outcome.simulator
    return CommandResult(
        f"Simulated {simulator.season_length} matches for "
        f"{simulator.number_of_competitors} competitors"
        + (f" (seed {config.seed})" if config.seed is not None else "")
    )


def _cmd_query(state: ConsoleState, args: List[str]) -> CommandResult:
    missing = _require_outcome(state)
    if missing:
        return CommandResult(missing)
    if not args or not args[0].isdigit() or int(args[0]) not in QUERY_TITLES:
        return CommandResult(command_help("query"))
    return CommandResult(render_query(state.outcome.report, int(args[0])))


def _cmd_report(state: ConsoleState, args: List[str]) -> CommandResult:
    missing = _require_outcome(state)
    if missing:
        return CommandResult(missing)
    return CommandResult(render_report(state.outcome.report))


def _cmd_standings(state: ConsoleState, args: List[str]) -> CommandResult:
    missing = _require_outcome(state)
    if missing:
        return CommandResult(missing)
    return CommandResult(render_standings(state.outcome.aggregator.get_season_records()))


def _cmd_help(state: ConsoleState, args: List[str]) -> CommandResult:
    if args:
        return CommandResult(command_help(args[0]))
    return CommandResult(commands_list())


HANDLERS: Dict[str, Callable[[ConsoleState, List[str]], CommandResult]] = {
    "simulate": _cmd_simulate,
    "query": _cmd_query,
    "report": _cmd_report,
    "standings": _cmd_standings,
    "help": _cmd_help,
}


def execute_command(state: ConsoleState, user_input: str) -> CommandResult:
    """Parse and run one line typed at the prompt."""
    parts = user_input.strip().split()
    if not parts:
        return CommandResult("")

    command = parts[0].lstrip("/").lower()
    if command in EXIT_WORDS:
        return CommandResult("Goodbye!", keep_running=False)
    if command == "?":
        command = "help"

    handler = HANDLERS.get(command)
    if handler is None:
        return CommandResult(f"Unknown command: {command}\n\n{commands_list()}")
    return handler(state, parts[1:])


def load_config() -> SeasonConfig:
    """Config from ESPORTS_SEASON_CONFIG, or the defaults."""
    config_path = os.environ.get(CONFIG_ENV_VAR)
    return SeasonConfig.from_file(config_path) if config_path else SeasonConfig()


def run_interactive_mode() -> int:
    """Run the console until the user exits."""
    try:
        state = ConsoleState(config=load_config())
    except EsportsSeasonException as e:
        logger.error("%s", e)
        return 1

    print_banner()
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )

    while True:
        try:
            user_input = session.prompt("season> ")
        except KeyboardInterrupt:
            continue
        except EOFError:
            break

        result = execute_command(state, user_input)
        if result.output:
            print(result.output)
        if not result.keep_running:
            break

    return 0

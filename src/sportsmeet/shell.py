"""Interactive shell for Sports Meet.

Runs the same commands as the command-line interface against one loaded
event, with tab completion and history.
"""

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

import argparse
import shlex
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory

from sportsmeet.cli import COMMAND_HANDLERS, Colors, add_command_parsers, execute_command
from sportsmeet.event import SportsEvent
from sportsmeet.storage import EventStore
from sportsmeet.utils import setup_logger

logger = setup_logger(__name__)

EXIT_COMMANDS = ("exit", "quit")


class ShellArgumentParser(argparse.ArgumentParser):
    """Argument parser that raises instead of exiting the process."""

    def error(self, message):
        raise ValueError(message)

    def exit(self, status=0, message=None):
        if message:
            print(message, end="")
        raise ValueError("")


def build_shell_parser() -> argparse.ArgumentParser:
    parser = ShellArgumentParser(prog="", add_help=False)
    subparsers = parser.add_subparsers(
        dest="command", required=True, parser_class=ShellArgumentParser
    )
    add_command_parsers(subparsers)
    return parser


def create_completer(event: SportsEvent) -> NestedCompleter:
    """Complete command names, then sport names where a sport comes first."""
    sports = WordCompleter(event.config.sport_names, sentence=True)
    completions = {cmd: None for cmd in COMMAND_HANDLERS}
    for cmd in ("eligible", "schedule", "auto", "set-size"):
        completions[cmd] = sports
    completions["help"] = WordCompleter(list(COMMAND_HANDLERS))
    for cmd in EXIT_COMMANDS:
        completions[cmd] = None
    return NestedCompleter.from_nested_dict(completions)


def print_commands_list() -> None:
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd in COMMAND_HANDLERS:
        print(f"  {Colors.OKGREEN}{cmd}{Colors.ENDC}")
    print(f"\nType {Colors.BOLD}help <command>{Colors.ENDC} for options.\n")


def handle_line(
    event: SportsEvent,
    store: Optional[EventStore],
    parser: argparse.ArgumentParser,
    line: str,
) -> Optional[int]:
    """Run one shell line. Returns None when the shell should exit."""
    try:
        tokens: List[str] = shlex.split(line)
    except ValueError as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1

    if not tokens:
        return 0
    command = tokens[0].lstrip("/")
    if command in EXIT_COMMANDS:
        return None
    if command == "help":
        if len(tokens) > 1:
            tokens = [tokens[1].lstrip("/"), "--help"]
        else:
            print_commands_list()
            return 0
    else:
        tokens[0] = command

    try:
        args = parser.parse_args(tokens)
    except ValueError as e:
        if str(e):
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        return 1
    return execute_command(event, store, args)


def run_shell(event: SportsEvent, store: Optional[EventStore]) -> int:
    """Run the interactive loop until exit, quit, Ctrl-D."""
    parser = build_shell_parser()
    session = PromptSession(
        history=InMemoryHistory(), completer=create_completer(event)
    )
    print(f"{Colors.OKBLUE}{event.name}{Colors.ENDC} - type help for commands")

    while True:
        try:
            line = session.prompt("sportsmeet> ")
        except KeyboardInterrupt:
            continue
        except EOFError:
            break
        if handle_line(event, store, parser, line) is None:
            break

    logger.debug("Shell closed")
    return 0

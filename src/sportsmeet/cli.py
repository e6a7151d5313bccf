"""Command-line interface for running a sports meet.

Every command loads the event from the data file, runs one operation and,
if the operation changed anything, writes the whole event back.
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
import random
import sys
from typing import Callable, Dict, List, Optional, Tuple

from sportsmeet.constants import DEFAULT_DATA_FILE, MATCH_STATUSES
from sportsmeet.event import SportsEvent
from sportsmeet.exceptions import SportsMeetException
from sportsmeet.storage import EventStore, load_config
from sportsmeet.utils import set_log_level, setup_logger

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


def _names(event: SportsEvent, participant_ids) -> str:
    names = []
    for pid in participant_ids:
        participant = event.participants.get(pid)
        names.append(f"{participant.name} ({pid})" if participant else pid)
    return ", ".join(names)


# ========== Participant Commands ==========


def run_register_command(event: SportsEvent, args: argparse.Namespace) -> int:
    participant = event.register_participant(
        args.name, args.grade, args.gender, args.sport, participant_id=args.id
    )
    print(
        f"{Colors.OKGREEN}Registered {participant.name}{Colors.ENDC} "
        f"[{participant.id}] {participant.category} / {participant.gender_group}: "
        f"{', '.join(participant.sports)}"
    )
    return 0


def run_update_command(event: SportsEvent, args: argparse.Namespace) -> int:
    participant = event.update_participant(
        args.participant_id,
        name=args.name,
        grade=args.grade,
        gender_group=args.gender,
        sports=args.sport,
    )
    print(f"{Colors.OKGREEN}Updated {participant.name}{Colors.ENDC} [{participant.id}]")
    return 0


def run_remove_participant_command(event: SportsEvent, args: argparse.Namespace) -> int:
    participant = event.remove_participant(args.participant_id)
    print(f"{Colors.WARNING}Removed {participant.name}{Colors.ENDC} and their matches")
    return 0


def run_participants_command(event: SportsEvent, args: argparse.Namespace) -> int:
    participants = event.filter_participants(
        category=args.category,
        gender_group=args.gender,
        grade=args.grade,
        sport=args.sport,
    )
    print(f"\n{Colors.BOLD}Found {len(participants)} participant(s){Colors.ENDC}")
    for p in participants:
        statuses = event.sport_statuses(p.id)
        sports = ", ".join(f"{sport} [{status}]" for sport, status in statuses.items())
        print(
            f"  {p.id:40} {p.name:24} class {p.grade:<3} "
            f"{p.category} / {p.gender_group}: {sports}"
        )
    return 0


# ========== Sport Commands ==========


def run_sports_command(event: SportsEvent, args: argparse.Namespace) -> int:
    print(f"\n{Colors.BOLD}Sports:{Colors.ENDC}")
    for sport in event.sports:
        kind = "team" if sport.is_team_sport else "individual"
        fixed = ", fixed size" if sport.is_fixed_size else ""
        print(f"  {sport.name:20} {sport.players_per_match} players ({kind}{fixed})")
    return 0


def run_set_size_command(event: SportsEvent, args: argparse.Namespace) -> int:
    sport = event.set_players_per_match(args.sport, args.players)
    print(f"{Colors.OKGREEN}{sport.name}{Colors.ENDC}: {sport.players_per_match} players")
    return 0


# ========== Scheduling Commands ==========


def run_eligible_command(event: SportsEvent, args: argparse.Namespace) -> int:
    groups = [args.group] if args.group else event.group_keys(args.sport)
    if not groups:
        print(f"{Colors.WARNING}No eligible participants for {args.sport}{Colors.ENDC}")
        return 0

    for group in groups:
        pool = event.pool_for_group(args.sport, group)
        print(f"\n{Colors.BOLD}{group}{Colors.ENDC} ({len(pool)} eligible)")
        for p in pool:
            print(f"  {p.id:40} {p.name}")
    return 0


def run_schedule_command(event: SportsEvent, args: argparse.Namespace) -> int:
    match = event.create_match(args.sport, args.group, args.player_ids)
    print(
        f"{Colors.OKGREEN}Scheduled {match.sport}{Colors.ENDC} [{match.id}] "
        f"{match.category_group}: {_names(event, match.player_ids)}"
    )
    return 0


def run_auto_command(event: SportsEvent, args: argparse.Namespace) -> int:
    previous_shuffle = event.scheduler.shuffle
    if args.seed is not None:
        event.scheduler.shuffle = random.Random(args.seed).shuffle
    try:
        result = event.auto_schedule(args.sport)
    finally:
        event.scheduler.shuffle = previous_shuffle

    if result.is_noop:
        print(f"{Colors.WARNING}Nothing scheduled: {result.reason}{Colors.ENDC}")
        return 0

    print(f"{Colors.OKGREEN}Scheduled {len(result.matches)} match(es){Colors.ENDC}")
    for match in result.matches:
        print(f"  [{match.id}] {match.category_group}: {_names(event, match.player_ids)}")
    if result.leftover_ids:
        print(f"  Unpaired: {_names(event, result.leftover_ids)}")
    return 0


# ========== Match Commands ==========


def run_winner_command(event: SportsEvent, args: argparse.Namespace) -> int:
    selection = args.winner_ids[0] if len(args.winner_ids) == 1 else args.winner_ids
    match = event.declare_winner(args.match_id, selection)
    print(
        f"{Colors.OKGREEN}{match.sport} won by{Colors.ENDC} "
        f"{_names(event, match.winner_ids)}"
    )
    return 0


def run_delete_match_command(event: SportsEvent, args: argparse.Namespace) -> int:
    match = event.delete_match(args.match_id)
    print(f"{Colors.WARNING}Deleted {match.sport} match{Colors.ENDC} [{match.id}]")
    return 0


def run_matches_command(event: SportsEvent, args: argparse.Namespace) -> int:
    matches = event.get_matches(sport=args.sport, status=args.status)
    print(f"\n{Colors.BOLD}{len(matches)} match(es){Colors.ENDC}")
    for match in matches:
        line = (
            f"  [{match.id}] {match.sport} | {match.category_group} | "
            f"{_names(event, match.player_ids)} | {match.status}"
        )
        if match.is_finished:
            line += f" | winner: {_names(event, match.winner_ids)}"
        print(line)
    return 0


# ========== Reporting Commands ==========


def run_status_command(event: SportsEvent, args: argparse.Namespace) -> int:
    participant = event.get_participant(args.participant_id)
    if args.sport:
        statuses = {args.sport: event.status_of(participant.id, args.sport)}
    else:
        statuses = event.sport_statuses(participant.id)
    print(f"\n{Colors.BOLD}{participant.name}{Colors.ENDC}")
    for sport, status in statuses.items():
        print(f"  {sport:20} {status}")
    return 0


def run_stats_command(event: SportsEvent, args: argparse.Namespace) -> int:
    stats = event.dashboard()
    print(f"\n{Colors.BOLD}{event.name}{Colors.ENDC}")
    print(f"  Participants: {stats.total_participants}")
    print(f"  Matches: {stats.total_matches}")
    print(f"  Pending: {stats.matches_pending}")
    print(f"  Finished: {stats.matches_finished}")
    print(f"  Completion: {stats.completion_percentage}%")
    print(f"\n{Colors.BOLD}By category:{Colors.ENDC}")
    for category, count in stats.by_category.items():
        print(f"  {category:20} {count}")
    return 0


def run_results_command(event: SportsEvent, args: argparse.Namespace) -> int:
    results = event.results(limit=args.limit)
    if not results:
        print(f"{Colors.WARNING}No results yet{Colors.ENDC}")
        return 0
    for view in results:
        print(
            f"  {view.sport} | {view.category_group} | "
            f"{Colors.OKGREEN}{' & '.join(view.winner_names)}{Colors.ENDC} beat "
            f"{' & '.join(view.loser_names)}"
        )
    return 0


# name -> (handler, whether it changes the event)
COMMAND_HANDLERS: Dict[
    str, Tuple[Callable[[SportsEvent, argparse.Namespace], int], bool]
] = {
    "register": (run_register_command, True),
    "update": (run_update_command, True),
    "remove-participant": (run_remove_participant_command, True),
    "participants": (run_participants_command, False),
    "sports": (run_sports_command, False),
    "set-size": (run_set_size_command, True),
    "eligible": (run_eligible_command, False),
    "schedule": (run_schedule_command, True),
    "auto": (run_auto_command, True),
    "winner": (run_winner_command, True),
    "delete-match": (run_delete_match_command, True),
    "matches": (run_matches_command, False),
    "status": (run_status_command, False),
    "stats": (run_stats_command, False),
    "results": (run_results_command, False),
}


def add_command_parsers(subparsers) -> None:
    """Register every event command on an argparse subparsers object."""
    p = subparsers.add_parser("register", help="Register a participant")
    p.add_argument("--name", required=True)
    p.add_argument("--grade", required=True, help="Class/grade, e.g. 6")
    p.add_argument("--gender", required=True, help="Gender group, e.g. Boys")
    p.add_argument(
        "--sport", action="append", default=[], help="Sport (repeat, up to 3)"
    )
    p.add_argument("--id", help="Explicit participant id")

    p = subparsers.add_parser("update", help="Edit a participant")
    p.add_argument("participant_id")
    p.add_argument("--name")
    p.add_argument("--grade")
    p.add_argument("--gender")
    p.add_argument("--sport", action="append", help="Replaces all sports (repeat)")

    p = subparsers.add_parser(
        "remove-participant", help="Remove a participant and their matches"
    )
    p.add_argument("participant_id")

    p = subparsers.add_parser("participants", help="List/filter participants")
    p.add_argument("--category")
    p.add_argument("--gender")
    p.add_argument("--grade", type=int)
    p.add_argument("--sport")

    subparsers.add_parser("sports", help="List configured sports")

    p = subparsers.add_parser("set-size", help="Change players per match")
    p.add_argument("sport")
    p.add_argument("players", type=int)

    p = subparsers.add_parser("eligible", help="Show eligible participants")
    p.add_argument("sport")
    p.add_argument("--group", help="Category group, e.g. 'Middle (6-7) - Boys'")

    p = subparsers.add_parser("schedule", help="Create a match manually")
    p.add_argument("sport")
    p.add_argument("group", help="Category group")
    p.add_argument("player_ids", nargs="+")

    p = subparsers.add_parser("auto", help="Auto-schedule all eligible participants")
    p.add_argument("sport")
    p.add_argument("--seed", type=int, help="Random seed for reproducible pairings")

    p = subparsers.add_parser("winner", help="Declare the winner of a match")
    p.add_argument("match_id")
    p.add_argument("winner_ids", nargs="+", help="Winner id, or both ids of a team")

    p = subparsers.add_parser("delete-match", help="Delete a match")
    p.add_argument("match_id")

    p = subparsers.add_parser("matches", help="List matches")
    p.add_argument("--sport")
    p.add_argument("--status", choices=MATCH_STATUSES)

    p = subparsers.add_parser("status", help="Participation status")
    p.add_argument("participant_id")
    p.add_argument("--sport")

    subparsers.add_parser("stats", help="Dashboard statistics")

    p = subparsers.add_parser("results", help="Finished matches, newest first")
    p.add_argument("--limit", type=int)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sportsmeet",
        description="Register participants and schedule matches for a sports meet",
    )
    parser.add_argument(
        "--data",
        default=DEFAULT_DATA_FILE,
        help=f"Event data file (default: {DEFAULT_DATA_FILE})",
    )
    parser.add_argument("--config", help="JSON file with event configuration")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log operations to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    add_command_parsers(subparsers)
    subparsers.add_parser("shell", help="Interactive mode")
    return parser


def execute_command(
    event: SportsEvent, store: Optional[EventStore], args: argparse.Namespace
) -> int:
    """Run one parsed command, saving the event if it changed.

    Errors from the application are reported and turned into exit status 1;
    nothing is saved in that case.
    """
    handler, mutates = COMMAND_HANDLERS[args.command]
    try:
        exit_code = handler(event, args)
        if mutates and exit_code == 0 and store is not None:
            store.save(event)
    except SportsMeetException as e:
        logger.debug(f"Command {args.command} failed: {e}")
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}", file=sys.stderr)
        return 1
    return exit_code


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level("INFO")

    store = EventStore(args.data)
    try:
        config = load_config(args.config) if args.config else None
        event = store.load(config=config)
    except SportsMeetException as e:
        print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}", file=sys.stderr)
        return 1

    if args.command == "shell":
        from sportsmeet.shell import run_shell

        return run_shell(event, store)

    return execute_command(event, store, args)


if __name__ == "__main__":
    sys.exit(main())

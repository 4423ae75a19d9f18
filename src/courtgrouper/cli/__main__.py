"""Command line front end for Court Grouper.

One-shot sub-commands for scripting, and an interactive session with
autocomplete for running an evening of play.
"""

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

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from courtgrouper.constants import MAX_ROSTER_SIZE, MIN_ROSTER_SIZE
from courtgrouper.controllers.session import SessionManager
from courtgrouper.exceptions import CourtGrouperException, ParticipantNotFoundException
from courtgrouper.models.participant import Participant
from courtgrouper.models.session_config import SessionConfig
from courtgrouper.storage import (
    build_share_url,
    decode_roster,
    default_roster_path,
    load_roster,
    roster_from_url,
    save_roster,
)
from courtgrouper.utils import setup_logger
from courtgrouper.utils.print import format_history, format_roster, format_round

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


# Interactive command definitions with their arguments
COMMANDS = {
    "add": {
        "description": "Add a player to the roster",
        "options": {"<name>": "Display name (spaces allowed)"},
    },
    "remove": {
        "description": "Remove a player from the roster",
        "options": {"<player>": "Roster number, id or exact name"},
    },
    "toggle": {
        "description": "Sit a player out, or bring them back",
        "options": {"<player>": "Roster number, id or exact name"},
    },
    "players": {"description": "List the roster", "options": {}},
    "next": {"description": "Generate the next round", "options": {}},
    "undo": {"description": "Take back the last round", "options": {}},
    "reset": {"description": "Start a new session (forget all rounds)", "options": {}},
    "history": {"description": "Show the fairness ledger", "options": {}},
    "share": {"description": "Print a link that carries the roster", "options": {}},
    "import": {
        "description": "Replace the roster from a share link or token",
        "options": {"<link>": "Share link or bare token"},
    },
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}╔═══════════════════════════════════════════════════════════════╗
║                                                               ║
║                  COURT GROUPER - 2 courts                     ║
║                                                               ║
║               [4-8 players, fair matchups]                    ║
║                                                               ║
╚═══════════════════════════════════════════════════════════════╝{Colors.ENDC}

Type {Colors.BOLD}/help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave interactive mode
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer(manager: Optional[SessionManager] = None) -> NestedCompleter:
    """Create autocomplete completer for interactive mode.

    Commands complete with and without a leading "/". Commands that take a
    player complete the current roster names.
    """
    names = [p.name for p in manager.participants] if manager else []
    completions = {}
    for cmd in COMMANDS:
        if cmd in ("remove", "toggle"):
            options_completer = WordCompleter(names) if names else None
        elif cmd == "help":
            options_completer = WordCompleter(list(COMMANDS.keys()))
        else:
            options_completer = None
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/list"] = None

    return NestedCompleter.from_nested_dict(completions)


def load_session_config(config_path: Optional[str], seed: Optional[int] = None) -> SessionConfig:
    """Load the session config file, if any, and apply a seed override."""
    config = SessionConfig.from_file(config_path) if config_path else SessionConfig()
    if seed is not None:
        config.seed = seed
    return config


def resolve_roster_path(
    roster_arg: Optional[str], config: Optional[SessionConfig] = None
) -> Path:
    """Roster file from the command line, the config, or the default."""
    if roster_arg:
        return Path(roster_arg)
    if config is not None and config.roster_path:
        return Path(config.roster_path)
    return default_roster_path()


def resolve_participant(manager: SessionManager, token: str) -> Participant:
    """Find a participant by roster number, id or exact name.

    Raises:
        ParticipantNotFoundException: If nothing matches
    """
    token = token.strip()
    if token.isdigit():
        index = int(token)
        if 1 <= index <= len(manager.participants):
            return manager.participants[index - 1]
    for participant in manager.participants:
        if participant.id == token:
            return participant
    for participant in manager.participants:
        if participant.name == token:
            return participant
    raise ParticipantNotFoundException(f"No player matches '{token}'")


def participants_from_link(value: str) -> List[Participant]:
    """Participants from a full share link or a bare token."""
    if "://" in value or "?" in value:
        return roster_from_url(value)
    return decode_roster(value)


def _guidance(manager: SessionManager) -> str:
    return (
        f"Select {MIN_ROSTER_SIZE}-{MAX_ROSTER_SIZE} players "
        f"({manager.active_count} selected)"
    )


def run_rounds_command(args: argparse.Namespace) -> int:
    """Generate and print consecutive rounds."""
    config = load_session_config(args.config, args.seed)
    if args.players:
        participants = [Participant.create(name) for name in args.players]
    else:
        participants = load_roster(resolve_roster_path(args.roster, config))

    manager = SessionManager(participants, config)
    if not manager.can_generate:
        print(f"{Colors.FAIL}Error: {_guidance(manager)}{Colors.ENDC}")
        return 1

    for _ in range(args.count):
        round_ = manager.create_next_round()
        print(format_round(round_, manager.current_round_number))
        print()

    if args.show_history:
        print(format_history(manager.history, manager.participants))
    return 0


def run_share_command(args: argparse.Namespace) -> int:
    """Print a share link for the stored roster."""
    config = load_session_config(args.config)
    path = resolve_roster_path(args.roster, config)
    participants = load_roster(path)
    if not participants:
        print(f"{Colors.FAIL}Error: no players stored in {path}{Colors.ENDC}")
        return 1
    print(build_share_url(args.base_url or config.share_base_url, participants))
    return 0


def run_import_command(args: argparse.Namespace) -> int:
    """Store the roster carried by a share link."""
    config = load_session_config(args.config)
    participants = participants_from_link(args.link)
    if not participants:
        print(f"{Colors.FAIL}Error: the link does not carry any players{Colors.ENDC}")
        return 1
    path = save_roster(resolve_roster_path(args.roster, config), participants)
    print(f"{Colors.OKGREEN}Imported {len(participants)} players to {path}{Colors.ENDC}")
    return 0


def handle_interactive_command(
    manager: SessionManager, user_input: str, roster_path: Path
) -> bool:
    """Execute one interactive command line.

    Returns:
        False when the session should end, True otherwise
    """
    parts = user_input.strip().split()
    if not parts:
        return True

    # Strip leading "/" if present (support both "/command" and "command")
    command, args_list = parts[0].lstrip("/"), parts[1:]
    argument = " ".join(args_list)

    if command in ("exit", "quit", "q"):
        print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
        return False

    if command in ("help", "?", "list"):
        if args_list:
            print_command_help(args_list[0].lstrip("/"))
        else:
            print_commands_list()
        return True

    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print(f"Type {Colors.BOLD}/help{Colors.ENDC} to see available commands")
        return True

    if command == "add":
        participant = manager.add_participant(argument)
        save_roster(roster_path, manager.participants)
        print(f"Added {participant.name}")
    elif command == "remove":
        participant = manager.remove_participant(
            resolve_participant(manager, argument).id
        )
        save_roster(roster_path, manager.participants)
        print(f"Removed {participant.name}")
    elif command == "toggle":
        participant = resolve_participant(manager, argument)
        state = "in" if manager.toggle_participant(participant.id) else "out"
        print(f"{participant.name} is {state}")
    elif command == "players":
        print(format_roster(manager.participants, manager.active_ids))
        print(f"{manager.active_count} active")
    elif command == "next":
        if not manager.can_generate:
            print(f"{Colors.WARNING}{_guidance(manager)}{Colors.ENDC}")
        else:
            round_ = manager.create_next_round()
            print(format_round(round_, manager.current_round_number))
    elif command == "undo":
        if manager.undo_last_round():
            print(f"Back to round {manager.current_round_number}")
        else:
            print(f"{Colors.WARNING}Nothing to undo{Colors.ENDC}")
    elif command == "reset":
        manager.reset()
        print("Session reset")
    elif command == "history":
        print(format_history(manager.history, manager.participants))
    elif command == "share":
        print(build_share_url(manager.config.share_base_url, manager.participants))
    elif command == "import":
        participants = participants_from_link(argument)
        if not participants:
            print(f"{Colors.FAIL}The link does not carry any players{Colors.ENDC}")
        else:
            manager.replace_roster(participants)
            save_roster(roster_path, manager.participants)
            print(f"Imported {len(manager.participants)} players")
    return True


def run_interactive_mode(args: argparse.Namespace) -> int:
    """Run in interactive mode with autocomplete."""
    config = load_session_config(args.config, args.seed)
    roster_path = resolve_roster_path(args.roster, config)
    manager = SessionManager(load_roster(roster_path), config)

    print_banner()
    print(format_roster(manager.participants, manager.active_ids))

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )
    session = PromptSession(history=InMemoryHistory(), style=style)

    while True:
        try:
            # Rebuilt each time so player names stay current
            user_input = session.prompt(
                "court-grouper> ", completer=create_completer(manager)
            )
            if not handle_interactive_command(manager, user_input, roster_path):
                break
        except CourtGrouperException as e:
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break
        except Exception as e:
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
            logger.exception("Command execution failed")
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Session config file (JSON)")
    parser.add_argument("--roster", help="Roster file (JSON)")


def create_interactive_parser():
    """Create parser for interactive mode."""
    parser = argparse.ArgumentParser(
        prog="court-grouper -i", description="Interactive session"
    )
    _add_common_arguments(parser)
    parser.add_argument("--seed", type=int, help="Random seed")
    return parser


def create_main_parser():
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="court-grouper",
        description="Fair groupings of 4-8 players over two courts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  court-grouper

  # Three rounds for six players
  court-grouper rounds --players Ann Bob Cat Dan Eve Fay --count 3

  # Share the stored roster
  court-grouper share --base-url https://example.org/grouper/

  # Store a shared roster
  court-grouper import 'https://example.org/grouper/?players=...'
        """,
    )

    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    rounds_parser = subparsers.add_parser("rounds", help="Print consecutive rounds")
    _add_common_arguments(rounds_parser)
    rounds_parser.add_argument(
        "--players", nargs="+", help="Player names (default: stored roster)"
    )
    rounds_parser.add_argument("--count", type=int, default=1, help="Number of rounds")
    rounds_parser.add_argument("--seed", type=int, help="Random seed")
    rounds_parser.add_argument(
        "--show-history", action="store_true", help="Print the ledger afterwards"
    )
    rounds_parser.set_defaults(func=run_rounds_command)

    share_parser = subparsers.add_parser("share", help="Print a roster share link")
    _add_common_arguments(share_parser)
    share_parser.add_argument("--base-url", help="Link base URL")
    share_parser.set_defaults(func=run_share_command)

    import_parser = subparsers.add_parser("import", help="Store a shared roster")
    _add_common_arguments(import_parser)
    import_parser.add_argument("link", help="Share link or bare token")
    import_parser.set_defaults(func=run_import_command)

    return parser


def run_standard_mode(argv: List[str]) -> int:
    """Run in standard CLI mode (non-interactive)."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        return run_interactive_mode(create_interactive_parser().parse_args([]))

    if hasattr(args, "func"):
        try:
            return args.func(args)
        except CourtGrouperException as e:
            print(f"{Colors.FAIL}Error: {e}{Colors.ENDC}")
            return 1
    parser.print_help()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the court-grouper CLI."""
    argv = sys.argv[1:] if argv is None else argv

    # No arguments, or a leading interactive flag, starts interactive mode
    if not argv or argv[0] in ("--interactive", "-i"):
        args = create_interactive_parser().parse_args(argv[1:])
        return run_interactive_mode(args)

    return run_standard_mode(argv)


if __name__ == "__main__":
    sys.exit(main())

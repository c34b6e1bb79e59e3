"""CLI argument parser and session startup for todoban."""

import argparse
import logging
import os
import sys

from todoban import __version__
from todoban.cli.menu import run_menu
from todoban.config import load_config, parse_log_level
from todoban.console import ConsoleIO, make_console
from todoban.manager import BoardManager
from todoban.model.board import seed_board

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="todoban",
        description="Interactive in-memory kanban board",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--empty",
        dest="seed_cards",
        action="store_false",
        default=None,
        help="Start without the sample cards",
    )
    parser.add_argument(
        "--no-pause",
        dest="pause",
        action="store_false",
        default=None,
        help="Don't wait for Enter after each command",
    )
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=None,
        help="Plain, unstyled output",
    )
    parser.add_argument("--log-level", dest="log_level", help="Logging level (default: WARNING)")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="More logging (-v info, -vv debug)",
    )
    return parser


def resolve_settings(args: argparse.Namespace, environ=None) -> dict:
    """Merge environment config with command-line overrides."""
    config = load_config(os.environ if environ is None else environ)
    for key in ("seed_cards", "pause", "color"):
        value = getattr(args, key, None)
        if value is not None:
            config[key] = value
    if args.log_level:
        config["log_level"] = parse_log_level(args.log_level, source="--log-level")
    if args.verbose:
        config["log_level"] = "DEBUG" if args.verbose > 1 else "INFO"
    return config


def run(args: argparse.Namespace, io: ConsoleIO | None = None, environ=None) -> int:
    """Start a session and run the menu until the user exits."""
    config = resolve_settings(args, environ)

    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
        level=config["log_level"],
    )

    board = seed_board(seed_cards=config["seed_cards"])
    logger.info("session started with %d cards, %d team members", len(board.store), len(board.roster))

    if io is None:
        io = ConsoleIO(make_console(color=config["color"]))
    return run_menu(BoardManager(board, io), io, pause=config["pause"])

"""Main entry point for nmclean."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__
from .config import VALID_LOG_LEVELS, CleanConfig, ConfigError
from .controller import CleanupController
from .errors import NmcleanError
from .prompts import NonInteractivePrompter, Prompter, TerminalPrompter


def _non_negative_int(value: str) -> int:
    """Argparse type for --max-depth."""
    try:
        number = int(value)
    except ValueError:
        msg = f"invalid int value: {value!r}"
        raise argparse.ArgumentTypeError(msg) from None
    if number < 0:
        msg = f"must be non-negative, got {number}"
        raise argparse.ArgumentTypeError(msg)
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="nmclean",
        description="Find and remove node_modules directories",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        default=None,
        help="Logging level (default: $NMCLEAN_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write a debug log to this file",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Options shared by both commands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--root",
        type=Path,
        default=Path("."),
        help="Directory to search (default: current directory)",
    )
    common.add_argument(
        "--max-depth",
        type=_non_negative_int,
        default=None,
        help="Maximum depth below root to inspect (default: unbounded)",
    )

    subparsers.add_parser("scan", parents=[common], help="List node_modules directories")

    delete_parser = subparsers.add_parser(
        "delete",
        parents=[common],
        help="Select and delete node_modules directories",
    )
    delete_parser.add_argument(
        "--all",
        action="store_true",
        help="Skip selection UI and delete all found",
    )
    delete_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Preview without deleting",
    )
    delete_parser.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Do not ask for final confirmation",
    )

    return parser


def setup_logging(config: CleanConfig) -> logging.Logger:
    """Set up the nmclean logger.

    Args:
        config: Settings carrying the log level and optional log file.

    Returns:
        Configured logger instance.

    """
    logger = logging.getLogger("nmclean")
    logger.setLevel(logging.DEBUG if config.log_file else config.log_level_value)

    # Clear existing handlers to avoid duplicates when main() runs twice
    if logger.handlers:
        logger.handlers.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
    )
    console_handler.setLevel(config.log_level_value)
    logger.addHandler(console_handler)

    if config.log_file:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


def make_prompter(console: Console) -> Prompter:
    """Pick an interactive prompter when stdin is a terminal."""
    if sys.stdin.isatty():
        return TerminalPrompter(console)
    return NonInteractivePrompter()


def cmd_scan(controller: CleanupController) -> int:
    """Execute scan command.

    Returns:
        Exit code.

    """
    controller.list_matches()
    return 0


def cmd_delete(controller: CleanupController) -> int:
    """Execute delete command.

    Returns:
        Exit code.

    """
    outcome = controller.delete_matches()
    logging.getLogger("nmclean").debug("Delete finished: %s", outcome.value)
    return 0


def main(argv: list[str] | None = None, prompter: Prompter | None = None) -> int:
    """Main entry point.

    Args:
        argv: Arguments to parse instead of ``sys.argv``.
        prompter: Selection and confirmation capability. Chosen from the
            terminal state when omitted.

    Returns:
        Exit code.

    """
    parser = build_parser()
    args = parser.parse_args(argv)
    error_console = Console(stderr=True)

    if args.command is None:
        parser.print_help(sys.stderr)
        return 2

    try:
        config = CleanConfig.from_args(args)
    except ConfigError as e:
        error_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        return 2

    logger = setup_logging(config)
    console = Console()
    controller = CleanupController(config, prompter or make_prompter(console), console)

    try:
        if args.command == "scan":
            return cmd_scan(controller)
        elif args.command == "delete":
            return cmd_delete(controller)
        else:
            error_console.print(f"Unknown command: {args.command}")
            return 2
    except NmcleanError as e:
        logger.debug("Command failed", exc_info=True)
        error_console.print(f"[red]Error: {escape(str(e))}[/red]", soft_wrap=True)
        return 1
    except KeyboardInterrupt:
        error_console.print("[yellow]Interrupted[/yellow]")
        return 130


if __name__ == "__main__":
    sys.exit(main())

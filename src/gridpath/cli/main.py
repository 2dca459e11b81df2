"""Main CLI entry point for gridpath."""

import sys
import argparse
import logging
from typing import List, Optional

from gridpath.search.heuristics import HEURISTICS

from . import commands
from .utils import setup_logging


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='gridpath',
        description='gridpath - minimum-cost path search over 2D grids',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gridpath solve maze.txt                       # Cheapest route, uniform steps
  gridpath solve maze.txt --turn-cost 1000      # Facing-aware walker
  gridpath solve maze.txt --show --all-paths    # Highlight every optimal cell
  gridpath config show                          # Show current configuration
        """
    )

    # Global options
    parser.add_argument(
        '--config', '-c',
        type=str,
        action='append',
        help='Configuration override (e.g., maze.turn_cost=1000); may be repeated'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='count',
        default=0,
        help='Increase verbosity (use -v or -vv)'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress all output except results'
    )

    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output file for results (JSON format)'
    )

    # Subcommands
    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands',
        metavar='COMMAND'
    )

    # Solve command
    solve_parser = subparsers.add_parser(
        'solve',
        help='Solve a maze file',
        description='Find minimum-cost paths through a maze text file'
    )

    solve_parser.add_argument(
        'maze_file',
        type=str,
        help='Path to maze text file'
    )

    solve_parser.add_argument(
        '--turn-cost',
        type=int,
        help='Cost of a 90 degree turn; enables facing-aware movement'
    )

    solve_parser.add_argument(
        '--step-cost',
        type=int,
        help='Cost of a single move (default from config: 1)'
    )

    solve_parser.add_argument(
        '--diagonal',
        action='store_true',
        help='Allow diagonal moves'
    )

    solve_parser.add_argument(
        '--heuristic',
        choices=HEURISTICS,
        help='Heuristic used to order the search (default from config: manhattan)'
    )

    solve_parser.add_argument(
        '--max-nodes',
        type=int,
        help='Stop after expanding this many nodes'
    )

    solve_parser.add_argument(
        '--all-paths',
        action='store_true',
        help='Include every optimal path in the results'
    )

    solve_parser.add_argument(
        '--show',
        action='store_true',
        help='Print the maze with optimal cells highlighted'
    )

    solve_parser.add_argument(
        '--no-color',
        action='store_true',
        help='Mark highlighted cells with a character instead of ANSI colors'
    )

    solve_parser.add_argument(
        '--json',
        action='store_true',
        help='Print results as JSON to stdout'
    )

    # Config command
    config_parser = subparsers.add_parser(
        'config',
        help='Configuration management',
        description='Inspect and validate configuration'
    )

    config_subparsers = config_parser.add_subparsers(
        dest='config_action',
        help='Configuration actions'
    )

    config_subparsers.add_parser(
        'show',
        help='Show current configuration'
    )

    config_subparsers.add_parser(
        'validate',
        help='Validate configuration'
    )

    return parser


def main_cli(args: Optional[List[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        args: Command line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    # Setup logging based on verbosity
    if parsed_args.quiet:
        log_level = logging.ERROR
    elif parsed_args.verbose == 0:
        log_level = logging.WARNING
    elif parsed_args.verbose == 1:
        log_level = logging.INFO
    else:
        log_level = logging.DEBUG

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        if not parsed_args.command:
            parser.print_help()
            return 1

        if parsed_args.command == 'solve':
            return commands.solve_command(parsed_args)
        if parsed_args.command == 'config':
            return commands.config_command(parsed_args)

        logger.error(f"Unknown command: {parsed_args.command}")
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130  # Standard exit code for SIGINT


def main() -> None:
    """Entry point for console script."""
    sys.exit(main_cli())


if __name__ == '__main__':
    main()

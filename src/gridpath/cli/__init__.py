"""Command-line interface for gridpath.

This module provides CLI commands for solving maze files and inspecting
configuration.
"""

from .main import main_cli
from .commands import solve_command, config_command
from .utils import setup_logging, load_maze_from_file, save_results

__all__ = [
    'main_cli',
    'solve_command',
    'config_command',
    'setup_logging',
    'load_maze_from_file',
    'save_results'
]

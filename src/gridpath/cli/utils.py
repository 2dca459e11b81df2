"""CLI utility functions."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from omegaconf import DictConfig

from gridpath.config import default_config, load_config
from gridpath.solver.maze import MazeProblem

logger = logging.getLogger(__name__)


def setup_logging(level: int = logging.INFO,
                  format_string: Optional[str] = None) -> None:
    """Setup logging configuration.

    Args:
        level: Logging level
        format_string: Custom format string
    """
    if format_string is None:
        if level <= logging.DEBUG:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S"
    )


def load_cli_config(overrides: Optional[list] = None) -> DictConfig:
    """Load conf/config.yaml, falling back to built-in defaults.

    The fallback covers installs where the project's conf directory is not
    shipped alongside the package.

    Raises:
        ConfigValidationError: If the resulting configuration is invalid
    """
    try:
        return load_config(overrides=overrides or [])
    except FileNotFoundError as e:
        logger.debug(f"{e}; using built-in defaults")
        return default_config(overrides)


def load_maze_from_file(file_path: Union[str, Path],
                        wall: str = '#',
                        start: str = 'S',
                        end: str = 'E') -> MazeProblem:
    """Load a maze problem from a text file.

    Args:
        file_path: Path to maze text file
        wall: Wall marker
        start: Start marker
        end: End marker

    Returns:
        Parsed MazeProblem

    Raises:
        FileNotFoundError: If file doesn't exist
        MazeFormatError: If the maze is malformed
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Maze file not found: {file_path}")

    text = file_path.read_text()
    return MazeProblem.from_text(text, wall=wall, start=start, end=end)


def save_results(results: Dict[str, Any],
                 output_path: Union[str, Path],
                 pretty: bool = True) -> None:
    """Save results to JSON file.

    Args:
        results: Results dictionary
        output_path: Output file path
        pretty: Whether to pretty-print JSON
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Convert numpy scalars and tuples for JSON serialization
    def convert(obj):
        if hasattr(obj, 'tolist'):
            return obj.tolist()
        elif isinstance(obj, dict):
            return {k: convert(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [convert(item) for item in obj]
        else:
            return obj

    serializable_results = convert(results)

    with open(output_path, 'w') as f:
        if pretty:
            json.dump(serializable_results, f, indent=2, sort_keys=True)
        else:
            json.dump(serializable_results, f)


def format_duration(seconds: float) -> str:
    """Format duration in human-readable format.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0.001:
        return f"{seconds*1000000:.1f}µs"
    elif seconds < 1:
        return f"{seconds*1000:.1f}ms"
    elif seconds < 60:
        return f"{seconds:.2f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.1f}s"

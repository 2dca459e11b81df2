"""Configuration validation for gridpath."""

import logging
from typing import List

from omegaconf import DictConfig

from gridpath.render import ANSI_COLORS
from gridpath.search.heuristics import HEURISTICS

logger = logging.getLogger(__name__)


class ConfigValidationError(Exception):
    """Exception raised when configuration validation fails."""
    pass


def validate_config(config: DictConfig) -> None:
    """Validate the complete configuration.

    Args:
        config: Configuration to validate

    Raises:
        ConfigValidationError: If validation fails
    """
    try:
        validate_search_config(config.get('search', {}))
        validate_maze_config(config.get('maze', {}))
        validate_render_config(config.get('render', {}))

        for warning in check_config_consistency(config):
            logger.warning(warning)

        logger.info("Configuration validation passed")

    except Exception as e:
        raise ConfigValidationError(f"Configuration validation failed: {e}")


def validate_search_config(search_config: DictConfig) -> None:
    """Validate search configuration section.

    Args:
        search_config: Search configuration section
    """
    if not search_config:
        return

    heuristic = search_config.get('heuristic', 'manhattan')
    if heuristic not in HEURISTICS:
        raise ConfigValidationError(
            f"search.heuristic must be one of {HEURISTICS}, got {heuristic}"
        )

    max_nodes = search_config.get('max_nodes_expanded', None)
    if max_nodes is not None and (not isinstance(max_nodes, int) or max_nodes <= 0):
        raise ConfigValidationError(
            f"search.max_nodes_expanded must be positive integer or null, got {max_nodes}"
        )

    record_equal = search_config.get('record_equal_parents', True)
    if not isinstance(record_equal, bool):
        raise ConfigValidationError(
            f"search.record_equal_parents must be boolean, got {record_equal}"
        )


def validate_maze_config(maze_config: DictConfig) -> None:
    """Validate maze configuration section.

    Args:
        maze_config: Maze configuration section
    """
    if not maze_config:
        return

    markers = {}
    for key, default in (('wall', '#'), ('start', 'S'), ('end', 'E')):
        marker = maze_config.get(key, default)
        if not isinstance(marker, str) or len(marker) != 1:
            raise ConfigValidationError(
                f"maze.{key} must be a single character, got {marker!r}"
            )
        markers[key] = marker

    if len(set(markers.values())) != len(markers):
        raise ConfigValidationError(
            f"maze markers must be distinct, got {markers}"
        )

    step_cost = maze_config.get('step_cost', 1)
    if not isinstance(step_cost, (int, float)) or step_cost <= 0:
        raise ConfigValidationError(
            f"maze.step_cost must be positive number, got {step_cost}"
        )

    turn_cost = maze_config.get('turn_cost', None)
    if turn_cost is not None and (not isinstance(turn_cost, (int, float)) or turn_cost < 0):
        raise ConfigValidationError(
            f"maze.turn_cost must be non-negative number or null, got {turn_cost}"
        )


def validate_render_config(render_config: DictConfig) -> None:
    """Validate render configuration section.

    Args:
        render_config: Render configuration section
    """
    if not render_config:
        return

    color = render_config.get('color', 'background-cyan')
    if color not in ANSI_COLORS:
        raise ConfigValidationError(
            f"render.color must be one of {sorted(ANSI_COLORS)}, got {color}"
        )


def check_config_consistency(config: DictConfig) -> List[str]:
    """Check configuration consistency and return issues.

    Args:
        config: Configuration to check

    Returns:
        List of consistency issues
    """
    issues = []

    maze_config = config.get('maze', {}) or {}
    search_config = config.get('search', {}) or {}

    if maze_config.get('diagonal', False) and search_config.get('heuristic') == 'manhattan':
        issues.append("manhattan heuristic overestimates with diagonal moves; chebyshev will be used")

    if maze_config.get('diagonal', False) and maze_config.get('turn_cost') is not None:
        issues.append("maze.diagonal is ignored when maze.turn_cost is set")

    return issues

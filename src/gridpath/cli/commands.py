"""CLI command implementations."""

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from omegaconf import DictConfig, OmegaConf

from gridpath.config import ConfigValidationError, search_config_from, validate_config
from gridpath.core.exceptions import MazeFormatError, NoPathFound
from gridpath.render import render_grid
from gridpath.solver.maze import MazeProblem, solve_maze

from .utils import format_duration, load_cli_config, load_maze_from_file, save_results

logger = logging.getLogger(__name__)


def build_overrides(args) -> List[str]:
    """Translate solve options into configuration overrides."""
    overrides = []
    if getattr(args, 'turn_cost', None) is not None:
        overrides.append(f"maze.turn_cost={args.turn_cost}")
    if getattr(args, 'step_cost', None) is not None:
        overrides.append(f"maze.step_cost={args.step_cost}")
    if getattr(args, 'diagonal', False):
        overrides.append("maze.diagonal=true")
    if getattr(args, 'heuristic', None):
        overrides.append(f"search.heuristic={args.heuristic}")
    if getattr(args, 'max_nodes', None) is not None:
        overrides.append(f"search.max_nodes_expanded={args.max_nodes}")
    if getattr(args, 'show', False):
        overrides.append("render.enabled=true")
    if getattr(args, 'no_color', False):
        overrides.append("render.use_color=false")
    if getattr(args, 'config', None):
        overrides.extend(args.config)
    return overrides


def run_maze(problem: MazeProblem, config: DictConfig, include_paths: bool = False) -> Dict[str, Any]:
    """Solve a maze with settings taken from ``config``.

    Returns:
        JSON-friendly result dictionary

    Raises:
        NoPathFound: If the end cannot be reached
    """
    search_cfg = config.get('search', {})
    maze_cfg = config.get('maze', {})

    result = solve_maze(
        problem,
        turn_cost=maze_cfg.get('turn_cost', None),
        step_cost=maze_cfg.get('step_cost', 1),
        diagonal=bool(maze_cfg.get('diagonal', False)),
        heuristic=search_cfg.get('heuristic', 'manhattan'),
        config=search_config_from(config)
    )

    output = result.to_dict(include_paths=include_paths)
    output['start'] = list(problem.start)
    output['end'] = list(problem.end)

    render_cfg = config.get('render', {})
    if render_cfg.get('enabled', False):
        output['rendering'] = render_grid(
            problem.grid,
            result.optimal_positions(),
            color=render_cfg.get('color', 'background-cyan'),
            use_color=bool(render_cfg.get('use_color', True))
        )
    return output


def solve_command(args) -> int:
    """Handle solve command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    try:
        config = load_cli_config(build_overrides(args))
        maze_cfg = config.get('maze', {})

        logger.info(f"Loading maze from {args.maze_file}")
        problem = load_maze_from_file(
            args.maze_file,
            wall=maze_cfg.get('wall', '#'),
            start=maze_cfg.get('start', 'S'),
            end=maze_cfg.get('end', 'E')
        )

        start_time = time.perf_counter()
        result = run_maze(problem, config, include_paths=args.all_paths)
        total_time = time.perf_counter() - start_time

        rendering: Optional[str] = result.pop('rendering', None)
        result.update({
            'maze_file': str(args.maze_file),
            'total_time': total_time
        })

        if args.output:
            save_results(result, args.output)
            logger.info(f"Results saved to {args.output}")
        if args.json:
            print(json.dumps(result, indent=2))
            return 0

        if rendering is not None:
            print(rendering)

        if not args.quiet:
            print(f"Maze: {Path(args.maze_file).name}")
        print(f"Min score: {result['min_score']}")
        print(f"Optimal positions: {result['optimal_positions']}")
        if not args.quiet:
            print(f"Nodes expanded: {result['search_stats']['nodes_expanded']}")
            print(f"Total time: {format_duration(total_time)}")

        return 0

    except NoPathFound as e:
        logger.error(f"No path: {e}")
        if not args.quiet:
            print(f"No path found from start to end in {args.maze_file}")
        return 1
    except (FileNotFoundError, MazeFormatError, ConfigValidationError) as e:
        logger.error(f"Solve command failed: {e}")
        return 1


def config_command(args) -> int:
    """Handle config command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    overrides = list(getattr(args, 'config', None) or [])
    try:
        if args.config_action == 'show':
            config = load_cli_config(overrides)
            print("Current Configuration:")
            print("=" * 50)
            print(OmegaConf.to_yaml(config, resolve=True))
            return 0

        elif args.config_action == 'validate':
            try:
                config = load_cli_config(overrides)
                validate_config(config)
                print("Configuration is valid")
                return 0
            except ConfigValidationError as e:
                print(f"Configuration validation failed: {e}")
                return 1

        else:
            print("Unknown config action")
            return 1

    except Exception as e:
        logger.error(f"Config command failed: {e}")
        return 1

"""Hydra-backed configuration for gridpath.

Configuration lives in ``conf/config.yaml`` at the project root and is composed
with Hydra so that command-line style overrides (``maze.turn_cost=1000``) can be
applied on top. When no config directory can be found, the same values are
available from ``DEFAULT_CONFIG``.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import DictConfig, OmegaConf, open_dict

from gridpath.search.astar import SearchConfig

from .validators import validate_config

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "GRIDPATH_CONFIG_DIR"

# Mirrors conf/config.yaml
DEFAULT_CONFIG: Dict[str, Any] = {
    "search": {
        "heuristic": "manhattan",
        "max_nodes_expanded": None,
        "record_equal_parents": True,
    },
    "maze": {
        "wall": "#",
        "start": "S",
        "end": "E",
        "step_cost": 1,
        "turn_cost": None,
        "diagonal": False,
    },
    "render": {
        "enabled": False,
        "color": "background-cyan",
        "use_color": True,
    },
}

_global_config: Optional[DictConfig] = None


def _resolve_config_dir(config_dir: Optional[Union[str, Path]]) -> Path:
    """Explicit directory, then $GRIDPATH_CONFIG_DIR, then <project root>/conf."""
    if config_dir is None:
        config_dir = os.environ.get(CONFIG_DIR_ENV)
    if config_dir is None:
        # src/gridpath/config/config_manager.py -> project root
        config_dir = Path(__file__).resolve().parents[3] / "conf"
    return Path(config_dir).resolve()


def _apply_updates(config: DictConfig, updates: Mapping[str, Any]) -> None:
    """Write dotted-key values into ``config``, creating keys as needed."""
    with open_dict(config):
        for key, value in updates.items():
            OmegaConf.update(config, key, value)


def _set_global(config: DictConfig) -> None:
    global _global_config
    _global_config = config


class ConfigManager:
    """Loads and edits one gridpath configuration.

    Args:
        config_dir: Directory holding ``config.yaml``. Defaults to the
            ``GRIDPATH_CONFIG_DIR`` environment variable, then the project's
            ``conf`` directory.

    Raises:
        FileNotFoundError: If the directory does not exist
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        self.config_dir = _resolve_config_dir(config_dir)
        self.config: Optional[DictConfig] = None

        if not self.config_dir.is_dir():
            raise FileNotFoundError(f"gridpath config directory not found: {self.config_dir}")

        logger.debug(f"Using config directory {self.config_dir}")

    def load_config(self,
                    config_name: str = "config",
                    overrides: Optional[List[str]] = None,
                    validate: bool = True) -> DictConfig:
        """Compose ``<config_name>.yaml`` with Hydra and apply ``overrides``.

        The loaded configuration also becomes the global one returned by
        ``get_config``.

        Raises:
            ConfigValidationError: If ``validate`` is set and a value is invalid
        """
        overrides = list(overrides or [])
        GlobalHydra.instance().clear()
        try:
            with initialize_config_dir(config_dir=str(self.config_dir), version_base=None):
                cfg = compose(config_name=config_name, overrides=overrides)
        except Exception as e:
            logger.error(f"Could not compose '{config_name}' from {self.config_dir}: {e}")
            raise
        finally:
            GlobalHydra.instance().clear()

        if validate:
            validate_config(cfg)

        self.config = cfg
        _set_global(cfg)
        logger.info(f"Loaded config '{config_name}'" + (f" with overrides {overrides}" if overrides else ""))
        return cfg

    def _require_config(self) -> DictConfig:
        if self.config is None:
            raise RuntimeError("No configuration loaded. Call load_config() first.")
        return self.config

    def get_config(self) -> Optional[DictConfig]:
        return self.config

    def get_parameter(self, key: str, default: Any = None) -> Any:
        """Value at dotted ``key`` (e.g. ``maze.turn_cost``), or ``default``."""
        return OmegaConf.select(self._require_config(), key, default=default)

    def set_parameter(self, key: str, value: Any) -> None:
        self.update_config({key: value})

    def update_config(self, updates: Dict[str, Any]) -> None:
        """Apply dotted-key updates, e.g. ``{"maze.diagonal": True}``."""
        _apply_updates(self._require_config(), updates)
        logger.debug(f"Config updated: {updates}")

    def save_config(self, output_path: Union[str, Path]) -> None:
        """Write the loaded configuration as YAML."""
        config = self._require_config()
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        OmegaConf.save(config, output_path)
        logger.info(f"Config written to {output_path}")


def load_config(config_name: str = "config",
                overrides: Optional[List[str]] = None,
                config_dir: Optional[Union[str, Path]] = None,
                validate: bool = True) -> DictConfig:
    """Load a configuration file and make it the global configuration.

    Args:
        config_name: Config file name without ``.yaml``
        overrides: Hydra overrides such as ``search.heuristic=zero``
        config_dir: Directory holding the config file
        validate: Whether to validate the result

    Returns:
        Composed configuration
    """
    return ConfigManager(config_dir).load_config(config_name, overrides, validate)


def default_config(overrides: Optional[List[str]] = None, validate: bool = True) -> DictConfig:
    """Built-in defaults plus dotted ``key=value`` overrides.

    Used when no config directory is available. The result becomes the global
    configuration.
    """
    cfg = OmegaConf.merge(OmegaConf.create(DEFAULT_CONFIG), OmegaConf.from_dotlist(list(overrides or [])))
    if validate:
        validate_config(cfg)
    _set_global(cfg)
    return cfg


def get_config() -> Optional[DictConfig]:
    """The most recently loaded configuration, or None."""
    return _global_config


def get_parameter(key: str, default: Any = None) -> Any:
    """Dotted-key lookup in the global configuration."""
    if _global_config is None:
        logger.warning(f"No configuration loaded; returning default for {key}")
        return default
    return OmegaConf.select(_global_config, key, default=default)


def search_config_from(config: DictConfig) -> SearchConfig:
    """Engine settings from the ``search`` section of ``config``."""
    section = config.get('search') or {}
    return SearchConfig(
        max_nodes_expanded=section.get('max_nodes_expanded', None),
        record_equal_parents=bool(section.get('record_equal_parents', True))
    )


class ConfigContext:
    """Temporarily override dotted keys of the global configuration.

    Example::

        with ConfigContext(**{"maze.turn_cost": 1000}) as cfg:
            ...
    """

    def __init__(self, **overrides: Any):
        self.overrides = overrides
        self._saved: Dict[str, Any] = {}

    def __enter__(self) -> DictConfig:
        config = get_config()
        if config is None:
            raise RuntimeError("No global configuration loaded")
        self._saved = {key: OmegaConf.select(config, key) for key in self.overrides}
        _apply_updates(config, self.overrides)
        return config

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        config = get_config()
        if config is not None:
            _apply_updates(config, self._saved)

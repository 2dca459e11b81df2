"""Configuration management for gridpath.

This module provides Hydra-based configuration management with hierarchical
parameter groups and runtime override capabilities.
"""

from .config_manager import (
    ConfigManager, load_config, get_config, get_parameter, default_config, search_config_from
)
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'load_config',
    'get_config',
    'get_parameter',
    'default_config',
    'search_config_from',
    'validate_config',
    'ConfigValidationError'
]

"""
ldgraph.config - Configuration loading and defaults
"""

from ldgraph.config.defaults import DEFAULT_CONFIG
from ldgraph.config.loader import (
    ConfigError,
    ConfigLoader,
    _apply_env_overrides,
    _try_parse_env_value,
    find_config_file,
    load_config,
    merge_configs,
)

__all__ = [
    "ConfigError",
    "ConfigLoader",
    "load_config",
    "find_config_file",
    "merge_configs",
    "DEFAULT_CONFIG",
]

"""Configuration loading.

Configuration is read from a `.ldgraph.toml` file, merged over
DEFAULT_CONFIG, then overridden by `LDGRAPH_<SECTION>_<KEY>` environment
variables.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

import tomlkit
from tomlkit.exceptions import TOMLKitError

from ldgraph.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX

if TYPE_CHECKING:
    from ldgraph.graph.node import ReverseTarget

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Configuration file or value could not be used."""


class ConfigLoader:
    """Read access to a merged configuration dictionary."""

    def __init__(self, data: dict[str, Any], path: Path | None = None):
        self._data = data
        self.path = path

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ConfigLoader:
        """Wrap a plain dictionary (no defaults applied)."""
        return cls(dict(data))

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dotted key, e.g. "node.reverse_target"."""
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, Mapping) or part not in current:
                return default
            current = current[part]
        return current

    def get_raw(self) -> dict[str, Any]:
        """Return the underlying dictionary."""
        return self._data

    def reverse_target(self) -> ReverseTarget:
        """Resolve `node.reverse_target` to a ReverseTarget.

        Raises:
            ConfigError: If the configured value is not recognized.
        """
        from ldgraph.graph.node import ReverseTarget

        value = self.get("node.reverse_target", "reverse")
        try:
            return ReverseTarget(str(value).lower())
        except ValueError:
            choices = ", ".join(t.value for t in ReverseTarget)
            raise ConfigError(
                f"Invalid node.reverse_target {value!r} (expected one of: {choices})"
            ) from None


def find_config_file(start_path: Path) -> Path | None:
    """Find the configuration file by walking up from start_path.

    Args:
        start_path: Directory (or file) to start searching from.

    Returns:
        Path to the config file, or None if there is none.
    """
    current = start_path.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            logger.debug("Found config file %s", candidate)
            return candidate
    return None


def merge_configs(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge override into a copy of base.

    Nested tables are merged key by key; any other value in override
    replaces the one in base.
    """
    result = copy.deepcopy(dict(base))
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def _parse_toml(path: Path) -> dict[str, Any]:
    """Parse a TOML file into plain Python types."""
    try:
        document = tomlkit.parse(path.read_text(encoding="utf-8"))
    except TOMLKitError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    return document.unwrap()


def _try_parse_env_value(value: str) -> Any:
    """Parse an environment value into a typed value.

    JSON arrays and objects become lists and dicts, "true"/"false" become
    booleans (case-insensitive). Anything else, including malformed JSON,
    is returned unchanged.
    """
    stripped = value.strip()
    if stripped.startswith(("[", "{")):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return value


def _apply_env_overrides(
    config: dict[str, Any], environ: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Apply LDGRAPH_<SECTION>_<KEY> environment overrides in place.

    The section is the first underscore-separated word, so the rest may
    contain underscores: LDGRAPH_NODE_REVERSE_TARGET sets node.reverse_target.
    """
    env = os.environ if environ is None else environ
    for name, raw in env.items():
        if not name.startswith(ENV_PREFIX):
            continue
        rest = name[len(ENV_PREFIX) :].lower()
        section, sep, key = rest.partition("_")
        if not sep or not key:
            continue
        table = config.setdefault(section, {})
        if not isinstance(table, dict):
            continue
        table[key] = _try_parse_env_value(raw)
    return config


def load_config(
    path: Path | None = None,
    start_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ConfigLoader:
    """Load configuration with defaults and environment overrides.

    Args:
        path: Explicit config file. When None, the file is searched for
            from start_path (default: the current directory).
        start_path: Where to start searching for a config file.
        environ: Environment mapping (default: os.environ).

    Returns:
        ConfigLoader over the merged configuration.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    if path is None:
        path = find_config_file(start_path or Path.cwd())

    data: dict[str, Any] = {}
    if path is not None:
        data = _parse_toml(path)

    merged = merge_configs(DEFAULT_CONFIG, data)
    _apply_env_overrides(merged, environ)
    return ConfigLoader(merged, path=path)

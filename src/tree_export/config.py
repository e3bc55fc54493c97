"""Loading of rendering options from a JSON config file.

The config file is optional. Anything that prevents it from being used (a missing
or unreadable file, malformed JSON, a top level that is not an object) yields the
default options; such problems are logged at DEBUG level and never reported to
the user. Individual keys with the wrong type fall back to their own default.

Recognized keys::

    {
        "excludeDirs": ["node_modules", ".git"],
        "excludeFiles": ["*.log"],
        "includeFiles": true,
        "maxDepth": 2
    }
"""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

from tree_export.options import DEFAULT_OPTIONS, Options
from tree_export.types import PathType

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config") / "config.json"


class NoConfig:
    """Sentinel type asking load_config to skip the config file entirely."""

    def __repr__(self) -> str:
        return "NO_CONFIG"


NO_CONFIG = NoConfig()


def _patterns(config: Mapping[str, Any], key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    value = config.get(key)
    if value is None:
        return default
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        logger.debug("Ignoring config key %r: expected a list of strings, got %r", key, value)
        return default
    return tuple(value)


def _include_files(config: Mapping[str, Any]) -> bool:
    value = config.get("includeFiles")
    if value is None:
        return DEFAULT_OPTIONS.include_files
    if not isinstance(value, bool):
        logger.debug("Ignoring config key 'includeFiles': expected a boolean, got %r", value)
        return DEFAULT_OPTIONS.include_files
    return value


def _max_depth(config: Mapping[str, Any]) -> Optional[int]:
    value = config.get("maxDepth")
    if value is None:
        return DEFAULT_OPTIONS.max_depth
    # JSON has a single number type, so 2.0 is the depth 2
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    # bool is a subclass of int but true/false is never a depth
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        logger.debug("Ignoring config key 'maxDepth': expected a non-negative integer, got %r", value)
        return DEFAULT_OPTIONS.max_depth
    return value


def options_from_mapping(config: Mapping[str, Any]) -> Options:
    """Build Options from a decoded config object.

    Args:
        config: The decoded JSON object.

    Returns:
        Options with every absent, null or mistyped key replaced by its default.

    Example:
        >>> options_from_mapping({"maxDepth": 0, "excludeDirs": [".git"]})
        Options(exclude_dirs=('.git',), exclude_files=(), include_files=False, max_depth=0)
    """
    return Options(
        exclude_dirs=_patterns(config, "excludeDirs", DEFAULT_OPTIONS.exclude_dirs),
        exclude_files=_patterns(config, "excludeFiles", DEFAULT_OPTIONS.exclude_files),
        include_files=_include_files(config),
        max_depth=_max_depth(config),
    )


def load_config(config_path: Union[PathType, NoConfig, None] = None) -> Options:
    """Load rendering options from a JSON config file.

    Args:
        config_path: Path of the config file, ``None`` for DEFAULT_CONFIG_PATH
            (resolved against the current working directory), or NO_CONFIG to
            bypass the config file.

    Returns:
        The options found in the file, or DEFAULT_OPTIONS if the file cannot be used.

    Example:
        >>> load_config(NO_CONFIG) == DEFAULT_OPTIONS
        True
        >>> load_config("/nonexistent/config.json") == DEFAULT_OPTIONS
        True
    """
    if isinstance(config_path, NoConfig):
        return DEFAULT_OPTIONS

    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    try:
        with open(path, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.debug("Using default options, cannot read config file %s: %s", path, e)
        return DEFAULT_OPTIONS

    if not isinstance(config, dict):
        logger.debug("Using default options, config file %s does not contain a JSON object", path)
        return DEFAULT_OPTIONS

    logger.debug("Loaded config file %s", path)
    return options_from_mapping(config)

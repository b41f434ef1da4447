"""Layered YAML config files across the XDG config search list.

The same file name may exist under several config bases, e.g.

    ~/.config/myapp/config.yaml     (highest precedence)
    /etc/xdg/myapp/config.yaml

All existing copies are read and merged so the user's file overrides
system-wide values key by key.
"""
from __future__ import annotations

import copy
import logging
from pathlib import Path

import yaml

from xdgdirs.basedirs import get_base_dirs
from xdgdirs.paths import XdgPathList

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "config.yaml"


class ConfigError(ValueError):
    """Raised when a config file cannot be read or is not a YAML mapping."""


def load_yaml(path: str | Path) -> dict:
    """Load one YAML file that must contain a mapping. Empty file gives {}."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.warning("Could not parse %s: %s", path, e)
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except UnicodeDecodeError as e:
        logger.warning("Could not decode %s as UTF-8: %s", path, e)
        raise ConfigError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        logger.warning("Could not read %s: %s", path, e)
        raise ConfigError(f"Cannot read {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: top level is %s, not a mapping", path, type(data).__name__)
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")
    return data


def merge_config(base: dict, overlay: dict) -> dict:
    """Return *base* updated with *overlay*; nested mappings merge recursively.

    Neither argument is mutated.
    """
    result = copy.deepcopy(base)
    for key, value in overlay.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_config(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def config_files(filename: str = DEFAULT_FILENAME, dirs: XdgPathList | None = None) -> list[str]:
    """Return existing copies of *filename* in precedence order.

    *dirs* defaults to the resolved config list (config home first).
    """
    if dirs is None:
        dirs = get_base_dirs().config
    return dirs.find(filename)


def load_config(filename: str = DEFAULT_FILENAME, dirs: XdgPathList | None = None) -> dict:
    """Merge every copy of *filename* found in *dirs*, earlier dirs winning.

    Typical use scopes the search to an application first::

        load_config("config.yaml", with_suffix("myapp").config)

    Returns {} when no copy exists.
    """
    result: dict = {}
    for path in reversed(config_files(filename, dirs)):
        logger.debug("Loading %s", path)
        result = merge_config(result, load_yaml(path))
    return result

import collections.abc
import copy
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from extlint.utils.logging import get_logger
from .defaults import DEFAULT_CONFIG

logger = get_logger(__name__)

PROJECT_CONFIG_NAME = ".extlint.yaml"


def global_config_path() -> Path:
    return Path.home() / ".extlint" / "config.yaml"


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Recursively merges two dictionaries.
    'override' values take precedence over 'base' values.
    Lists are overridden, not merged.
    """
    result = base.copy()
    for key, value in override.items():
        if (
            isinstance(value, collections.abc.Mapping)
            and key in result
            and isinstance(result[key], collections.abc.Mapping)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_yaml(path: Path) -> Optional[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is not None and not isinstance(data, collections.abc.Mapping):
        raise yaml.YAMLError(f"top level must be a mapping, got {type(data).__name__}")
    return data


def load_config(project_path: str = ".", config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads and merges configurations from default, global, and project-specific files.

    Args:
        project_path: Directory searched for ``.extlint.yaml``.
        config_file: Explicit project config file; takes the place of ``.extlint.yaml``.
    """
    # 1. Start with the default config
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2. Load and merge global config
    global_path = global_config_path()
    if global_path.is_file():
        try:
            global_config = _read_yaml(global_path)
            if global_config:
                config = deep_merge(config, global_config)
        except yaml.YAMLError as e:
            logger.warning("global_config_unreadable", path=str(global_path), error=str(e))

    # 3. Load and merge project-specific config
    project_config_path = Path(config_file) if config_file else Path(project_path) / PROJECT_CONFIG_NAME
    if project_config_path.is_file():
        try:
            project_config = _read_yaml(project_config_path)
            if project_config:
                config = deep_merge(config, project_config)
        except yaml.YAMLError as e:
            raise ValueError(
                f"Error parsing project config file at {project_config_path}: {e}"
            ) from e
        logger.debug("project_config_loaded", path=str(project_config_path))
    elif config_file:
        raise ValueError(f"Config file not found at {project_config_path}")

    # 4. Validate final config
    if "rules" not in config or "settings" not in config:
        raise ValueError(
            "Configuration must contain 'rules' and 'settings' sections."
        )

    return config

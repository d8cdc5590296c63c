"""Configuration file loading and merging.

Handles loading configuration from YAML files with:
- Explicit config (NATIVEBOOT_CONFIG environment variable or --config flag)
- Project-level config (nativeboot.yml in the working directory)
- Environment variable expansion (${VAR})
- Override merging with proper precedence
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from nativeboot.config.models import NativeBootConfig
from nativeboot.config.validation import validate_config
from nativeboot.core.logging import get_logger
from nativeboot.errors import ConfigError

LOGGER = get_logger(__name__)

# Environment variable pointing at a config file
NATIVEBOOT_CONFIG_ENV = "NATIVEBOOT_CONFIG"

# Config file names searched in the project root
PROJECT_CONFIG_NAMES = ["nativeboot.yml", "nativeboot.yaml", ".nativeboot.yml", ".nativeboot.yaml"]

# Environment variable pattern: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


def load_config(
    project_root: Optional[Path] = None,
    config_path: Optional[Path] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> NativeBootConfig:
    """Load configuration with proper precedence.

    Precedence (highest to lowest):
    1. Explicit overrides
    2. config_path, else $NATIVEBOOT_CONFIG, else project config
    3. Built-in defaults

    Args:
        project_root: Directory searched for nativeboot.yml (defaults to cwd).
        config_path: Optional path to a config file (--config flag).
        overrides: Dict of overrides, e.g. from CLI flags.

    Returns:
        Merged NativeBootConfig instance.

    Raises:
        ConfigError: If an explicitly named config file doesn't exist or
            any config file has parse errors.
    """
    sources: List[str] = []
    merged: Dict[str, Any] = {}

    if config_path is None:
        env_path = os.environ.get(NATIVEBOOT_CONFIG_ENV)
        if env_path:
            config_path = Path(env_path)

    if config_path is not None:
        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        path = config_path
        label = "custom"
    else:
        path = find_project_config(project_root or Path.cwd())
        label = "project"

    if path is not None:
        try:
            file_dict = load_yaml_file(path)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        validate_config(file_dict, source=str(path))
        merged = merge_configs(merged, file_dict)
        sources.append(f"{label}:{path}")
        LOGGER.debug(f"Loaded {label} config from {path}")

    if overrides:
        merged = merge_configs(merged, overrides)
        sources.append("cli")
        LOGGER.debug("Applied CLI overrides")

    config = dict_to_config(merged)
    config._config_sources = sources

    LOGGER.debug(f"Config loaded from sources: {sources}")
    return config


def find_project_config(project_root: Path) -> Optional[Path]:
    """Find a config file in the project root.

    Args:
        project_root: Directory to search in.

    Returns:
        Path to config file if found, None otherwise.
    """
    for name in PROJECT_CONFIG_NAMES:
        config_path = project_root / name
        if config_path.exists():
            return config_path
    return None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load and parse a YAML config file.

    Performs environment variable expansion on string values.

    Raises:
        yaml.YAMLError: If YAML parsing fails.
        ConfigError: If the document is not a mapping.
    """
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()

    data = yaml.safe_load(content)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")

    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in config values.

    Supports ${VAR} and ${VAR:-default} syntax.
    """
    if isinstance(data, dict):
        return {k: expand_env_vars(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    elif isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_env_var_replacer, data)
    else:
        return data


def _env_var_replacer(match: re.Match[str]) -> str:
    """Replace environment variable reference with its value."""
    var_name = match.group(1)
    default_value = match.group(2)

    value = os.environ.get(var_name)
    if value is not None:
        return value
    if default_value is not None:
        return default_value

    LOGGER.warning(f"Environment variable ${var_name} is not set and has no default")
    return ""


def merge_configs(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Deep merge two config dicts, with overlay taking precedence.

    Rules:
    - Scalar values: overlay replaces base
    - Lists: overlay replaces base (no merging)
    - Dicts: recursive merge
    """
    result = base.copy()

    for key, overlay_value in overlay.items():
        if key in result and isinstance(result[key], dict) and isinstance(overlay_value, dict):
            result[key] = merge_configs(result[key], overlay_value)
        else:
            result[key] = overlay_value

    return result


def dict_to_config(data: Dict[str, Any]) -> NativeBootConfig:
    """Convert a config dict to a typed NativeBootConfig.

    Values of the wrong type were already reported by validation and
    fall back to the defaults here.
    """
    config = NativeBootConfig()

    for key in ("package", "resource_root", "map_files_dir"):
        value = data.get(key)
        if isinstance(value, str) and value:
            setattr(config, key, value)

    temp_dir = data.get("temp_dir")
    if isinstance(temp_dir, str) and temp_dir:
        config.temp_dir = temp_dir

    libraries = data.get("libraries")
    if isinstance(libraries, list):
        config.libraries = [name for name in libraries if isinstance(name, str) and name]

    return config

"""Configuration validation for nativeboot.

Warns on unknown keys and wrong value types. Never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set

from nativeboot.core.logging import get_logger

LOGGER = get_logger(__name__)

# Valid top-level keys and their expected types
VALID_KEYS: Dict[str, type] = {
    "package": str,
    "resource_root": str,
    "libraries": list,
    "map_files_dir": str,
    "temp_dir": str,
}


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def _suggest_key(key: str, valid: Set[str]) -> Optional[str]:
    matches = get_close_matches(key, sorted(valid), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    message = f"{warning.source}: {warning.message}"
    if warning.suggestion:
        message += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(message)


def validate_config(data: Dict[str, Any], source: str) -> List[ConfigValidationWarning]:
    """Validate a configuration dictionary.

    Args:
        data: Config dictionary to validate.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    if not isinstance(data, dict):
        warning = ConfigValidationWarning(
            message=f"Config must be a mapping, got {type(data).__name__}",
            source=source,
        )
        _log_warning(warning)
        return [warning]

    for key, value in data.items():
        if key not in VALID_KEYS:
            warning = ConfigValidationWarning(
                message=f"Unknown key '{key}'",
                source=source,
                key=key,
                suggestion=_suggest_key(key, set(VALID_KEYS)),
            )
        elif value is not None and not isinstance(value, VALID_KEYS[key]):
            warning = ConfigValidationWarning(
                message=(
                    f"'{key}' must be a {VALID_KEYS[key].__name__}, "
                    f"got {type(value).__name__}"
                ),
                source=source,
                key=key,
            )
        else:
            continue
        warnings.append(warning)
        _log_warning(warning)

    libraries = data.get("libraries")
    if isinstance(libraries, list):
        for index, name in enumerate(libraries):
            if not isinstance(name, str) or not name:
                warning = ConfigValidationWarning(
                    message=f"'libraries[{index}]' must be a non-empty string",
                    source=source,
                    key="libraries",
                )
                warnings.append(warning)
                _log_warning(warning)

    resource_root = data.get("resource_root")
    if isinstance(resource_root, str) and not resource_root.startswith("/"):
        warning = ConfigValidationWarning(
            message="'resource_root' must start with '/'",
            source=source,
            key="resource_root",
        )
        warnings.append(warning)
        _log_warning(warning)

    return warnings

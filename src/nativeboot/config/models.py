"""Configuration data models for nativeboot.

Defines the typed configuration that represents nativeboot.yml.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from nativeboot.bootstrap.naming import DEFAULT_RESOURCE_ROOT
from nativeboot.bootstrap.platform import DEFAULT_MAP_FILES_DIR

# Package whose resources hold the native libraries
DEFAULT_PACKAGE = "nativeboot"

# Libraries loaded by default, in order
DEFAULT_LIBRARIES: List[str] = ["xgboost4j"]


@dataclass
class NativeBootConfig:
    """Native library loading configuration."""

    package: str = DEFAULT_PACKAGE
    resource_root: str = DEFAULT_RESOURCE_ROOT
    libraries: List[str] = field(default_factory=lambda: list(DEFAULT_LIBRARIES))
    map_files_dir: str = str(DEFAULT_MAP_FILES_DIR)
    temp_dir: Optional[str] = None  # None = system temp directory

    # Where the values came from, e.g. ["project:/app/nativeboot.yml", "cli"]
    _config_sources: List[str] = field(default_factory=list, repr=False)

    @property
    def sources(self) -> List[str]:
        """Config sources in load order."""
        return list(self._config_sources)

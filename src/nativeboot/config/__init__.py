"""Configuration loading for nativeboot."""

from nativeboot.config.loader import load_config
from nativeboot.config.models import DEFAULT_LIBRARIES, DEFAULT_PACKAGE, NativeBootConfig

__all__ = [
    "load_config",
    "NativeBootConfig",
    "DEFAULT_LIBRARIES",
    "DEFAULT_PACKAGE",
]

"""nativeboot - load bundled native libraries for the host platform."""

from nativeboot.bootstrap.platform import (
    Architecture,
    OperatingSystem,
    PlatformDetector,
    PlatformInfo,
    get_platform_info,
)
from nativeboot.errors import (
    InvalidResourcePathError,
    NativeBootError,
    NativeLinkError,
    ResourceNotFoundError,
    UnsupportedPlatformError,
)
from nativeboot.loader import LoadState, NativeLibLoader, ensure_loaded, get_default_loader

__version__ = "0.3.0"

__all__ = [
    "Architecture",
    "OperatingSystem",
    "PlatformDetector",
    "PlatformInfo",
    "get_platform_info",
    "InvalidResourcePathError",
    "NativeBootError",
    "NativeLinkError",
    "ResourceNotFoundError",
    "UnsupportedPlatformError",
    "LoadState",
    "NativeLibLoader",
    "ensure_loaded",
    "get_default_loader",
    "__version__",
]

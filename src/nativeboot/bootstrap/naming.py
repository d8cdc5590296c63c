"""Native library file naming per operating system."""

from __future__ import annotations

from typing import Dict, Tuple

from nativeboot.bootstrap.platform import OperatingSystem, PlatformInfo

# Default root of the native libraries inside the resource package
DEFAULT_RESOURCE_ROOT = "/lib"

# (prefix, suffix) of a shared library file name
_LIBRARY_NAME_PARTS: Dict[OperatingSystem, Tuple[str, str]] = {
    OperatingSystem.WINDOWS: ("", ".dll"),
    OperatingSystem.MACOS: ("lib", ".dylib"),
    OperatingSystem.LINUX: ("lib", ".so"),
    OperatingSystem.LINUX_MUSL: ("lib", ".so"),
    OperatingSystem.SOLARIS: ("lib", ".so"),
}


def map_library_name(name: str, os: OperatingSystem) -> str:
    """Map a library name to the platform-specific file name.

    Example: "xgboost4j" -> "libxgboost4j.so" on Linux, "xgboost4j.dll" on Windows.
    """
    prefix, suffix = _LIBRARY_NAME_PARTS[os]
    return f"{prefix}{name}{suffix}"


def resource_path_for(
    name: str,
    platform_info: PlatformInfo,
    resource_root: str = DEFAULT_RESOURCE_ROOT,
) -> str:
    """Build the in-package resource path of a native library.

    Args:
        name: Library name without platform prefix/suffix.
        platform_info: Target platform.
        resource_root: Absolute root of the native libraries.

    Returns:
        Path like "/lib/linux/x86_64/libxgboost4j.so".
    """
    root = resource_root.rstrip("/")
    filename = map_library_name(name, platform_info.os)
    return f"{root}/{platform_info.path_segment}/{filename}"

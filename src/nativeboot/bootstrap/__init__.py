"""
Bootstrap module for bundled native libraries.

This module handles:
- Platform detection (OS + architecture, musl vs glibc on Linux)
- Platform-specific library file naming
- Extraction of packaged resources to temp files
- Validation of the libraries bundled for a platform
"""

from nativeboot.bootstrap.platform import (
    Architecture,
    OperatingSystem,
    PlatformDetector,
    PlatformInfo,
    get_platform_info,
    is_musl_based,
)
from nativeboot.bootstrap.naming import map_library_name, resource_path_for
from nativeboot.bootstrap.extract import (
    create_temp_file_from_resource,
    load_library_from_resource,
)
from nativeboot.bootstrap.validation import (
    LibraryStatus,
    LibraryValidationResult,
    validate_libraries,
)

__all__ = [
    "Architecture",
    "OperatingSystem",
    "PlatformDetector",
    "PlatformInfo",
    "get_platform_info",
    "is_musl_based",
    "map_library_name",
    "resource_path_for",
    "create_temp_file_from_resource",
    "load_library_from_resource",
    "LibraryStatus",
    "LibraryValidationResult",
    "validate_libraries",
]

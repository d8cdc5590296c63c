"""Error types raised while bootstrapping native libraries.

Every failure aborts the load and is surfaced to the caller. The classes
also derive from the matching builtin exception so callers that only know
about ``ValueError`` / ``OSError`` still catch them.
"""

from __future__ import annotations

from typing import Optional


class NativeBootError(Exception):
    """Base class for nativeboot errors."""

    pass


class UnsupportedPlatformError(NativeBootError):
    """The host OS or CPU architecture matches no supported case."""

    def __init__(self, kind: str, value: str):
        self.kind = kind
        self.value = value
        super().__init__(f"Unsupported {kind}: {value}")


class InvalidResourcePathError(NativeBootError, ValueError):
    """A resource path is not absolute or its filename is too short."""

    pass


class ResourceNotFoundError(NativeBootError, FileNotFoundError):
    """A resource is absent from the packaged archive."""

    def __init__(self, resource_path: str):
        self.resource_path = resource_path
        super().__init__(f"File {resource_path} was not found inside the package resources.")


class NativeLinkError(NativeBootError, OSError):
    """A library was found but could not be linked into the process."""

    def __init__(self, library: str, platform: str, cause: Optional[BaseException] = None):
        self.library = library
        self.platform = platform
        message = f"Failed to load native library '{library}' for platform {platform}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class ConfigError(NativeBootError):
    """Configuration loading or parsing error."""

    pass

"""One-time loading of bundled native libraries.

:class:`NativeLibLoader` detects the platform, extracts each configured
library from the resource package and loads it with ``ctypes``. The whole
sequence runs at most once per loader; concurrent callers wait for the
thread doing the work and then return without side effects.
"""

from __future__ import annotations

import ctypes
import threading
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple, Union

from nativeboot.bootstrap.extract import (
    ResourceRoot,
    create_temp_file_from_resource,
    resource_root_for,
)
from nativeboot.bootstrap.naming import DEFAULT_RESOURCE_ROOT, resource_path_for
from nativeboot.bootstrap.platform import OperatingSystem, PlatformDetector, PlatformInfo
from nativeboot.config.loader import load_config
from nativeboot.config.models import DEFAULT_LIBRARIES, DEFAULT_PACKAGE, NativeBootConfig
from nativeboot.core.logging import get_logger
from nativeboot.errors import NativeLinkError

LOGGER = get_logger(__name__)

_GLIBC_HINT = "You may need to install 'libgomp.so' (or glibc) via your package manager."

# Remediation hints logged when a library fails to link, per OS
REMEDIATION_HINTS: Dict[OperatingSystem, Tuple[str, ...]] = {
    OperatingSystem.WINDOWS: (
        "You may need to install 'vcomp140.dll' or 'libgomp-1.dll'",
    ),
    OperatingSystem.MACOS: (
        "You may need to install 'libomp.dylib', via `brew install libomp` or similar",
    ),
    OperatingSystem.LINUX: (
        _GLIBC_HINT,
        "Alternatively, your Linux OS is musl-based but wasn't detected as such.",
    ),
    OperatingSystem.LINUX_MUSL: (
        _GLIBC_HINT,
        "Alternatively, your Linux OS was wrongly detected as musl-based, although it is not.",
    ),
    OperatingSystem.SOLARIS: (
        _GLIBC_HINT,
    ),
}


class LoadState(str, Enum):
    """Lifecycle of a NativeLibLoader."""

    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    INITIALIZED = "initialized"


def link_failure_messages(library: str, platform_info: PlatformInfo) -> Tuple[str, ...]:
    """Build the error lines logged when a library fails to link.

    Args:
        library: Library name.
        platform_info: Detected platform.

    Returns:
        The generic OpenMP message followed by the OS-specific hints.
    """
    headline = (
        f"Failed to load {library} due to missing native dependencies for "
        f"platform {platform_info.path_segment}, "
        f"this is likely due to a missing OpenMP dependency"
    )
    return (headline,) + REMEDIATION_HINTS[platform_info.os]


class NativeLibLoader:
    """Loads a sequence of bundled native libraries exactly once."""

    def __init__(
        self,
        libraries: Iterable[str] = DEFAULT_LIBRARIES,
        resources: Optional[ResourceRoot] = None,
        resource_root: str = DEFAULT_RESOURCE_ROOT,
        detector: Optional[PlatformDetector] = None,
        load_library: Callable[[str], Any] = ctypes.CDLL,
        temp_dir: Optional[Union[str, Path]] = None,
    ):
        """Initialize NativeLibLoader.

        Args:
            libraries: Library names, loaded in this order.
            resources: Resource root holding the libraries (defaults to the
                nativeboot package resources).
            resource_root: Absolute root of the libraries inside ``resources``.
            detector: Platform detector (defaults to the host detector).
            load_library: Callable that links a shared library file into
                the process and returns a handle.
            temp_dir: Directory for extracted libraries.
        """
        self._libraries: Tuple[str, ...] = tuple(libraries)
        self._resources = resources
        self._resource_root = resource_root
        self._detector = detector or PlatformDetector()
        self._load_library = load_library
        self._temp_dir = temp_dir

        self._state = LoadState.UNINITIALIZED
        self._condition = threading.Condition()
        self._platform: Optional[PlatformInfo] = None
        self._handles: Dict[str, Any] = {}

    @classmethod
    def from_config(cls, config: NativeBootConfig, **kwargs: Any) -> "NativeLibLoader":
        """Create a loader from configuration.

        Extra keyword arguments are passed to the constructor.

        Raises:
            ConfigError: If the configured resource package cannot be imported.
        """
        kwargs.setdefault("detector", PlatformDetector(map_files_dir=config.map_files_dir))
        return cls(
            libraries=config.libraries,
            resources=resource_root_for(config.package),
            resource_root=config.resource_root,
            temp_dir=config.temp_dir,
            **kwargs,
        )

    @property
    def libraries(self) -> Sequence[str]:
        """Library names in load order."""
        return self._libraries

    @property
    def state(self) -> LoadState:
        """Current load state."""
        return self._state

    @property
    def is_loaded(self) -> bool:
        """True once every library has been loaded."""
        return self._state is LoadState.INITIALIZED

    @property
    def platform(self) -> Optional[PlatformInfo]:
        """Platform detected during loading, None before the first load."""
        return self._platform

    def get_library(self, name: str) -> Any:
        """Return the handle of a loaded library.

        Raises:
            KeyError: If the library has not been loaded.
        """
        return self._handles[name]

    def ensure_loaded(self) -> None:
        """Load all libraries unless that already happened.

        Safe to call from several threads; only one of them does the work.

        Raises:
            UnsupportedPlatformError: If the host platform is not supported.
            NativeLinkError: If a library failed to link.
            OSError: If a library could not be extracted.
        """
        if self._state is LoadState.INITIALIZED:
            return

        with self._condition:
            while self._state is LoadState.INITIALIZING:
                self._condition.wait()
            if self._state is LoadState.INITIALIZED:
                return
            self._state = LoadState.INITIALIZING

        try:
            self._load_all()
        except BaseException:
            with self._condition:
                self._state = LoadState.UNINITIALIZED
                self._condition.notify_all()
            raise

        with self._condition:
            self._state = LoadState.INITIALIZED
            self._condition.notify_all()

    def wait_ready(self, timeout: Optional[float] = None) -> bool:
        """Block until another caller has finished loading.

        Args:
            timeout: Seconds to wait, or None to wait forever.

        Returns:
            True if the libraries are loaded, False on timeout.
        """
        with self._condition:
            return self._condition.wait_for(
                lambda: self._state is LoadState.INITIALIZED, timeout
            )

    def _resources_root(self) -> ResourceRoot:
        if self._resources is None:
            self._resources = resource_root_for(DEFAULT_PACKAGE)
        return self._resources

    def _load_all(self) -> None:
        platform_info = self._platform
        if platform_info is None:
            platform_info = self._detector.detect()
            self._platform = platform_info
        resources = self._resources_root()
        handles: Dict[str, Any] = {}

        for name in self._libraries:
            path = resource_path_for(name, platform_info, self._resource_root)
            try:
                temp_path = create_temp_file_from_resource(
                    path, resources, temp_dir=self._temp_dir
                )
            except OSError:
                LOGGER.error(
                    f"Failed to load {name} library from package resources "
                    f"for platform {platform_info.path_segment}"
                )
                raise

            try:
                handles[name] = self._load_library(temp_path)
            except OSError as e:
                for message in link_failure_messages(name, platform_info):
                    LOGGER.error(message)
                raise NativeLinkError(name, platform_info.path_segment, e) from e

            LOGGER.info(f"Loaded native library {name} ({platform_info.path_segment})")

        self._handles.update(handles)


_default_loader: Optional[NativeLibLoader] = None
_default_loader_lock = threading.Lock()


def get_default_loader() -> NativeLibLoader:
    """Return the process-wide loader, building it from config on first use."""
    global _default_loader
    with _default_loader_lock:
        if _default_loader is None:
            _default_loader = NativeLibLoader.from_config(load_config())
        return _default_loader


def ensure_loaded() -> None:
    """Load the configured native libraries into the process once.

    Raises:
        ConfigError: If the configuration or resource package is invalid.
        UnsupportedPlatformError: If the host platform is not supported.
        NativeLinkError: If a library failed to link.
        OSError: If a library could not be extracted.
    """
    get_default_loader().ensure_loaded()

"""Platform detection for bundled native libraries.

Maps the host-reported OS name and CPU architecture to the identifiers used
in the package's resource layout (``lib/<os>/<arch>/``).
"""

from __future__ import annotations

import platform
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Optional, Union

from nativeboot.core.logging import get_logger
from nativeboot.errors import UnsupportedPlatformError

LOGGER = get_logger(__name__)

# Memory-mapped files of the current process (Linux only)
DEFAULT_MAP_FILES_DIR = Path("/proc/self/map_files")


class OperatingSystem(str, Enum):
    """Supported operating systems. The value is the resource path segment."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"
    LINUX_MUSL = "linux-musl"
    SOLARIS = "solaris"


class Architecture(str, Enum):
    """Supported CPU architectures. The value is the resource path segment."""

    X86_64 = "x86_64"
    AARCH64 = "aarch64"
    SPARC = "sparc"


# Prefixes checked in order against the case-folded architecture string
_ARCH_PREFIXES = (
    (("amd64", "x86_64"), Architecture.X86_64),
    (("aarch64", "arm64"), Architecture.AARCH64),
    (("sparc",), Architecture.SPARC),
)


def _real_path(entry: Path) -> str:
    try:
        return str(entry.resolve(strict=True))
    except (OSError, RuntimeError):
        return ""


def is_musl_based(map_files_dir: Union[str, Path] = DEFAULT_MAP_FILES_DIR) -> bool:
    """Check whether the running Linux system uses musl libc.

    Looks at the real paths behind the process's memory-mapped files and
    reports musl if any of them mentions it. This is a best-effort probe:
    entries that cannot be resolved are skipped, and if the directory
    cannot be listed the answer is False.

    Args:
        map_files_dir: Directory listing the process's mapped files.

    Returns:
        True if a musl-related mapped file was found, False otherwise
        (including when the answer is unknown).
    """
    try:
        entries = list(Path(map_files_dir).iterdir())
    except OSError as e:
        LOGGER.debug(f"Cannot list {map_files_dir}, assuming glibc: {e}")
        return False

    for entry in entries:
        real_path = _real_path(entry)
        if "musl" in real_path.lower():
            LOGGER.debug(
                f"Assuming that detected Linux OS is musl-based, "
                f"because a memory-mapped file '{real_path}' was found."
            )
            return True
    return False


def parse_os(os_name: str, is_musl: Callable[[], bool] = is_musl_based) -> OperatingSystem:
    """Map a host OS name to an OperatingSystem.

    First match wins, using case-folded substring checks.

    Args:
        os_name: OS name as reported by the host (e.g. "Windows 10", "Linux").
        is_musl: Probe consulted only for Linux.

    Returns:
        Matching OperatingSystem.

    Raises:
        UnsupportedPlatformError: If the name matches no supported OS.
    """
    name = os_name.lower()
    if "mac" in name or "darwin" in name:
        return OperatingSystem.MACOS
    if "win" in name:
        return OperatingSystem.WINDOWS
    if "nux" in name:
        return OperatingSystem.LINUX_MUSL if is_musl() else OperatingSystem.LINUX
    if "sunos" in name:
        return OperatingSystem.SOLARIS
    raise UnsupportedPlatformError("OS", name)


def parse_arch(arch: str) -> Architecture:
    """Map a host architecture string to an Architecture.

    Raises:
        UnsupportedPlatformError: If the string matches no supported prefix.
    """
    name = arch.lower()
    for prefixes, architecture in _ARCH_PREFIXES:
        if name.startswith(prefixes):
            return architecture
    raise UnsupportedPlatformError("architecture", name)


@dataclass(frozen=True)
class PlatformInfo:
    """Detected platform.

    Attributes:
        os: Operating system.
        arch: CPU architecture.
    """

    os: OperatingSystem
    arch: Architecture

    @property
    def path_segment(self) -> str:
        """Resource path segment for this platform.

        Example: "linux/x86_64", "macos/aarch64"
        """
        return f"{self.os.value}/{self.arch.value}"

    def __str__(self) -> str:
        return self.path_segment


class PlatformDetector:
    """Detects the host platform.

    The OS/architecture sources and the musl probe directory are injected
    so tests can simulate any host.
    """

    def __init__(
        self,
        map_files_dir: Union[str, Path] = DEFAULT_MAP_FILES_DIR,
        os_name: Optional[Callable[[], str]] = None,
        machine: Optional[Callable[[], str]] = None,
    ):
        """Initialize PlatformDetector.

        Args:
            map_files_dir: Directory probed for musl detection on Linux.
            os_name: Callable returning the host OS name
                (defaults to ``platform.system``).
            machine: Callable returning the host architecture
                (defaults to ``platform.machine``).
        """
        self._map_files_dir = Path(map_files_dir)
        self._os_name = os_name or platform.system
        self._machine = machine or platform.machine

    @property
    def map_files_dir(self) -> Path:
        """Directory probed for musl detection."""
        return self._map_files_dir

    def is_musl_based(self) -> bool:
        """Run the musl probe against the configured directory."""
        return is_musl_based(self._map_files_dir)

    def detect_os(self) -> OperatingSystem:
        """Detect the host operating system."""
        return parse_os(self._os_name() or "generic", self.is_musl_based)

    def detect_arch(self) -> Architecture:
        """Detect the host CPU architecture."""
        return parse_arch(self._machine() or "generic")

    def detect(self) -> PlatformInfo:
        """Detect OS and architecture.

        Raises:
            UnsupportedPlatformError: If either is not supported.
        """
        info = PlatformInfo(os=self.detect_os(), arch=self.detect_arch())
        LOGGER.debug(f"Detected platform {info.path_segment}")
        return info


def get_platform_info(map_files_dir: Union[str, Path] = DEFAULT_MAP_FILES_DIR) -> PlatformInfo:
    """Detect and return current platform information.

    Raises:
        UnsupportedPlatformError: If the platform is not supported.
    """
    return PlatformDetector(map_files_dir=map_files_dir).detect()

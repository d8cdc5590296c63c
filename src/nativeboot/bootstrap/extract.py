"""Extraction of packaged resources to temporary files.

Shared libraries cannot be loaded straight out of a wheel, zip app or
frozen bundle, so each one is copied to a private temp file first. The
temp files are removed at interpreter exit on a best-effort basis.
"""

from __future__ import annotations

import atexit
import ctypes
import os
import tempfile
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Any, Callable, Optional, Tuple, Union

from nativeboot.core.logging import get_logger
from nativeboot.errors import ConfigError, InvalidResourcePathError, ResourceNotFoundError

LOGGER = get_logger(__name__)

# Copy buffer size in bytes
DEFAULT_BUFFER_SIZE = 1024

# Minimum length of the temp file prefix (file name before the first dot)
MIN_PREFIX_LENGTH = 3

ResourceRoot = Union[Traversable, Path]


def resource_root_for(package: str) -> Traversable:
    """Return the resource root of an importable package.

    Raises:
        ConfigError: If the package cannot be imported.
    """
    try:
        return files(package)
    except ModuleNotFoundError as e:
        raise ConfigError(f"Resource package '{package}' cannot be imported: {e}") from e


def split_resource_name(path: str) -> Tuple[str, Optional[str]]:
    """Validate a resource path and derive the temp file prefix/suffix.

    Args:
        path: Absolute resource path, e.g. "/lib/linux/x86_64/libfoo.so".

    Returns:
        Tuple of (prefix, suffix). The suffix keeps its leading dot and is
        None when the file name has no dot.

    Raises:
        InvalidResourcePathError: If the path is not absolute, contains
            "." or ".." segments, or the file name prefix is shorter than
            three characters.
    """
    if not path.startswith("/"):
        raise InvalidResourcePathError("The path has to be absolute (start with '/').")
    if any(part in (".", "..") for part in path.split("/")):
        raise InvalidResourcePathError(f"The path must not contain '.' or '..' segments: {path}")

    filename = path.rsplit("/", 1)[-1]
    prefix, dot, rest = filename.partition(".")
    suffix = f".{rest}" if dot else None

    if not filename or len(prefix) < MIN_PREFIX_LENGTH:
        raise InvalidResourcePathError("The filename has to be at least 3 characters long.")
    return prefix, suffix


def resolve_resource(resources: ResourceRoot, path: str) -> ResourceRoot:
    """Resolve an absolute resource path against a resource root."""
    resource = resources
    for part in path.strip("/").split("/"):
        if part:
            resource = resource.joinpath(part)
    return resource


def _remove_at_exit(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        LOGGER.debug(f"Could not remove temp file {path}: {e}")


def create_temp_file_from_resource(
    path: str,
    resources: ResourceRoot,
    temp_dir: Optional[Union[str, Path]] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE,
) -> str:
    """Copy a packaged resource into a new temporary file.

    Args:
        path: Absolute resource path inside ``resources`` (starts with '/').
        resources: Resource root (``importlib.resources.files(...)`` or a
            directory path).
        temp_dir: Directory for the temp file (defaults to the system one).
        buffer_size: Copy buffer size in bytes.

    Returns:
        Absolute path of the temp file.

    Raises:
        InvalidResourcePathError: If the path or file name is malformed.
        FileNotFoundError: If the temp file vanished after creation.
        ResourceNotFoundError: If the resource does not exist.
        OSError: If reading or writing fails.
    """
    prefix, suffix = split_resource_name(path)

    fd, temp_path = tempfile.mkstemp(
        prefix=prefix,
        suffix=suffix,
        dir=str(temp_dir) if temp_dir is not None else None,
    )
    temp_path = os.path.abspath(temp_path)
    atexit.register(_remove_at_exit, temp_path)

    with os.fdopen(fd, "wb") as out:
        if not os.path.exists(temp_path):
            raise FileNotFoundError(f"File {temp_path} does not exist.")

        resource = resolve_resource(resources, path)
        if not resource.is_file():
            raise ResourceNotFoundError(path)

        with resource.open("rb") as src:
            while True:
                chunk = src.read(buffer_size)
                if not chunk:
                    break
                out.write(chunk)

    LOGGER.debug(f"Extracted {path} to {temp_path}")
    return temp_path


def load_library_from_resource(
    path: str,
    resources: ResourceRoot,
    load_library: Callable[[str], Any] = ctypes.CDLL,
    temp_dir: Optional[Union[str, Path]] = None,
) -> Any:
    """Extract a packaged shared library and load it into the process.

    Returns:
        The handle returned by ``load_library``.
    """
    temp_path = create_temp_file_from_resource(path, resources, temp_dir=temp_dir)
    return load_library(temp_path)

"""Validation of bundled native libraries.

Checks that the libraries a loader needs are actually shipped in the
resource package for a given platform.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List

from nativeboot.bootstrap.extract import ResourceRoot, resolve_resource
from nativeboot.bootstrap.naming import DEFAULT_RESOURCE_ROOT, resource_path_for
from nativeboot.bootstrap.platform import PlatformInfo
from nativeboot.core.logging import get_logger

LOGGER = get_logger(__name__)


class LibraryStatus(str, Enum):
    """Status of a bundled library resource."""

    PRESENT = "present"
    MISSING = "missing"
    EMPTY = "empty"


@dataclass
class LibraryValidationResult:
    """Result of validating bundled libraries.

    Maps each library name to its status and its resource path.
    """

    statuses: Dict[str, LibraryStatus] = field(default_factory=dict)
    paths: Dict[str, str] = field(default_factory=dict)

    def all_valid(self) -> bool:
        """Check if all validated libraries are present."""
        return all(status == LibraryStatus.PRESENT for status in self.statuses.values())

    def missing_libraries(self) -> List[str]:
        """Return libraries that are missing or empty."""
        return [
            name
            for name, status in self.statuses.items()
            if status != LibraryStatus.PRESENT
        ]

    def get_status(self, library: str) -> LibraryStatus:
        """Get status for a specific library."""
        return self.statuses.get(library, LibraryStatus.MISSING)

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {name: status.value for name, status in self.statuses.items()}


def validate_resource(resources: ResourceRoot, path: str) -> LibraryStatus:
    """Validate a single resource.

    Args:
        resources: Resource root.
        path: Absolute resource path.

    Returns:
        LibraryStatus of the resource.
    """
    resource = resolve_resource(resources, path)
    if not resource.is_file():
        return LibraryStatus.MISSING

    with resource.open("rb") as f:
        if not f.read(1):
            return LibraryStatus.EMPTY

    return LibraryStatus.PRESENT


def validate_libraries(
    libraries: Iterable[str],
    platform_info: PlatformInfo,
    resources: ResourceRoot,
    resource_root: str = DEFAULT_RESOURCE_ROOT,
) -> LibraryValidationResult:
    """Validate that every library is bundled for a platform.

    Args:
        libraries: Library names.
        platform_info: Platform to check.
        resources: Resource root.
        resource_root: Absolute root of the native libraries.

    Returns:
        LibraryValidationResult with one entry per library.
    """
    result = LibraryValidationResult()
    for name in libraries:
        path = resource_path_for(name, platform_info, resource_root)
        status = validate_resource(resources, path)
        result.statuses[name] = status
        result.paths[name] = path
        LOGGER.debug(f"{name}: {status.value} ({path})")
    return result

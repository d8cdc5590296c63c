"""Exit codes for the nativeboot CLI.

- 0: Success
- 1: Issues found (bundled libraries missing)
- 2: Load failure (extraction or linking failed)
- 3: Invalid usage (bad arguments, bad config, malformed resource path)
- 4: Unsupported platform
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_ISSUES_FOUND = 1
EXIT_LOAD_FAILURE = 2
EXIT_INVALID_USAGE = 3
EXIT_UNSUPPORTED_PLATFORM = 4

"""Allow ``python -m nativeboot``."""

from nativeboot.cli import main

raise SystemExit(main())

"""Allow ``python -m recency_cache``."""

import sys

from .interfaces.cli.main import main

if __name__ == "__main__":
    sys.exit(main())

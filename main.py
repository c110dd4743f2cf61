"""Main application entry point."""

import sys

from eventhub.config.environment import IS_PRODUCTION_ENVIRONMENT  # noqa: F401
from eventhub.cli import main

if __name__ == "__main__":
    sys.exit(main())

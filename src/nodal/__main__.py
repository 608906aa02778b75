"""Main entry point for the nodal package when run as a module.

This module enables running the CLI directly using 'python -m nodal'.
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())

"""
Entry point for running strkit as a module.

Usage:
    python -m strkit format "{}-{}" 1 2
"""

import sys

from strkit.cli import main

if __name__ == "__main__":
    sys.exit(main())

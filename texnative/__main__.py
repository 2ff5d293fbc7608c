"""
Entry point for running texnative as a module.

Usage:
    python -m texnative render input.html --format tree
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())

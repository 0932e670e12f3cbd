"""
Main entry point for running ptile as a module.

Usage:
    python -m ptile [options] PANE [PANE ...]
"""

from .cli import main

if __name__ == "__main__":
    import sys

    sys.exit(main())

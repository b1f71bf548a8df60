"""
Entry point for running pylox as a module.

Usage:
    python -m pylox [script]
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())

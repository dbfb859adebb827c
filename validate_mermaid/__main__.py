"""Entry point for running validate_mermaid as a module.

Usage:
    python -m validate_mermaid
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())

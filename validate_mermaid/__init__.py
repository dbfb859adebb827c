"""Mermaid diagram validation for documentation.

This package finds ```mermaid fenced blocks in docs/**/*.md and
docs/**/*.mdx and checks each block's syntax with the Mermaid CLI.
Failures are reported per block; the exit status is the verdict.

Usage:
    python -m validate_mermaid
"""

__version__ = "0.1.0"

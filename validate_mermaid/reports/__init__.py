"""Report generators for Mermaid validation results.

- console.py: terminal output (rich), diagnostics on stderr, verdict on stdout
"""

from .console import SUCCESS_MESSAGE, ConsoleReporter

__all__ = ["SUCCESS_MESSAGE", "ConsoleReporter"]

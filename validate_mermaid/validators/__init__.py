"""Validators for Mermaid diagram blocks."""

from .mermaid_syntax import MermaidCliParser, MermaidParser, build_cli_command, validate_block

__all__ = ["MermaidCliParser", "MermaidParser", "build_cli_command", "validate_block"]

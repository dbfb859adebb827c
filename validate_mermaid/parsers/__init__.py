"""Parsers for extracting Mermaid blocks from documentation."""

from .mermaid_blocks import extract_mermaid_blocks, find_unterminated_fences

__all__ = ["extract_mermaid_blocks", "find_unterminated_fences"]

"""Extraction of fenced Mermaid blocks from markdown text.

Blocks are produced lazily in document order. A fence that opens but never
closes yields nothing; ``find_unterminated_fences`` reports where such fences
start so the caller can warn about them.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..config import MERMAID_BLOCK_PATTERN, MERMAID_FENCE_OPEN_PATTERN, MermaidBlock


def _line_number(content: str, offset: int) -> int:
    """Return the 1-based line number of a character offset."""
    return content.count("\n", 0, offset) + 1


def extract_mermaid_blocks(content: str) -> Iterator[MermaidBlock]:
    """Yield every fenced Mermaid block in a document.

    Args:
        content: Full document text

    Yields:
        MermaidBlock with 1-based ordinal, in document order
    """
    for ordinal, match in enumerate(MERMAID_BLOCK_PATTERN.finditer(content), start=1):
        yield MermaidBlock(
            content=match.group(1),
            ordinal=ordinal,
            line=_line_number(content, match.start()),
        )


def find_unterminated_fences(content: str) -> list[int]:
    """Return line numbers of opening Mermaid fences that match no block.

    Args:
        content: Full document text

    Returns:
        1-based line numbers, in document order
    """
    spans = [m.span() for m in MERMAID_BLOCK_PATTERN.finditer(content)]
    lines: list[int] = []

    for match in MERMAID_FENCE_OPEN_PATTERN.finditer(content):
        start = match.start()
        if not any(s <= start < e for s, e in spans):
            lines.append(_line_number(content, start))

    return lines

"""Data model and patterns for Mermaid diagram validation.

This module defines:
- The documentation root and file extensions that are scanned
- Fence patterns for Mermaid code blocks
- Result types for blocks, documents and a whole run
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import EXIT_INVALID_DIAGRAMS, EXIT_OK

if TYPE_CHECKING:
    from re import Pattern


# ============================================================================
# Document Discovery
# ============================================================================

# Equivalent of the glob docs/**/*.{md,mdx}
DOCS_ROOT = Path("docs")
DOC_EXTENSIONS: tuple[str, ...] = (".md", ".mdx")


# ============================================================================
# Fence Patterns
# ============================================================================

# ```mermaid, at least one whitespace character, content (non-greedy), ```
MERMAID_BLOCK_PATTERN: Pattern[str] = re.compile(r"```mermaid\s+(.*?)```", re.DOTALL)

# Opening fence on its own, used to spot fences that never close
MERMAID_FENCE_OPEN_PATTERN: Pattern[str] = re.compile(r"```mermaid\s")


class BlockStatus(Enum):
    """Outcome of checking a single block."""

    VALID = "valid"
    INVALID = "invalid"


@dataclass(frozen=True)
class MermaidBlock:
    """A fenced Mermaid block extracted from a document.

    Attributes:
        content: Diagram source between the opening and closing fences
        ordinal: 1-based position of the block within its document
        line: 1-based line of the opening fence
    """

    content: str
    ordinal: int
    line: int = 0


@dataclass
class BlockResult:
    block: MermaidBlock
    status: BlockStatus
    message: str = ""

    @property
    def is_valid(self) -> bool:
        return self.status == BlockStatus.VALID


@dataclass
class DocumentReport:
    """Validation report for a single document.

    Attributes:
        doc_path: Document path as shown in diagnostics (e.g. docs/a.md)
        results: One result per extracted block, in document order
    """

    doc_path: str
    results: list[BlockResult] = field(default_factory=list)

    @property
    def block_count(self) -> int:
        """Number of blocks checked."""
        return len(self.results)

    @property
    def failures(self) -> list[BlockResult]:
        """Results for blocks the checker rejected."""
        return [r for r in self.results if r.status == BlockStatus.INVALID]

    @property
    def error_count(self) -> int:
        """Count of invalid blocks."""
        return len(self.failures)


@dataclass
class ValidationSummary:
    """Accumulated outcome of a validation run."""

    reports: list[DocumentReport] = field(default_factory=list)

    @property
    def document_count(self) -> int:
        return len(self.reports)

    @property
    def block_count(self) -> int:
        return sum(r.block_count for r in self.reports)

    @property
    def error_count(self) -> int:
        return sum(r.error_count for r in self.reports)

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    @property
    def exit_code(self) -> int:
        """Exit code for the run (0 = all valid, 1 = invalid diagrams found)."""
        return EXIT_INVALID_DIAGRAMS if self.has_errors else EXIT_OK

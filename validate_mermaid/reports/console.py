"""Console output for Mermaid validation results.

Diagnostics go to stderr, the success verdict to stdout. Headline lines are
styled with rich; checker messages bypass rendering and are written to the
console's file unchanged (no markup, emoji codes or tab expansion).
"""

from __future__ import annotations

from rich.console import Console

from ..config import DocumentReport, ValidationSummary

SUCCESS_MESSAGE = "✅ All Mermaid diagrams are valid."


def _plain_console(*, stderr: bool) -> Console:
    return Console(stderr=stderr, markup=False, emoji=False, highlight=False, soft_wrap=True)


class ConsoleReporter:
    """Print per-block diagnostics and the final verdict."""

    def __init__(self, out: Console | None = None, err: Console | None = None) -> None:
        self.out = out or _plain_console(stderr=False)
        self.err = err or _plain_console(stderr=True)

    def report_document(self, report: DocumentReport) -> None:
        """Print two lines for each invalid block in a document."""
        for result in report.failures:
            self.err.print(
                f"❌ Error in file: {report.doc_path} [block #{result.block.ordinal}]",
                style="bold red",
            )
            self._write_verbatim(result.message)

    def _write_verbatim(self, text: str) -> None:
        self.err.file.write(text + "\n")
        self.err.file.flush()

    def report_summary(self, summary: ValidationSummary) -> None:
        """Print the success line; print nothing when any block failed."""
        if summary.has_errors:
            return
        self.out.print(SUCCESS_MESSAGE, style="green")

    def report_fatal(self, message: str) -> None:
        self.err.print(f"Error: {message}", style="bold red")

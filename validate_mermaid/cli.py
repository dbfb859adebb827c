"""CLI interface for Mermaid diagram validation.

Scans docs/**/*.md and docs/**/*.mdx for ```mermaid fenced blocks and checks
each one with the Mermaid CLI.

Usage:
    python -m validate_mermaid
    validate-mermaid

Exit codes:
    0 - all diagrams valid (including when no diagrams were found)
    1 - at least one diagram failed validation
    2 - the run could not complete (invalid configuration, unreadable document,
        Mermaid CLI unavailable or unable to start its browser)
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from . import __version__
from .config import DOC_EXTENSIONS, DOCS_ROOT, DocumentReport, ValidationSummary
from .exceptions import EXIT_FATAL, DocumentReadError, MermaidValidatorError
from .logging import get_logger, sanitize_error, setup_logging
from .parsers import extract_mermaid_blocks, find_unterminated_fences
from .reports import ConsoleReporter
from .settings import get_settings
from .validators import MermaidCliParser, MermaidParser, validate_block

logger = get_logger(__name__)


def _is_hidden(path: Path, root: Path) -> bool:
    return any(part.startswith(".") for part in path.relative_to(root).parts)


def collect_documents(root: Path = DOCS_ROOT) -> list[Path]:
    """Collect all markdown documents under the documentation root.

    Hidden files and directories are skipped. A missing root yields no
    documents.

    Args:
        root: Documentation root directory

    Returns:
        Sorted list of .md and .mdx file paths
    """
    if not root.is_dir():
        logger.info(f"Documentation root not found: {root}")
        return []

    documents = [
        path
        for path in root.rglob("*")
        if path.suffix in DOC_EXTENSIONS and path.is_file() and not _is_hidden(path, root)
    ]
    return sorted(documents)


def read_document(doc_path: Path) -> str:
    """Read a document as UTF-8 text.

    Raises:
        DocumentReadError: If the file cannot be read or decoded
    """
    try:
        return doc_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(doc_path.as_posix(), sanitize_error(e)) from e


def validate_document(doc_path: Path, parser: MermaidParser) -> DocumentReport:
    """Check every Mermaid block in a document.

    Args:
        doc_path: Path to the documentation file
        parser: Syntax checker used for each block

    Returns:
        Document report with one result per block
    """
    report = DocumentReport(doc_path=doc_path.as_posix())
    content = read_document(doc_path)

    for line in find_unterminated_fences(content):
        logger.warning(f"Unterminated mermaid fence in {report.doc_path} at line {line}; skipped")

    for block in extract_mermaid_blocks(content):
        report.results.append(validate_block(block, parser))

    logger.info(
        f"Checked {report.doc_path}: {report.block_count} block(s), {report.error_count} error(s)"
    )
    return report


def validate_documents(
    documents: Iterable[Path],
    parser: MermaidParser,
    reporter: ConsoleReporter | None = None,
) -> ValidationSummary:
    """Validate documents in order and accumulate their reports.

    Args:
        documents: Documents to check
        parser: Syntax checker used for each block
        reporter: Optional reporter that prints each document's failures as
            soon as the document is done

    Returns:
        Summary of the run; its exit_code is the process exit status
    """
    summary = ValidationSummary()

    for doc in documents:
        report = validate_document(doc, parser)
        summary.reports.append(report)
        if reporter is not None:
            reporter.report_document(report)

    return summary


def describe_settings_errors(error: ValidationError) -> str:
    """Summarize settings validation errors by environment variable name."""
    parts = []
    for err in error.errors():
        field = "_".join(str(loc) for loc in err["loc"]).upper()
        parts.append(f"MERMAID_{field}: {err['msg']}")
    return "; ".join(parts)


def main(args: list[str] | None = None, *, parser: MermaidParser | None = None) -> int:
    """Main entry point for CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])
        parser: Syntax checker to use (defaults to the Mermaid CLI)

    Returns:
        Exit code (0 = success, 1 = invalid diagrams, 2 = fatal error)
    """
    arg_parser = argparse.ArgumentParser(
        prog="validate-mermaid",
        description="Validate Mermaid diagrams embedded in docs/**/*.md and docs/**/*.mdx",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment:
    MERMAID_CLI                    Mermaid CLI command (default: mmdc)
    MERMAID_PUPPETEER_CONFIG       Puppeteer config passed to the CLI with -p
    MERMAID_CLI_TIMEOUT_SECONDS    Timeout per diagram (default: 60)
    MERMAID_LOG_LEVEL              Logging level (default: WARNING)
    MERMAID_LOG_JSON               Emit JSON log records (default: false)
        """,
    )
    arg_parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    arg_parser.parse_args(args)

    reporter = ConsoleReporter()

    try:
        settings = get_settings()
    except ValidationError as e:
        reporter.report_fatal(f"Invalid configuration: {describe_settings_errors(e)}")
        return EXIT_FATAL
    setup_logging(settings)

    if parser is None:
        parser = MermaidCliParser(settings)

    documents = collect_documents()
    logger.info(f"Found {len(documents)} document(s) under {DOCS_ROOT.as_posix()}")

    try:
        summary = validate_documents(documents, parser, reporter)
    except MermaidValidatorError as e:
        logger.error(f"Validation aborted: {sanitize_error(e)}")
        reporter.report_fatal(e.message)
        return e.exit_code

    logger.info(
        f"Checked {summary.block_count} block(s) in {summary.document_count} document(s), "
        f"{summary.error_count} error(s)"
    )
    reporter.report_summary(summary)
    return summary.exit_code

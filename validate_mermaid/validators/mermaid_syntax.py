"""Mermaid syntax checking.

The validator depends only on the ``MermaidParser`` protocol: ``parse()``
returns on success and raises ``MermaidSyntaxError`` when the diagram is
rejected. ``MermaidCliParser`` implements it on top of the Mermaid CLI
(``mmdc`` from @mermaid-js/mermaid-cli), which exits non-zero and prints a
parse error when a diagram is invalid.
"""

from __future__ import annotations

import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Protocol

from ..config import BlockResult, BlockStatus, MermaidBlock
from ..exceptions import MermaidCliError, MermaidSyntaxError
from ..logging import get_logger, sanitize_error
from ..settings import Settings, get_settings

logger = get_logger(__name__)

# Puppeteer/Chromium start-up failures reported by mmdc
BROWSER_LAUNCH_MARKERS: tuple[str, ...] = (
    "Failed to launch the browser process",
    "No usable sandbox",
    "Could not find Chrome",
    "Could not find Chromium",
    "Could not find expected browser",
    "Browser was not found",
)


def is_browser_launch_failure(output: str) -> bool:
    """Return True if CLI output reports that the headless browser did not start."""
    return any(marker in output for marker in BROWSER_LAUNCH_MARKERS)


class MermaidParser(Protocol):
    """Capability that checks Mermaid diagram source."""

    def parse(self, source: str) -> None:
        """Raise MermaidSyntaxError if ``source`` is not a valid diagram."""
        ...


def build_cli_command(
    cli: str,
    input_file: Path,
    output_file: Path,
    puppeteer_config: Path | None = None,
) -> list[str]:
    """Build the argument list for one Mermaid CLI invocation.

    Args:
        cli: CLI command, possibly multi-word (e.g. "npx --yes @mermaid-js/mermaid-cli")
        input_file: Diagram source file
        output_file: Rendered output file (discarded)
        puppeteer_config: Optional puppeteer config file

    Returns:
        Argument list suitable for subprocess.run
    """
    args = shlex.split(cli)
    args.extend(["-i", str(input_file), "-o", str(output_file), "--quiet"])
    if puppeteer_config is not None:
        args.extend(["-p", str(puppeteer_config)])
    return args


class MermaidCliParser:
    """Check diagrams by running them through the Mermaid CLI."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or get_settings()
        self.cli = settings.cli
        self.puppeteer_config = settings.puppeteer_config
        self.timeout = settings.cli_timeout_seconds
        self._available = False

    def ensure_available(self) -> None:
        """Raise MermaidCliError if the CLI executable cannot be found."""
        if self._available:
            return
        executable = shlex.split(self.cli)[0]
        if shutil.which(executable) is None:
            raise MermaidCliError(
                f"Mermaid CLI not found: {executable!r}; install @mermaid-js/mermaid-cli "
                "or set MERMAID_CLI",
                command=self.cli,
            )
        self._available = True

    def parse(self, source: str) -> None:
        # Checked on first use so runs without any diagram never need the CLI
        self.ensure_available()

        with tempfile.TemporaryDirectory(prefix="validate-mermaid-") as tmp:
            input_file = Path(tmp) / "diagram.mmd"
            output_file = Path(tmp) / "diagram.svg"
            input_file.write_text(source, encoding="utf-8")

            cmd = build_cli_command(self.cli, input_file, output_file, self.puppeteer_config)
            logger.debug(f"Running Mermaid CLI: {shlex.join(cmd)}")

            try:
                result = subprocess.run(  # noqa: S603  # command comes from settings
                    cmd,
                    check=False,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                )
            except FileNotFoundError as e:
                raise MermaidCliError(f"Mermaid CLI not found: {e}", command=self.cli) from e
            except subprocess.TimeoutExpired as e:
                raise MermaidCliError(
                    f"Mermaid CLI timed out after {self.timeout:g}s",
                    command=self.cli,
                ) from e

        if result.returncode != 0:
            message = (result.stderr or "").strip() or (result.stdout or "").strip()
            if is_browser_launch_failure(message):
                raise MermaidCliError(
                    f"Mermaid CLI could not start its browser: {sanitize_error(message)}",
                    command=self.cli,
                )
            raise MermaidSyntaxError(
                message or f"Mermaid CLI exited with status {result.returncode}",
                details={"returncode": result.returncode},
            )


def validate_block(block: MermaidBlock, parser: MermaidParser) -> BlockResult:
    """Check one block with the given parser.

    Syntax errors are captured in the result; any other error propagates.

    Args:
        block: Block to check
        parser: Syntax checker

    Returns:
        BlockResult with status VALID or INVALID
    """
    try:
        parser.parse(block.content)
    except MermaidSyntaxError as e:
        logger.debug(f"Block #{block.ordinal} (line {block.line}) rejected: {sanitize_error(e)}")
        return BlockResult(block=block, status=BlockStatus.INVALID, message=e.message)

    return BlockResult(block=block, status=BlockStatus.VALID)

"""Shared fixtures for validate_mermaid tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from validate_mermaid import logging as validate_mermaid_logging
from validate_mermaid.exceptions import MermaidSyntaxError
from validate_mermaid.settings import get_settings

INVALID_MARKER = "not-real-syntax"

VALID_FLOWCHART = "flowchart LR\n    A[Start] --> B[End]\n"
INVALID_FLOWCHART = "graph TD; A--not-real-syntax-->\n"


def mermaid_fence(source: str) -> str:
    """Wrap diagram source in a ```mermaid fence."""
    return f"```mermaid\n{source}```\n"


class StubParser:
    """Syntax checker that rejects any source containing INVALID_MARKER."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def parse(self, source: str) -> None:
        self.calls.append(source)
        if INVALID_MARKER in source:
            raise MermaidSyntaxError("Parse error on line 1:\n...A--not-real-syntax-->\nExpecting 'NODE_STRING'")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch, None, None]:
    """Clear MERMAID_* variables and the settings cache around each test."""
    for var in (
        "MERMAID_CLI",
        "MERMAID_PUPPETEER_CONFIG",
        "MERMAID_CLI_TIMEOUT_SECONDS",
        "MERMAID_LOG_LEVEL",
        "MERMAID_LOG_JSON",
    ):
        monkeypatch.delenv(var, raising=False)

    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger() -> Generator[None, None, None]:
    """Remove the handler installed by setup_logging() and restore the root level."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    if validate_mermaid_logging._console_handler is not None:
        root_logger.removeHandler(validate_mermaid_logging._console_handler)
        validate_mermaid_logging._console_handler = None
    root_logger.setLevel(level)


@pytest.fixture
def stub_parser() -> StubParser:
    return StubParser()


@pytest.fixture
def write_doc(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Callable[[str, str], Path]:
    """Run the test from tmp_path and return a helper that writes docs/<name>.

    The returned path is relative to tmp_path, e.g. docs/a.md.
    """
    monkeypatch.chdir(tmp_path)

    def _write(name: str, content: str) -> Path:
        path = Path("docs") / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write

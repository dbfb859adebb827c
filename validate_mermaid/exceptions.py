"""Exception hierarchy for Mermaid diagram validation.

Every error carries a human-readable ``message`` and the process ``exit_code``
the CLI returns when the error aborts a run. ``MermaidSyntaxError`` is the only
recoverable error: it marks a single block as invalid and the scan continues.
"""

from __future__ import annotations

from typing import Any

EXIT_OK = 0
EXIT_INVALID_DIAGRAMS = 1
EXIT_FATAL = 2


class MermaidValidatorError(Exception):
    """Base exception for all validator errors."""

    default_message: str = "Mermaid validation failed"
    default_exit_code: int = EXIT_FATAL

    def __init__(
        self,
        message: str | None = None,
        *,
        exit_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.exit_code = exit_code if exit_code is not None else self.default_exit_code
        self.details = details or {}
        super().__init__(self.message)


class MermaidSyntaxError(MermaidValidatorError):
    """Raised by a syntax checker when diagram source is rejected."""

    default_message = "Invalid Mermaid syntax"
    default_exit_code = EXIT_INVALID_DIAGRAMS


class DocumentReadError(MermaidValidatorError):
    default_message = "Cannot read document"

    def __init__(self, path: str, reason: str | None = None, **kwargs: Any) -> None:
        self.path = path
        message = f"Cannot read document {path}"
        if reason:
            message = f"{message}: {reason}"
        details = kwargs.pop("details", {}) or {}
        details["path"] = path
        super().__init__(message, details=details, **kwargs)


class MermaidCliError(MermaidValidatorError):
    """The Mermaid CLI could not be run (missing executable, timeout)."""

    default_message = "Mermaid CLI failed to run"

    def __init__(self, message: str | None = None, *, command: str | None = None, **kwargs: Any) -> None:
        details = kwargs.pop("details", {}) or {}
        if command:
            details["command"] = command
        super().__init__(message, details=details, **kwargs)

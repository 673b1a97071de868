"""Error types and formatting for the pagecraft command line."""

from __future__ import annotations

import traceback
from typing import Any, Dict, Optional

from ..errors import PageCraftError

_CLI_TRACE_LIMIT = 4000


class CLIError(Exception):
    """Base exception for CLI operations, carrying a code and an optional hint."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        hint: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.hint = hint
        self.context = context or {}

    def __str__(self) -> str:
        return self.message


class CLIValidationError(CLIError):
    """Invalid combination of command arguments."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("code", "CLI_VALIDATION_ERROR")
        super().__init__(message, **kwargs)


class CLIFileNotFoundError(CLIError):
    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("code", "CLI_FILE_NOT_FOUND")
        super().__init__(message, **kwargs)


def format_cli_error(exc: BaseException, *, verbose: bool = False) -> str:
    """Format an exception for stderr, with hints and optional traceback."""

    lines = []
    if isinstance(exc, PageCraftError):
        lines.append(f"Error: {exc.format()}")
    elif isinstance(exc, CLIError):
        lines.append(f"Error [{exc.code}]: {exc.message}")
        if exc.hint:
            lines.append(f"Hint: {exc.hint}")
        if verbose and exc.context:
            lines.append("Context:")
            for key, value in exc.context.items():
                lines.append(f"  {key}: {value}")
    else:
        lines.append(f"Error: {exc.__class__.__name__}: {exc}")

    if verbose:
        trace = traceback.format_exc().strip()
        if len(trace) > _CLI_TRACE_LIMIT:
            trace = f"{trace[:_CLI_TRACE_LIMIT - 3]}..."
        lines.append("Traceback:")
        lines.append(trace)
    return "\n".join(lines)


__all__ = ["CLIError", "CLIValidationError", "CLIFileNotFoundError", "format_cli_error"]

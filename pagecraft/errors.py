"""Unified error model for pagecraft."""

from __future__ import annotations

from typing import Optional, Sequence


class PageCraftError(Exception):
    """Base class for all compiler errors surfaced to callers."""

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        components = [self.message]
        meta_parts = []
        if self.path:
            meta_parts.append(self.path)
        if self.code:
            meta_parts.append(self.code)
        if meta_parts:
            components[-1] = f"{components[-1]} ({'; '.join(meta_parts)})"
        if self.hint:
            components.append(f"Hint: {self.hint}")
        return " ".join(part for part in components if part)


class MalformedPathError(PageCraftError):
    """Raised when a variable path contains an unterminated ``[``."""

    code = "PARSE_MALFORMED_PATH"

    def __init__(self, expression: str, *, position: Optional[int] = None, **kwargs) -> None:
        super().__init__(f"Unclosed bracket in path: {expression}", **kwargs)
        self.expression = expression
        self.position = position


class PageDefinitionError(PageCraftError):
    """Raised when an input page definition fails validation."""

    code = "INPUT_INVALID"


class ConfigError(PageCraftError):
    """Raised when the workspace configuration cannot be used."""

    code = "CONFIG_INVALID"


class ExportIOError(PageCraftError):
    """Raised when an archive or one of its files cannot be written."""

    code = "EXPORT_IO"

    def __init__(self, message: str, *, filename: Optional[str] = None, **kwargs) -> None:
        kwargs.setdefault("path", filename)
        super().__init__(message, **kwargs)
        self.filename = filename


class PageExportError(PageCraftError):
    """Raised when generating a single page fails; aborts the export call."""

    code = "EXPORT_PAGE"

    def __init__(self, message: str, *, page_name: str, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.page_name = page_name


class ExportCancelledError(PageCraftError):
    """Raised when a site export observes its cancellation signal."""

    code = "EXPORT_CANCELLED"

    def __init__(self, message: str, *, completed: Sequence[str] = (), **kwargs) -> None:
        kwargs.setdefault("hint", "No archive was produced; rerun the export to completion.")
        super().__init__(message, **kwargs)
        self.completed = list(completed)


__all__ = [
    "PageCraftError",
    "MalformedPathError",
    "PageDefinitionError",
    "ConfigError",
    "ExportIOError",
    "PageExportError",
    "ExportCancelledError",
]

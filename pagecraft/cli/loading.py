"""Input loading helpers shared by CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional, Sequence

from ..model import SitePage, load_site_page_file
from ..templating import DataContext
from .errors import CLIFileNotFoundError, CLIValidationError


def _existing(path_str: str) -> Path:
    path = Path(path_str)
    if not path.exists():
        raise CLIFileNotFoundError(
            f"File not found: {path}",
            hint="Pass the path of a page definition JSON file.",
            context={"path": str(path)},
        )
    return path


def load_pages(paths: Sequence[str]) -> List[SitePage]:
    if not paths:
        raise CLIValidationError("At least one page file is required")
    return [load_site_page_file(_existing(path)) for path in paths]


def load_json(path_str: str) -> Any:
    path = _existing(path_str)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise CLIValidationError(
            f"{path} is not valid JSON: {exc.msg} (line {exc.lineno})",
            context={"path": str(path)},
        ) from exc


def load_context(path_str: Optional[str]) -> DataContext:
    if not path_str:
        return DataContext()
    payload = load_json(path_str)
    if not isinstance(payload, dict):
        raise CLIValidationError("Context file must contain a JSON object", context={"path": path_str})
    return DataContext.from_dict(payload)


__all__ = ["load_pages", "load_json", "load_context"]

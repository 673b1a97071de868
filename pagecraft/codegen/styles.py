"""CSS and HTML text helpers shared by both generators."""

from __future__ import annotations

import html
import re
from typing import Any, Mapping, Optional

_UPPER_RE = re.compile(r"([A-Z])")


def camel_to_kebab(name: str) -> str:
    """``backgroundColor`` -> ``background-color``."""
    return _UPPER_RE.sub(r"-\1", name).lower()


def _present(value: Any) -> bool:
    return value is not None and value != ""


def style_string(styles: Optional[Mapping[str, Any]]) -> str:
    """Join style entries as ``kebab-key: value`` with ``"; "``, skipping blank values."""

    if not styles:
        return ""
    return "; ".join(
        f"{camel_to_kebab(key)}: {value}" for key, value in styles.items() if _present(value)
    )


def style_attr(styles: Optional[Mapping[str, Any]]) -> str:
    """`` style="..."`` with a leading space, or ``""`` when there is nothing to emit."""

    inline = style_string(styles)
    return f' style="{inline}"' if inline else ""


def css_variables_block(variables: Optional[Mapping[str, Any]], indent: str = "") -> str:
    """Render ``{"primary": "#333"}`` as ``:root { --primary: #333; }``."""

    if not variables:
        return ""
    lines = [f"{indent}:root {{"]
    for name, value in variables.items():
        if not _present(value):
            continue
        prop = name if name.startswith("--") else f"--{name}"
        lines.append(f"{indent}  {prop}: {value};")
    lines.append(f"{indent}}}")
    return "\n".join(lines)


def escape_html(value: Any) -> str:
    """Escape ``& < > " '`` for text content."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)


def escape_attr(value: Any) -> str:
    """Escape for a double-quoted attribute; single quotes stay literal.

    Server expressions such as ``${dataSources['products']}`` keep their
    quoting intact.
    """
    if value is None:
        return ""
    return (
        str(value)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


__all__ = [
    "camel_to_kebab",
    "style_string",
    "style_attr",
    "css_variables_block",
    "escape_html",
    "escape_attr",
]

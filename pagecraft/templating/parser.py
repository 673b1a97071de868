"""Parser for the ``{{path.to.value | filter:arg}}`` expression language.

Parsing happens in two layers:

* :func:`tokenize_template` scans a string for well-formed ``{{...}}``
  pairs and splits it into literal text and raw expression bodies.  An
  unterminated ``{{`` is never matched and stays inside the surrounding
  text.
* :func:`parse_variable_expression` / :func:`parse_variable_path` turn a
  body into a path (segment list) and an ordered filter chain.

Only a malformed bracket path (``items[0``) is an error; it raises
:class:`~pagecraft.errors.MalformedPathError` for the field being parsed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Tuple

from ..errors import MalformedPathError
from .nodes import TemplateNode, TextNode, VariableNode

VARIABLE_PATTERN = re.compile(r"\{\{([^}]+)\}\}")
FILTER_SEPARATOR = "|"


@dataclass(frozen=True)
class TemplateToken:
    """A raw span of a template: ``text`` or an untrimmed ``expression`` body."""

    kind: str
    value: str

    @property
    def is_expression(self) -> bool:
        return self.kind == "expression"


def tokenize_template(template: str) -> List[TemplateToken]:
    """Split ``template`` into text and expression tokens without parsing paths."""

    tokens: List[TemplateToken] = []
    last_index = 0
    for match in VARIABLE_PATTERN.finditer(template):
        if match.start() > last_index:
            tokens.append(TemplateToken("text", template[last_index:match.start()]))
        tokens.append(TemplateToken("expression", match.group(1)))
        last_index = match.end()
    if last_index < len(template):
        tokens.append(TemplateToken("text", template[last_index:]))
    return tokens


def parse_template(template: Any) -> List[TemplateNode]:
    """Parse a template string into :class:`TextNode` and :class:`VariableNode` items.

    Non-string input is treated as literal text.
    """

    if not isinstance(template, str):
        return [TextNode(str(template))]

    nodes: List[TemplateNode] = []
    for token in tokenize_template(template):
        if not token.is_expression:
            nodes.append(TextNode(token.value))
            continue
        expression = token.value.strip()
        path, filters = parse_variable_expression(expression)
        nodes.append(VariableNode(expression=expression, path=tuple(path), filters=tuple(filters)))
    return nodes


def _split_top_level(expression: str, separator: str) -> List[str]:
    parts: List[str] = []
    current: List[str] = []
    depth = 0
    quote = ""
    for char in expression:
        if quote:
            if char == quote:
                quote = ""
        elif char in "'\"" and depth:
            quote = char
        elif char == "[":
            depth += 1
        elif char == "]" and depth:
            depth -= 1
        elif char == separator and not depth:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def split_filter_chain(expression: str) -> List[str]:
    """Split on ``|`` outside brackets; the first part is the path text."""

    return [part.strip() for part in _split_top_level(expression, FILTER_SEPARATOR)]


def parse_variable_expression(expression: str) -> Tuple[List[str], List[str]]:
    """Split ``"user.name | uppercase"`` into a path and its filter specs."""

    parts = split_filter_chain(expression)
    path = parse_variable_path(parts[0])
    filters = [part for part in parts[1:] if part]
    return path, filters


def parse_variable_path(path_str: str) -> List[str]:
    """Parse ``items[0].title`` / ``data['key']`` into path segments."""

    segments: List[str] = []
    current = ""
    i = 0
    while i < len(path_str):
        char = path_str[i]
        if char == ".":
            if current:
                segments.append(current)
                current = ""
            i += 1
        elif char == "[":
            if current:
                segments.append(current)
                current = ""
            close = path_str.find("]", i)
            if close == -1:
                raise MalformedPathError(path_str, position=i)
            index_part = path_str[i + 1:close]
            if len(index_part) >= 2 and index_part[0] == index_part[-1] and index_part[0] in "'\"":
                index_part = index_part[1:-1]
            segments.append(index_part)
            i = close + 1
        else:
            current += char
            i += 1
    if current:
        segments.append(current)
    return segments


def extract_variables(template: Any) -> List[str]:
    """Return the pre-filter path expression of every variable in ``template``."""

    if not isinstance(template, str):
        return []
    return [
        split_filter_chain(token.value)[0]
        for token in tokenize_template(template)
        if token.is_expression
    ]


def has_template_variables(value: Any) -> bool:
    return isinstance(value, str) and VARIABLE_PATTERN.search(value) is not None


def get_all_variable_paths(obj: Any) -> List[str]:
    """Collect unique variable paths from a nested structure, in first-seen order."""

    seen: List[str] = []

    def _traverse(value: Any) -> None:
        if isinstance(value, str):
            for path in extract_variables(value):
                if path not in seen:
                    seen.append(path)
        elif isinstance(value, dict):
            _traverse_all(value.values())
        elif isinstance(value, (list, tuple)):
            _traverse_all(value)

    def _traverse_all(values: Iterable[Any]) -> None:
        for item in values:
            _traverse(item)

    _traverse(obj)
    return seen


__all__ = [
    "VARIABLE_PATTERN",
    "TemplateToken",
    "tokenize_template",
    "parse_template",
    "parse_variable_expression",
    "parse_variable_path",
    "split_filter_chain",
    "extract_variables",
    "has_template_variables",
    "get_all_variable_paths",
]

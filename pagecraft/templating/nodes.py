"""Parsed template nodes produced by :mod:`pagecraft.templating.parser`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class TextNode:
    """Literal text copied through unchanged."""

    value: str


@dataclass(frozen=True)
class VariableNode:
    """A ``{{path | filter:arg}}`` expression.

    ``expression`` keeps the trimmed body exactly as written so callers
    that rewrite bindings (rather than evaluate them) can reuse it.
    """

    expression: str
    path: Tuple[str, ...]
    filters: Tuple[str, ...] = ()

    @property
    def path_expression(self) -> str:
        """The body text before the first top-level filter separator."""
        from .parser import split_filter_chain

        return split_filter_chain(self.expression)[0]


TemplateNode = Union[TextNode, VariableNode]

__all__ = ["TextNode", "VariableNode", "TemplateNode"]

"""Layered data context used to resolve template expressions."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class DataContext:
    """Read-only lookup surface for expression resolution.

    Layers are never mutated by resolution.  Iteration scopes are created
    with :meth:`for_item`, which returns a new context.
    """

    data_sources: Mapping[str, Any] = field(default_factory=dict)
    item: Any = None
    index: Optional[int] = None
    shared_data: Mapping[str, Any] = field(default_factory=dict)
    user: Any = None

    def for_item(self, item: Any, index: Optional[int] = None) -> "DataContext":
        return replace(self, item=item, index=index)

    @classmethod
    def from_dict(cls, payload: Optional[Mapping[str, Any]]) -> "DataContext":
        """Build a context from camelCase or snake_case keys."""

        payload = payload or {}

        def _pick(*keys: str) -> Any:
            for key in keys:
                if key in payload:
                    return payload[key]
            return None

        index = _pick("index")
        return cls(
            data_sources=dict(_pick("dataSources", "data_sources") or {}),
            item=_pick("item"),
            index=int(index) if isinstance(index, (int, float)) and not isinstance(index, bool) else None,
            shared_data=dict(_pick("sharedData", "shared_data", "shared") or {}),
            user=_pick("user"),
        )


__all__ = ["DataContext"]

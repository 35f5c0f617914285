"""Render requests: one titled value per top-level section."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping

from .errors import ObjectViewError


class InvalidRequestError(ObjectViewError, ValueError):
    """A request could not be interpreted as a ``(title, value)`` pair."""


@dataclass(frozen=True)
class RenderRequest:
    """A value to render together with the title of its top-level section."""

    title: str
    value: Any = None

    def __post_init__(self):
        if not isinstance(self.title, str) or not self.title.strip():
            raise InvalidRequestError(f"title must be a non-empty string, got {self.title!r}")


def coerce_request(item: Any) -> RenderRequest:
    """Accept a ``RenderRequest``, a ``(title, value)`` pair or a ``{"title", "value"}`` mapping."""
    if isinstance(item, RenderRequest):
        return item
    if isinstance(item, Mapping):
        if "title" not in item:
            raise InvalidRequestError(f"request mapping has no 'title': {sorted(map(str, item))}")
        return RenderRequest(item["title"], item.get("value"))
    if isinstance(item, tuple) and len(item) == 2:
        return RenderRequest(item[0], item[1])
    raise InvalidRequestError(f"cannot interpret {type(item).__name__} as a render request")


def coerce_requests(items: Iterable[Any] | None) -> List[RenderRequest]:
    return [coerce_request(item) for item in (items or [])]


__all__ = ["InvalidRequestError", "RenderRequest", "coerce_request", "coerce_requests"]

"""Public rendering entry points.

Each call samples the process-wide configuration once (or uses the explicit
``config``) and renders everything with that snapshot."""

from __future__ import annotations

import itertools
from typing import Any, Iterable

from .core.context import RenderConfig
from .renderers.document import DocumentAssembler
from .utils.config import current_config

# Numbers every fragment so fragments embedded in one page never share section ids
_fragment_numbers = itertools.count(1)


def _assembler(config: RenderConfig | None) -> DocumentAssembler:
    return DocumentAssembler(
        config=config,
        config_source=current_config,
        id_prefix=f"ov{next(_fragment_numbers)}",
    )


def show_objects(requests: Iterable[Any] | None, config: RenderConfig | None = None) -> str:
    """Render a list of titled values into one HTML fragment.

    Parameters:
        requests: ``RenderRequest`` objects, ``(title, value)`` tuples or
            ``{"title": ..., "value": ...}`` mappings.
        config: optional explicit configuration; the global settings are used otherwise.

    Return:
        str: embeddable fragment with its own style and script blocks."""
    return _assembler(config).assemble(requests)


def show_object(title: str, value: Any, config: RenderConfig | None = None) -> str:
    """One-element convenience wrapper around ``show_objects``."""
    return show_objects([(title, value)], config=config)


def render_page(
    requests: Iterable[Any] | None,
    title: str = "Object view",
    config: RenderConfig | None = None,
) -> str:
    """Like ``show_objects`` but wrapped in a standalone HTML document."""
    return _assembler(config).render_page(requests, title=title)


__all__ = ["render_page", "show_object", "show_objects"]

"""Document assembler: many titled values → one self-contained HTML fragment."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List

from loguru import logger

from ..core.context import RenderConfig, TraversalContext
from ..core.identifiers import IdentifierMinter
from ..core.request import RenderRequest, coerce_requests
from .assets import CSS
from .collapsible import CollapsibleSectionBuilder, GlueBuffer
from .table_renderer import TableRenderer, describe
from .tags import as_body, as_div, as_head, as_html, as_meta, as_script, as_style, as_title, attr, escape_text


class DocumentAssembler:
    """Combines top-level sections with one style block and one script block.

    The configuration is read once per ``assemble`` call: either the explicit
    ``config`` handed to the constructor, or whatever ``config_source`` returns
    at the moment the call starts."""

    def __init__(
        self,
        config: RenderConfig | None = None,
        config_source: Callable[[], RenderConfig] | None = None,
        id_prefix: str = "",
    ):
        self.config = config
        self.config_source = config_source or RenderConfig
        # Distinguishes documents that end up embedded in the same page
        self.id_prefix = id_prefix

    def snapshot(self) -> RenderConfig:
        return self.config if self.config is not None else self.config_source()

    def assemble(self, requests: Iterable[Any] | None) -> str:
        """Render every request in order into a single fragment.

        Parameters:
            requests: ``RenderRequest`` objects, ``(title, value)`` tuples or
                ``{"title", "value"}`` mappings. An empty list is fine.

        Return:
            str: style block, the sections, and the script wiring all of them."""
        items = coerce_requests(requests)
        config = self.snapshot()
        minter = IdentifierMinter(self.id_prefix)
        glue = GlueBuffer()
        sections = CollapsibleSectionBuilder(glue)
        renderer = TableRenderer(minter, sections)

        rendered: List[str] = []
        for request in items:
            rendered.append(self._render_request(request, config, renderer, minter, sections))

        logger.debug(
            f"ObjectView: assembled {len(items)} request(s), depth_limit={config.depth_limit}, "
            f"show_functions={config.show_functions}, sections={len(glue)}, truncations={renderer.truncations}"
        )
        return as_div(
            [attr("class", "ov-document")],
            as_style([], CSS)
            + as_div([attr("class", "ov-sections")], "".join(rendered))
            + as_script([], glue.script()),
        )

    @staticmethod
    def _render_request(
        request: RenderRequest,
        config: RenderConfig,
        renderer: TableRenderer,
        minter: IdentifierMinter,
        sections: CollapsibleSectionBuilder,
    ) -> str:
        identifier = minter.mint(request.title, 0)
        ctx = TraversalContext(config=config, current_depth=0)
        inner = renderer.render_value(request.value, ctx)
        return sections.wrap(identifier, request.title, inner, describe(request.value))

    def render_page(self, requests: Iterable[Any] | None, title: str = "Object view") -> str:
        """Standalone HTML document around ``assemble``."""
        head = as_head([], as_meta([attr("charset", "utf-8")]) + as_title([], escape_text(title)))
        return "<!DOCTYPE html>\n" + as_html([attr("lang", "en")], head + as_body([], self.assemble(requests)))


__all__ = ["DocumentAssembler"]

"""Collapsible section builder and the glue buffer that pairs with it."""

from __future__ import annotations

from typing import List

from .assets import HIDDEN_STYLE, build_script, glue_snippet
from .tags import as_div, as_img, as_small, as_span, attr, escape_text


class GlueBuffer:
    """Collects one glue snippet per wrapped section, in creation order."""

    def __init__(self):
        self.identifiers: List[str] = []
        self.snippets: List[str] = []

    def register(self, identifier: str) -> str:
        snippet = glue_snippet(identifier)
        self.identifiers.append(identifier)
        self.snippets.append(snippet)
        return snippet

    def rollback(self, count: int):
        """Forget every snippet registered after the first ``count``."""
        del self.identifiers[count:]
        del self.snippets[count:]

    def script(self) -> str:
        return build_script(self.snippets)

    def __len__(self) -> int:
        return len(self.snippets)


def toggle_icon(identifier: str, label: str = "toggle") -> str:
    """Icon bound to ``identifier``; its image source is assigned by the glue at load time."""
    return as_img([
        attr("class", "ov-icon"),
        attr("data-ov-target", identifier),
        attr("alt", label),
        attr("title", label),
    ])


class CollapsibleSectionBuilder:
    """Wraps rendered tables in titled containers that start collapsed.

    Every call to ``wrap`` registers exactly one glue snippet for the identifier
    it was given, so containers and glue never drift apart."""

    def __init__(self, glue: GlueBuffer | None = None):
        self.glue = glue if glue is not None else GlueBuffer()

    def wrap(self, identifier: str, title: str, inner_html: str, summary: str = "") -> str:
        """Build the container for ``inner_html``.

        Parameters:
            identifier: minted section id, used for the hidden body element.
            title: text shown in the header (escaped here).
            inner_html: already rendered markup placed inside the body.
            summary: optional short description shown next to the title.

        Return:
            str: container markup; the body is hidden until toggled."""
        self.glue.register(identifier)
        header = as_div(
            [attr("class", "ov-header")],
            toggle_icon(identifier, f"toggle {title}")
            + as_span([attr("class", "ov-title")], escape_text(title))
            + (as_small([], escape_text(summary)) if summary else ""),
        )
        body = as_div(
            [attr("class", "ov-body"), attr("id", identifier), attr("style", HIDDEN_STYLE)],
            inner_html,
        )
        return as_div([attr("class", "ov-box"), attr("id", f"{identifier}-box")], header + body)


__all__ = ["CollapsibleSectionBuilder", "GlueBuffer", "toggle_icon"]

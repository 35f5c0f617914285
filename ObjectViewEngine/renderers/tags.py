"""Tiny HTML element builder.

``Element`` turns a structured description (tag, attributes, content) into a tag
string. Attribute values pass through ``attr`` which escapes them; content is
inserted as given, callers escape text with ``escape_text`` before nesting it."""

from __future__ import annotations

import html
import re
from dataclasses import dataclass, field
from typing import Any, Callable, List, Sequence

from ..core.errors import TagError

_TAG_NAME = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")
_ATTR_NAME = re.compile(r"^[A-Za-z_:][A-Za-z0-9_.:-]*$")

VOID_ELEMENTS = frozenset(
    {"area", "base", "br", "col", "embed", "hr", "img", "input", "link", "meta", "source", "track", "wbr"}
)


def escape_text(value: Any) -> str:
    """Escape a value for an HTML text context."""
    return html.escape(value if isinstance(value, str) else str(value), quote=False)


def escape_attr(value: Any) -> str:
    """Escape a value for a double-quoted attribute and flatten newlines."""
    escaped = html.escape(value if isinstance(value, str) else str(value), quote=True)
    return escaped.replace("\n", " ").replace("\r", " ")


def attr(name: str, value: Any = None) -> str:
    """Build one ``name="value"`` pair; a ``None`` value yields a bare boolean attribute."""
    if not _ATTR_NAME.match(name):
        raise TagError(name)
    if value is None:
        return name
    return f'{name}="{escape_attr(value)}"'


@dataclass
class Element:
    """Structured description of one HTML element."""

    tag: str
    attributes: List[str] = field(default_factory=list)
    content: str = ""

    def __post_init__(self):
        if not isinstance(self.tag, str) or not _TAG_NAME.match(self.tag):
            raise TagError(self.tag)
        self.tag = self.tag.lower()

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_ELEMENTS

    def render(self) -> str:
        attrs = "".join(f" {item}" for item in self.attributes if item)
        if self.is_void:
            return f"<{self.tag}{attrs}>"
        return f"<{self.tag}{attrs}>{self.content}</{self.tag}>"

    def __str__(self) -> str:
        return self.render()


TagFunction = Callable[..., str]


def as_html_el(tag: str) -> TagFunction:
    """Return a builder ``(attributes, content) -> str`` for ``tag``.

    The tag name is validated up front so a typo fails at definition time.
    Void elements ignore ``content``."""
    Element(tag)

    def build(attributes: Sequence[str] | None = None, content: Any = "") -> str:
        return Element(tag, list(attributes or []), "" if content is None else str(content)).render()

    build.__name__ = f"as_{tag.lower().replace('-', '_')}"
    return build


as_div = as_html_el("div")
as_span = as_html_el("span")
as_small = as_html_el("small")
as_img = as_html_el("img")
as_table = as_html_el("table")
as_thead = as_html_el("thead")
as_tbody = as_html_el("tbody")
as_tr = as_html_el("tr")
as_th = as_html_el("th")
as_td = as_html_el("td")
as_style = as_html_el("style")
as_script = as_html_el("script")
as_title = as_html_el("title")
as_meta = as_html_el("meta")
as_head = as_html_el("head")
as_body = as_html_el("body")
as_html = as_html_el("html")


__all__ = [
    "Element",
    "TagFunction",
    "VOID_ELEMENTS",
    "as_html_el",
    "attr",
    "escape_attr",
    "escape_text",
    "as_div",
    "as_span",
    "as_small",
    "as_img",
    "as_table",
    "as_thead",
    "as_tbody",
    "as_tr",
    "as_th",
    "as_td",
    "as_style",
    "as_script",
    "as_title",
    "as_meta",
    "as_head",
    "as_body",
    "as_html",
]

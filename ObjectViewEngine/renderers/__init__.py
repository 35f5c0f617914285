"""Object View Engine renderer collection.

TableRenderer turns values into nested tables, CollapsibleSectionBuilder wraps
them in toggleable containers and DocumentAssembler stitches whole fragments."""

from .collapsible import CollapsibleSectionBuilder, GlueBuffer
from .document import DocumentAssembler
from .table_renderer import TableRenderer, describe, entries_of, size_of
from .tags import Element, as_body, as_html, as_html_el

__all__ = [
    "CollapsibleSectionBuilder",
    "GlueBuffer",
    "DocumentAssembler",
    "TableRenderer",
    "describe",
    "entries_of",
    "size_of",
    "Element",
    "as_body",
    "as_html",
    "as_html_el",
]

"""Object View Engine.

Renders arbitrary, possibly cyclic Python object graphs as self-contained HTML:
nested tables inside collapsible sections, bounded by a depth limit and never
calling back into the process that produced them."""

from .core.classifier import UNDEFINED, Kind, classify, type_of
from .core.context import RenderConfig
from .core.errors import ObjectViewError, TagError
from .core.request import InvalidRequestError, RenderRequest
from .utils.config import get_depth_limit, hide_fns, set_depth_limit, show_fns
from .viewer import render_page, show_object, show_objects

__version__ = "1.0.0"
__author__ = "Object View Engine Team"

__all__ = [
    "UNDEFINED",
    "Kind",
    "classify",
    "type_of",
    "RenderConfig",
    "RenderRequest",
    "ObjectViewError",
    "TagError",
    "InvalidRequestError",
    "get_depth_limit",
    "set_depth_limit",
    "show_fns",
    "hide_fns",
    "render_page",
    "show_object",
    "show_objects",
]

"""Object View Engine core: value classification, traversal state and identifiers.

Renderers build on these pieces; nothing here produces markup."""

from .classifier import (
    AMBIENT_SINGLETONS,
    EXPANDABLE_KINDS,
    UNDEFINED,
    Classification,
    Kind,
    classify,
    is_array,
    is_bigint,
    is_boolean,
    is_expandable,
    is_function,
    is_map,
    is_null,
    is_number,
    is_numeric,
    is_object,
    is_other,
    is_set,
    is_string,
    is_symbol,
    is_undefined,
    type_of,
)
from .context import RenderConfig, TraversalContext
from .errors import ObjectViewError, TagError
from .identifiers import IdentifierMinter, slugify
from .request import InvalidRequestError, RenderRequest, coerce_request, coerce_requests

__all__ = [
    "AMBIENT_SINGLETONS",
    "EXPANDABLE_KINDS",
    "UNDEFINED",
    "Classification",
    "Kind",
    "classify",
    "type_of",
    "is_array",
    "is_bigint",
    "is_boolean",
    "is_expandable",
    "is_function",
    "is_map",
    "is_null",
    "is_number",
    "is_numeric",
    "is_object",
    "is_other",
    "is_set",
    "is_string",
    "is_symbol",
    "is_undefined",
    "RenderConfig",
    "TraversalContext",
    "ObjectViewError",
    "TagError",
    "IdentifierMinter",
    "slugify",
    "InvalidRequestError",
    "RenderRequest",
    "coerce_request",
    "coerce_requests",
]

"""Value → nested HTML table renderer.

``render_value`` is a plain structural recursion that only ever produces
strings; no intermediate tree of the input is kept. The only brake on cyclic
input is the depth limit carried by ``TraversalContext``: once it is reached an
expandable value becomes a one-line placeholder instead of another table."""

from __future__ import annotations

from typing import Any, List, Tuple

from loguru import logger

from ..core.classifier import Classification, Kind, classify
from ..core.context import TraversalContext
from ..core.identifiers import IdentifierMinter
from .collapsible import CollapsibleSectionBuilder, toggle_icon
from .tags import as_span, as_table, as_tbody, as_td, as_th, as_thead, as_tr, attr, escape_text


class UnreadableEntry:
    """Stand-in for an entry whose value raised while being read."""

    __slots__ = ("error",)

    def __init__(self, error: BaseException):
        self.error = error

    def describe(self) -> str:
        return f"<unreadable: {type(self.error).__name__}>"


Entry = Tuple[Any, Any]


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception as exc:
        return f"<{type(value).__name__}: str() failed with {type(exc).__name__}>"


def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception as exc:
        return f"<{type(value).__name__}: repr() failed with {type(exc).__name__}>"


def _safe_getattr(value: Any, name: str) -> Any:
    try:
        return getattr(value, name, None)
    except Exception:
        return None


def function_name(value: Any) -> str:
    """Name of a callable; never its source."""
    if _safe_getattr(value, "__name__") == "<lambda>":
        return "<anonymous>"
    for attr_name in ("__qualname__", "__name__"):
        name = _safe_getattr(value, attr_name)
        if isinstance(name, str) and name:
            return name
    func = _safe_getattr(value, "func")
    if func is not None and func is not value:
        return f"partial({function_name(func)})"
    return "<anonymous>"


def format_terminal(value: Any, classification: Classification, show_functions: bool) -> str:
    """Plain (unescaped) text of a non-expandable value."""
    kind = classification.kind
    if kind is Kind.NULL:
        return "null"
    if kind is Kind.UNDEFINED:
        return "undefined"
    if kind is Kind.BOOLEAN:
        return "true" if value else "false"
    if kind is Kind.BIGINT:
        return f"{value}n"
    if kind is Kind.NUMBER:
        return _safe_str(value)
    if kind is Kind.STRING:
        return value
    if kind is Kind.SYMBOL:
        return f"Symbol({type(value).__name__}.{value.name})"
    if kind is Kind.FUNCTION:
        return function_name(value) if show_functions else ""
    return _safe_repr(value)


# ===== Entry enumeration =====

def _object_entries(value: Any) -> List[Entry]:
    """Public own attributes of an instance (``__dict__`` plus filled slots), sorted by name."""
    found = {}
    try:
        namespace = vars(value)
    except TypeError:
        namespace = {}
    for name, item in list(namespace.items()):
        if isinstance(name, str) and not name.startswith("_"):
            found[name] = item
    for klass in type(value).__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name.startswith("_") or name in found:
                continue
            try:
                found[name] = getattr(value, name)
            except AttributeError:
                continue
            except Exception as exc:
                found[name] = UnreadableEntry(exc)
    return sorted(found.items(), key=lambda item: item[0])


def _map_entries(value: Any) -> List[Entry]:
    items: List[Entry] = []
    for key in list(value.keys()):
        try:
            items.append((key, value[key]))
        except Exception as exc:
            items.append((key, UnreadableEntry(exc)))
    return sorted(items, key=lambda item: _safe_str(item[0]))


def entries_of(value: Any, classification: Classification | None = None) -> List[Entry]:
    """Own enumerable entries of an expandable value in rendering order.

    Object/Map entries are sorted on the stringified key; Array/Set keep their
    iteration order and are keyed by position."""
    classification = classification or classify(value)
    kind = classification.kind
    try:
        if kind is Kind.OBJECT:
            return _object_entries(value)
        if kind is Kind.MAP:
            return _map_entries(value)
        if kind in (Kind.ARRAY, Kind.SET):
            return list(enumerate(value))
    except RecursionError:
        raise
    except Exception as exc:
        logger.debug(f"ObjectView: enumerating {kind} failed ({type(exc).__name__}: {exc})")
    return []


def size_of(value: Any, classification: Classification | None = None) -> int:
    """Number of own entries; 0 for terminal values."""
    classification = classification or classify(value)
    if not classification.expandable:
        return 0
    if classification.kind is not Kind.OBJECT:
        try:
            return len(value)
        except Exception:
            pass
    return len(entries_of(value, classification))


def describe(value: Any, classification: Classification | None = None) -> str:
    """Short kind/size summary, e.g. ``Map: 2 entries``."""
    classification = classification or classify(value)
    if not classification.expandable:
        return classification.kind.value
    count = size_of(value, classification)
    noun = "entry" if count == 1 else "entries"
    return f"{classification.kind.value}: {count} {noun}"


class TableRenderer:
    """Renders one value, recursing into expandable children.

    Nested expandable entries get a freshly minted identifier, an icon in their
    Type cell and a collapsible wrapper around their rendered value."""

    HEADINGS = ("Key", "Value", "Type")

    def __init__(self, minter: IdentifierMinter, sections: CollapsibleSectionBuilder):
        self.minter = minter
        self.sections = sections
        self.truncations = 0

    def render_value(self, value: Any, ctx: TraversalContext) -> str:
        """Render ``value`` at the depth recorded in ``ctx``.

        Parameters:
            value: anything.
            ctx: traversal context holding the frozen configuration.

        Return:
            str: a terminal leaf, a truncation placeholder, or a table."""
        classification = classify(value)
        if not classification.expandable:
            return self.render_leaf(value, classification, ctx)
        if ctx.exhausted:
            logger.debug(
                f"ObjectView: depth limit {ctx.depth_limit} reached, truncating {classification.kind}"
            )
            return self.render_placeholder(value, classification)
        minted_mark = len(self.minter.minted)
        glue_mark = len(self.sections.glue)
        try:
            return self.render_table(value, classification, ctx)
        except RecursionError:
            # Sections minted below this point were discarded along with their markup
            del self.minter.minted[minted_mark:]
            self.sections.glue.rollback(glue_mark)
            logger.debug(f"ObjectView: interpreter stack exhausted at depth {ctx.current_depth}, truncating")
            return self.render_placeholder(value, classification)

    def render_placeholder(self, value: Any, classification: Classification) -> str:
        self.truncations += 1
        return as_span([attr("class", "ov-truncated")], escape_text(f"[{describe(value, classification)}]"))

    def render_leaf(self, value: Any, classification: Classification, ctx: TraversalContext) -> str:
        text = format_terminal(value, classification, ctx.show_functions)
        if not text and classification.kind is Kind.FUNCTION:
            return ""
        return as_span([attr("class", "ov-leaf")], escape_text(text))

    def render_table(self, value: Any, classification: Classification, ctx: TraversalContext) -> str:
        rows = []
        for key, child in entries_of(value, classification):
            row = self._render_row(key, child, ctx)
            if row:
                rows.append(row)
        head = as_thead([], as_tr([], "".join(as_th([], name) for name in self.HEADINGS)))
        return as_table(
            [attr("class", "ov-table"), attr("data-kind", classification.kind.value)],
            head + as_tbody([], "".join(rows)),
        )

    def _render_row(self, key: Any, child: Any, ctx: TraversalContext) -> str:
        key_text = _safe_str(key)
        key_cell = as_td([attr("class", "ov-key")], escape_text(key_text))

        if isinstance(child, UnreadableEntry):
            logger.debug(f"ObjectView: entry {key_text!r} unreadable ({type(child.error).__name__})")
            value_cell = as_td([], as_span([attr("class", "ov-unreadable")], escape_text(child.describe())))
            return as_tr([], key_cell + value_cell + as_td([attr("class", "ov-type")], Kind.OTHER.value))

        classification = classify(child)
        if classification.kind is Kind.FUNCTION and not ctx.show_functions:
            return ""

        child_ctx = ctx.descend()
        inner = self.render_value(child, child_ctx)
        type_text = escape_text(classification.kind.value)
        if classification.expandable:
            identifier = self.minter.mint(key_text, child_ctx.current_depth)
            inner = self.sections.wrap(identifier, key_text, inner, describe(child, classification))
            type_text = toggle_icon(identifier, f"toggle {key_text}") + " " + type_text
        return as_tr(
            [],
            key_cell + as_td([], inner) + as_td([attr("class", "ov-type")], type_text),
        )


__all__ = [
    "TableRenderer",
    "UnreadableEntry",
    "describe",
    "entries_of",
    "format_terminal",
    "function_name",
    "size_of",
]

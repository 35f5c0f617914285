"""Test the table renderer in ObjectViewEngine/renderers/table_renderer.py

Covers:
1. Terminal formatting of every leaf kind
2. Entry enumeration order for Object/Map/Array/Set
3. Depth truncation, including self-referencing values
4. Function suppression and unreadable entries"""

import enum
import inspect
import re
import sys
from collections.abc import Mapping
from pathlib import Path

# Add project root directory to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ObjectViewEngine.core.classifier import UNDEFINED, classify
from ObjectViewEngine.core.context import RenderConfig, TraversalContext
from ObjectViewEngine.core.identifiers import IdentifierMinter
from ObjectViewEngine.renderers.collapsible import CollapsibleSectionBuilder, GlueBuffer
from ObjectViewEngine.renderers.table_renderer import (
    TableRenderer,
    describe,
    entries_of,
    format_terminal,
    function_name,
    size_of,
)


class Color(enum.Enum):
    RED = "r"


class Record:
    def __init__(self):
        self.zeta = 1
        self.alpha = 2
        self._hidden = 3


class Slotted:
    __slots__ = ("filled", "empty", "_private")

    def __init__(self):
        self.filled = "yes"
        self._private = "no"


class Flaky(Mapping):
    """Mapping whose 'bad' key cannot be read."""

    def __getitem__(self, key):
        if key == "bad":
            raise KeyError(key)
        return "fine"

    def __iter__(self):
        return iter(["good", "bad"])

    def __len__(self):
        return 2


def sample_function():
    return "secret source text"


def key_cells(html):
    return re.findall(r'<td class="ov-key">([^<]*)</td>', html)


class TestFormatting:
    """Leaf text for each terminal kind"""

    def fmt(self, value, show_functions=False):
        return format_terminal(value, classify(value), show_functions)

    def test_literal_tokens(self):
        assert self.fmt(None) == "null"
        assert self.fmt(UNDEFINED) == "undefined"
        assert self.fmt(True) == "true"
        assert self.fmt(False) == "false"

    def test_numbers(self):
        assert self.fmt(42) == "42"
        assert self.fmt(1.5) == "1.5"
        assert self.fmt(2 ** 60) == "1152921504606846976n"

    def test_symbol_and_other(self):
        assert self.fmt(Color.RED) == "Symbol(Color.RED)"
        assert self.fmt(b"ab") == "b'ab'"

    def test_function_name_only(self):
        assert self.fmt(sample_function) == ""
        assert self.fmt(sample_function, show_functions=True) == "sample_function"
        assert function_name(lambda: 1) == "<anonymous>"
        assert function_name(Record) == "Record"


class TestEntries:
    """Enumeration order and own-attribute rules"""

    def test_map_sorted_by_key(self):
        keys = [key for key, _ in entries_of({"b": 1, "a": 2, "c": 3})]
        assert keys == ["a", "b", "c"]

    def test_map_with_mixed_keys_sorted_by_string(self):
        keys = [key for key, _ in entries_of({10: "x", 2: "y", "a": "z"})]
        assert keys == [10, 2, "a"]

    def test_array_keeps_order(self):
        assert entries_of(["z", "y", "x"]) == [(0, "z"), (1, "y"), (2, "x")]

    def test_object_public_attributes_sorted(self):
        assert entries_of(Record()) == [("alpha", 2), ("zeta", 1)]

    def test_slots_only_filled_public(self):
        assert entries_of(Slotted()) == [("filled", "yes")]

    def test_size_of(self):
        assert size_of({"a": 1, "b": 2}) == 2
        assert size_of(Record()) == 2
        assert size_of("not expandable") == 0
        assert describe({"a": 1}) == "Map: 1 entry"
        assert describe([]) == "Array: 0 entries"
        assert describe(3) == "Number"


class TestTableRenderer:
    """Recursive rendering with depth limit"""

    def setup_method(self):
        self.minter = IdentifierMinter()
        self.glue = GlueBuffer()
        self.renderer = TableRenderer(self.minter, CollapsibleSectionBuilder(self.glue))

    def render(self, value, depth_limit=3, show_functions=False):
        ctx = TraversalContext(RenderConfig(depth_limit=depth_limit, show_functions=show_functions))
        return self.renderer.render_value(value, ctx)

    def test_leaf_is_escaped(self):
        html = self.render("<script>alert(1)</script>")
        assert "&lt;script&gt;" in html
        assert "<script>" not in html

    def test_empty_value_renders_empty_table(self):
        html = self.render({})
        assert html.count("<table") == 1
        assert "<tbody></tbody>" in html

    def test_rows_in_key_order(self):
        html = self.render({"b": 1, "a": 2, "c": 3})
        assert key_cells(html) == ["a", "b", "c"]

    def test_set_rows_are_indexed(self):
        html = self.render({"only"})
        assert key_cells(html) == ["0"]
        assert "only" in html

    def test_depth_limit_truncates(self):
        for limit in range(1, 5):
            self.setup_method()
            nested = {"leaf": 1}
            for _ in range(6):
                nested = {"next": nested}
            html = self.render(nested, depth_limit=limit)
            assert html.count("<table") == limit
            assert html.count('class="ov-truncated"') == 1
            assert "[Map: 1 entry]" in html

    def test_self_reference_terminates(self):
        loop = {}
        loop["self"] = loop
        html = self.render(loop, depth_limit=3)
        assert html.count("<table") == 3
        assert self.renderer.truncations == 1

    def test_indirect_cycle_terminates(self):
        first, second = [], []
        first.append(second)
        second.append(first)
        html = self.render(first, depth_limit=4)
        assert html.count("<table") == 4
        assert "[Array: 1 entry]" in html

    def test_functions_hidden_by_default(self):
        html = self.render({"fn": sample_function, "x": 1})
        assert key_cells(html) == ["x"]
        assert "sample_function" not in html

    def test_functions_shown_by_name_only(self):
        html = self.render({"fn": sample_function, "x": 1}, show_functions=True)
        assert key_cells(html) == ["fn", "x"]
        assert "sample_function" in html
        assert "secret source text" not in html

    def test_expandable_child_gets_icon_and_section(self):
        html = self.render({"child": {"k": 1}, "leaf": 1})
        assert len(self.glue) == 1
        identifier = self.minter.minted[0]
        # one icon in the section header, one in the Type cell
        assert html.count(f'data-ov-target="{identifier}"') == 2
        leaf_row = re.search(r'<tr><td class="ov-key">leaf</td>.*?</tr>', html).group(0)
        assert "<img" not in leaf_row

    def test_identifiers_unique_for_repeated_names(self):
        self.render({"a": {"same": {"same": {}}}, "b": {"same": {}}}, depth_limit=5)
        assert len(self.minter.minted) == len(set(self.minter.minted))
        assert self.glue.identifiers == self.minter.minted

    def test_unreadable_entry_does_not_abort(self):
        html = self.render({"flaky": Flaky()})
        assert "&lt;unreadable: KeyError&gt;" in html
        assert "fine" in html


class CallableWithBrokenAttributes:
    """Callable whose attribute lookup fails with something other than AttributeError."""

    __slots__ = ()

    def __call__(self):
        return None

    def __getattribute__(self, name):
        if name in ("__qualname__", "__name__", "func"):
            raise RuntimeError(name)
        return object.__getattribute__(self, name)


class TestStackSafety:
    """Rendering survives an interpreter stack smaller than the depth limit"""

    def setup_method(self):
        self.minter = IdentifierMinter()
        self.glue = GlueBuffer()
        self.renderer = TableRenderer(self.minter, CollapsibleSectionBuilder(self.glue))

    def test_recursion_error_becomes_placeholder(self):
        loop = []
        loop.append(loop)
        ctx = TraversalContext(RenderConfig(depth_limit=100))
        current_depth = len(inspect.stack(0))
        original_limit = sys.getrecursionlimit()
        sys.setrecursionlimit(current_depth + 120)
        try:
            html = self.renderer.render_value(loop, ctx)
        finally:
            sys.setrecursionlimit(original_limit)
        assert 'class="ov-truncated"' in html
        assert html.count("<table") < 100
        # discarded sections leave no glue behind
        assert self.glue.identifiers == self.minter.minted
        for identifier in self.minter.minted:
            assert f'id="{identifier}"' in html

    def test_function_name_with_broken_attributes(self):
        broken = CallableWithBrokenAttributes()
        assert function_name(broken) == "<anonymous>"
        assert format_terminal(broken, classify(broken), True) == "<anonymous>"

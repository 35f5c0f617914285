"""Per-render configuration snapshot and traversal state."""

from __future__ import annotations

from dataclasses import dataclass, replace

DEFAULT_DEPTH_LIMIT = 3
DEFAULT_SHOW_FUNCTIONS = False
# Each level costs a handful of Python frames; stay well under sys.getrecursionlimit()
MAX_DEPTH_LIMIT = 100


@dataclass(frozen=True)
class RenderConfig:
    """Configuration sampled once at the start of a render.

    Every recursive step of one document reads this same object, so a settings
    change made while a document is being produced cannot leak into it."""

    depth_limit: int = DEFAULT_DEPTH_LIMIT
    show_functions: bool = DEFAULT_SHOW_FUNCTIONS

    def __post_init__(self):
        if isinstance(self.depth_limit, bool) or not isinstance(self.depth_limit, int):
            raise TypeError(f"depth_limit must be an integer, got {self.depth_limit!r}")
        if self.depth_limit < 1:
            raise ValueError(f"depth_limit must be >= 1, got {self.depth_limit}")
        if self.depth_limit > MAX_DEPTH_LIMIT:
            raise ValueError(f"depth_limit must be <= {MAX_DEPTH_LIMIT}, got {self.depth_limit}")


@dataclass(frozen=True)
class TraversalContext:
    """Where the traversal currently is: depth plus the frozen configuration."""

    config: RenderConfig
    current_depth: int = 0

    @property
    def depth_limit(self) -> int:
        return self.config.depth_limit

    @property
    def show_functions(self) -> bool:
        return self.config.show_functions

    @property
    def exhausted(self) -> bool:
        """True once no further expandable level may be opened."""
        return self.current_depth >= self.config.depth_limit

    def descend(self) -> "TraversalContext":
        return replace(self, current_depth=self.current_depth + 1)


__all__ = ["DEFAULT_DEPTH_LIMIT", "DEFAULT_SHOW_FUNCTIONS", "MAX_DEPTH_LIMIT", "RenderConfig", "TraversalContext"]

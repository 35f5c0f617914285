"""Exception types raised by the object view engine."""


class ObjectViewError(Exception):
    """Base class for every error raised by this package."""


class TagError(ObjectViewError, ValueError):
    """A tag builder was asked for a malformed element name."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"invalid HTML tag name: {tag!r}")


__all__ = ["ObjectViewError", "TagError"]

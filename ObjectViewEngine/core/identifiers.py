"""Identifier minting for collapsible sections.

Every section id is built from the title slug, the nesting depth and a counter
that only ever grows within one document, so two sections never collide even
when titles or property names repeat."""

from __future__ import annotations

import re
from typing import List

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_-]")


def slugify(title: str) -> str:
    """Reduce ``title`` to characters that are safe inside an HTML id and a JS string."""
    slug = _UNSAFE_CHARS.sub("_", str(title))
    if not slug or not slug[0].isalpha():
        slug = f"ov_{slug}"
    return slug


class IdentifierMinter:
    """Hands out document-unique section identifiers and remembers them in order."""

    def __init__(self, prefix: str = ""):
        self.prefix = slugify(prefix) if prefix else ""
        self._counter = 0
        self.minted: List[str] = []

    def mint(self, title: str, depth: int) -> str:
        """Return a fresh identifier for a section titled ``title`` at ``depth``."""
        self._counter += 1
        base = slugify(title)
        if self.prefix:
            base = f"{self.prefix}-{base}"
        identifier = f"{base}-d{depth}-{self._counter}"
        self.minted.append(identifier)
        return identifier

    def __len__(self) -> int:
        return len(self.minted)


__all__ = ["IdentifierMinter", "slugify"]

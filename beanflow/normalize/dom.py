"""
Minimal DOM query layer over BeautifulSoup.

State parsers only ever need a handful of operations on the markup the
service returns: CSS lookups, attribute reads, text reads and "text of
this element minus some of its children".  Wrapping those in `Node`
keeps the parsers independent of the concrete parsing backend; any
parser BeautifulSoup accepts (``html.parser``, ``lxml``, ``html5lib``)
can be passed to `Document.parse`.
"""

from __future__ import annotations

import copy
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

DEFAULT_FEATURES = "html.parser"


class Node:
    """A single element in a parsed document."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def __repr__(self) -> str:
        return f"<Node {self.tag}>"

    @property
    def tag(self) -> str:
        return self._tag.name

    def select(self, css: str) -> List["Node"]:
        """Return every descendant matching `css`, in document order."""
        return [Node(t) for t in self._tag.select(css)]

    def select_one(self, css: str) -> Optional["Node"]:
        found = self._tag.select_one(css)
        return Node(found) if found is not None else None

    def children(self, css: Optional[str] = None) -> List["Node"]:
        """Direct element children, optionally filtered by `css`."""
        if css is not None:
            return self.select(f":scope > {css}")
        return [Node(child) for child in self._tag.children if isinstance(child, Tag)]

    def attr(self, name: str) -> Optional[str]:
        value = self._tag.get(name)
        if isinstance(value, list):
            # multi-valued attributes such as `class`
            return " ".join(value)
        return value

    def data(self, name: str) -> Optional[str]:
        """Read a ``data-<name>`` attribute."""
        return self.attr(f"data-{name}")

    def text(self) -> str:
        return self._tag.get_text()

    def text_without(self, css: str) -> str:
        """Text of this element after dropping direct children matching `css`.

        The document itself is left untouched; the removal happens on a
        detached copy.
        """
        clone = copy.copy(self._tag)
        for child in clone.select(f":scope > {css}"):
            child.decompose()
        return clone.get_text()


class Document(Node):
    """Root of a parsed response body."""

    __slots__ = ()

    @classmethod
    def parse(cls, markup: str, features: str = DEFAULT_FEATURES) -> "Document":
        return cls(BeautifulSoup(markup, features))

    def text(self, css: Optional[str] = None) -> str:  # type: ignore[override]
        """Concatenated text of every element matching `css`.

        Without a selector this is the text of the whole document.  An
        empty match yields an empty string.
        """
        if css is None:
            return super().text()
        return "".join(node.text() for node in self.select(css))

    def attr_of(self, css: str, name: str) -> Optional[str]:
        """Attribute `name` of the first match of `css`, or None."""
        node = self.select_one(css)
        return node.attr(name) if node is not None else None

"""Minimal view of an HTML document as a sequence of block elements.

The keyword extractor only needs to know an element's kind, its trimmed
text, and its descendants of a given kind. :class:`BlockElement` captures
that, and :func:`parse_blocks` provides it on top of BeautifulSoup.
"""

from collections.abc import Iterator
from enum import StrEnum
from typing import Protocol

from bs4 import BeautifulSoup, Tag


class ElementKind(StrEnum):
    """HTML element kinds the extractor inspects."""

    PARAGRAPH = "p"
    HEADING_1 = "h1"
    HEADING_2 = "h2"
    HEADING_3 = "h3"
    UNORDERED_LIST = "ul"
    TABLE = "table"
    LIST_ITEM = "li"
    TABLE_HEADER_CELL = "th"
    TABLE_DATA_CELL = "td"


BLOCK_KINDS: tuple[ElementKind, ...] = (
    ElementKind.PARAGRAPH,
    ElementKind.HEADING_1,
    ElementKind.HEADING_2,
    ElementKind.HEADING_3,
    ElementKind.UNORDERED_LIST,
    ElementKind.TABLE,
)


class BlockElement(Protocol):
    """Capabilities the extractor needs from a document element."""

    @property
    def kind(self) -> ElementKind: ...

    def text(self) -> str:
        """Return the element's full text content, trimmed."""
        ...

    def iter_children(self, *kinds: ElementKind) -> Iterator["BlockElement"]:
        """Yield descendants of the given kinds in document order."""
        ...


class SoupElement:
    """:class:`BlockElement` backed by a BeautifulSoup tag."""

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    @property
    def kind(self) -> ElementKind:
        return ElementKind(self._tag.name.lower())

    def text(self) -> str:
        return self._tag.get_text().strip()

    def iter_children(self, *kinds: ElementKind) -> Iterator["SoupElement"]:
        names = [kind.value for kind in kinds]
        for tag in self._tag.find_all(names):
            yield SoupElement(tag)

    def __repr__(self) -> str:
        return f"SoupElement(<{self._tag.name}>)"


def parse_blocks(html: str) -> list[SoupElement]:
    """Parse HTML into its block elements in document order.

    Nested blocks (a paragraph inside a table cell, a list inside a list
    item) are returned as well as their containers.

    Args:
        html: HTML markup.

    Returns:
        Paragraph, heading, list, and table elements.
    """
    soup = BeautifulSoup(html, "html.parser")
    selector = ", ".join(kind.value for kind in BLOCK_KINDS)
    return [SoupElement(tag) for tag in soup.select(selector)]

"""Keyword-driven extraction of labeled values from document HTML.

Two patterns are recognized, each by its own pass over the document's
block elements (paragraphs, h1-h3 headings, unordered lists, tables):

1. Inline: a single element holding the keyword followed by a colon and
   the value, e.g. ``<p>Customer Name: John Doe</p>``.
2. Label/value: an element whose whole text is the keyword, with the value
   in the next non-empty element, e.g.
   ``<h2>Product title</h2><p>Widget X</p>``. List values join their items
   and table values join their cells with ``" | "``.

The second pass runs after the first and overwrites its result for the
same keyword.
"""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from gdoc_parser.errors import DocParserError, ErrorKind
from gdoc_parser.utils.logger import get_logger

from .dom import BlockElement, ElementKind, parse_blocks

logger = get_logger(__name__)

VALUE_SEPARATOR = " | "

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class Keyword:
    """A caller-supplied label and its comparison form."""

    original: str
    normalized: str

    @classmethod
    def from_label(cls, label: str) -> "Keyword":
        return cls(original=label, normalized=label.strip().lower())


@dataclass(frozen=True)
class Idle:
    """No label is waiting for a value."""


@dataclass(frozen=True)
class LabelPending:
    """A standalone label was seen and its value is still to come."""

    keyword: Keyword


ScanState = Idle | LabelPending


def normalize_text(text: str) -> str:
    """Collapse whitespace runs, trim, and lowercase."""
    return _WHITESPACE.sub(" ", text).strip().lower()


def normalize_keywords(keywords: Iterable[object]) -> list[Keyword]:
    """Drop blank and non-string keywords, keeping caller order."""
    return [
        Keyword.from_label(k) for k in keywords if isinstance(k, str) and k.strip()
    ]


def element_value(element: BlockElement) -> str:
    """Derive the value text an element contributes as a label's value.

    Args:
        element: The element following a label.

    Returns:
        Joined list items for lists, joined header and data cells for
        tables, and the trimmed text otherwise.
    """
    if element.kind == ElementKind.UNORDERED_LIST:
        parts = [li.text() for li in element.iter_children(ElementKind.LIST_ITEM)]
    elif element.kind == ElementKind.TABLE:
        parts = [
            cell.text()
            for cell in element.iter_children(
                ElementKind.TABLE_HEADER_CELL, ElementKind.TABLE_DATA_CELL
            )
        ]
    else:
        return element.text()
    return VALUE_SEPARATOR.join(part for part in parts if part)


class KeywordExtractor:
    """Extracts values for a list of keywords from document HTML."""

    def extract(self, html: str, keywords: Sequence[str]) -> dict[str, str]:
        """Extract a flat keyword-to-value mapping from HTML.

        Args:
            html: HTML markup, typically converted from DOCX.
            keywords: Labels to look for. Matching ignores case and
                surrounding whitespace; output keys keep the caller's form.

        Returns:
            Mapping of keyword to extracted value. Keywords with no match
            are absent.

        Raises:
            DocParserError: ``EXTRACTION_FAILURE`` if ``html`` is not a string
                or ``keywords`` is not a list of strings.
        """
        if not isinstance(html, str):
            raise DocParserError(ErrorKind.EXTRACTION_FAILURE, "HTML must be a string.")
        if not isinstance(keywords, Sequence) or isinstance(keywords, str | bytes):
            raise DocParserError(
                ErrorKind.EXTRACTION_FAILURE,
                "Keywords must be provided as an array of strings.",
            )

        return self.extract_from_blocks(parse_blocks(html), keywords)

    def extract_from_blocks(
        self, blocks: Sequence[BlockElement], keywords: Sequence[str]
    ) -> dict[str, str]:
        """Run both extraction passes over already parsed block elements.

        Args:
            blocks: Block elements in document order.
            keywords: Labels to look for.

        Returns:
            Mapping of keyword to extracted value.
        """
        normalized = normalize_keywords(keywords)
        structured_data: dict[str, str] = {}
        if not normalized:
            return structured_data

        self._extract_inline(blocks, normalized, structured_data)
        self._extract_labeled(blocks, normalized, structured_data)

        logger.info(
            "Extracted %d of %d keywords from %d elements",
            len(structured_data),
            len(normalized),
            len(blocks),
        )
        return structured_data

    def _extract_inline(
        self,
        blocks: Sequence[BlockElement],
        keywords: list[Keyword],
        structured_data: dict[str, str],
    ) -> None:
        """First pass: ``Keyword: value`` within a single element."""
        for element in blocks:
            raw_text = element.text()
            if not raw_text:
                continue
            lower_text = raw_text.lower()

            for keyword in keywords:
                idx = lower_text.find(keyword.normalized)
                if idx == -1:
                    continue

                after_keyword = raw_text[idx + len(keyword.normalized) :]
                _, colon, value = after_keyword.partition(":")
                if not colon:
                    continue

                value = value.strip()
                if value:
                    logger.debug("Inline match for %r: %r", keyword.original, value)
                    structured_data[keyword.original] = value

    def _extract_labeled(
        self,
        blocks: Sequence[BlockElement],
        keywords: list[Keyword],
        structured_data: dict[str, str],
    ) -> None:
        """Second pass: a standalone label followed by its value element."""
        state: ScanState = Idle()

        for element in blocks:
            raw_text = element.text()
            if not raw_text:
                continue
            normalized_text = normalize_text(raw_text)

            if isinstance(state, LabelPending):
                pending = state.keyword
                # A repeated label line is not a value.
                if normalized_text == pending.normalized:
                    continue

                value = element_value(element)
                if value:
                    logger.debug("Label match for %r: %r", pending.original, value)
                    structured_data[pending.original] = value
                    state = Idle()
                continue

            if ":" in raw_text:
                continue
            for keyword in keywords:
                if normalized_text == keyword.normalized:
                    state = LabelPending(keyword)
                    break

        if isinstance(state, LabelPending):
            logger.debug("Label %r had no value element", state.keyword.original)

"""Tests for the BeautifulSoup-backed block element view."""

from gdoc_parser.extraction.dom import BLOCK_KINDS, ElementKind, parse_blocks


class TestParseBlocks:
    """Tests for parse_blocks."""

    def test_document_order_and_kinds(self) -> None:
        html = (
            "<h1>Title</h1>"
            "<div><p>Inside div</p></div>"
            "<ol><li>ordered</li></ol>"
            "<h4>Ignored</h4>"
            "<h2>Sub</h2>"
            "<table><tr><td><p>cell</p></td></tr></table>"
            "<h3>Last</h3>"
        )
        kinds = [block.kind for block in parse_blocks(html)]
        assert kinds == [
            ElementKind.HEADING_1,
            ElementKind.PARAGRAPH,
            ElementKind.HEADING_2,
            ElementKind.TABLE,
            ElementKind.PARAGRAPH,
            ElementKind.HEADING_3,
        ]

    def test_nested_list_is_its_own_block(self) -> None:
        html = "<ul><li>a<ul><li>b</li></ul></li></ul>"
        blocks = parse_blocks(html)
        assert [b.kind for b in blocks] == [
            ElementKind.UNORDERED_LIST,
            ElementKind.UNORDERED_LIST,
        ]
        assert blocks[1].text() == "b"

    def test_empty_html(self) -> None:
        assert parse_blocks("") == []

    def test_block_kinds_are_selectable(self) -> None:
        assert {k.value for k in BLOCK_KINDS} == {"p", "h1", "h2", "h3", "ul", "table"}


class TestSoupElement:
    """Tests for the SoupElement adapter."""

    def test_text_is_trimmed_content(self) -> None:
        (block,) = parse_blocks("<p>  <strong>Bold</strong> and plain \n</p>")
        assert block.text() == "Bold and plain"

    def test_iter_list_items(self) -> None:
        (block,) = parse_blocks("<ul><li>one</li><li> two </li></ul>")
        items = [li.text() for li in block.iter_children(ElementKind.LIST_ITEM)]
        assert items == ["one", "two"]

    def test_iter_table_cells_in_document_order(self) -> None:
        html = (
            "<table><thead><tr><th>h1</th><th>h2</th></tr></thead>"
            "<tbody><tr><td>d1</td><td>d2</td></tr></tbody></table>"
        )
        (block,) = parse_blocks(html)
        cells = block.iter_children(
            ElementKind.TABLE_HEADER_CELL, ElementKind.TABLE_DATA_CELL
        )
        assert [c.text() for c in cells] == ["h1", "h2", "d1", "d2"]
        assert repr(block) == "SoupElement(<table>)"

"""Tests for the pipeline error type."""

from gdoc_parser.errors import DocParserError, ErrorKind


class TestDocParserError:
    """Tests for DocParserError."""

    def test_carries_kind_and_message(self) -> None:
        exc = DocParserError(ErrorKind.NOT_FOUND, "Document not found")
        assert exc.kind is ErrorKind.NOT_FOUND
        assert exc.message == "Document not found"
        assert str(exc) == "Document not found"

    def test_repr(self) -> None:
        exc = DocParserError(ErrorKind.INVALID_INPUT, "bad url")
        assert repr(exc) == "DocParserError('invalid_input', 'bad url')"

    def test_kinds_are_strings(self) -> None:
        assert ErrorKind.UNAUTHORIZED == "unauthorized"

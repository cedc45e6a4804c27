"""Tests for DOCX to HTML conversion."""

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from gdoc_parser.conversion.docx_converter import DocxConverter
from gdoc_parser.errors import DocParserError, ErrorKind


def _mammoth_result(value: str | None, messages: list[str] | None = None) -> MagicMock:
    return MagicMock(value=value, messages=messages or [])


class TestDocxConverter:
    """Tests for the DocxConverter class."""

    @patch("gdoc_parser.conversion.docx_converter.mammoth.convert_to_html")
    def test_to_html(self, mock_convert: MagicMock, downloaded_docx: Path) -> None:
        mock_convert.return_value = _mammoth_result("<p>Hello</p>")

        html = DocxConverter().to_html(downloaded_docx)

        assert html == "<p>Hello</p>"
        mock_convert.assert_called_once()
        assert mock_convert.call_args.kwargs == {}

    @patch("gdoc_parser.conversion.docx_converter.mammoth.convert_to_html")
    def test_accepts_string_path(
        self, mock_convert: MagicMock, downloaded_docx: Path
    ) -> None:
        mock_convert.return_value = _mammoth_result("<p>x</p>")
        assert DocxConverter().to_html(str(downloaded_docx)) == "<p>x</p>"

    @patch("gdoc_parser.conversion.docx_converter.mammoth.convert_to_html")
    def test_style_map_passed_through(
        self, mock_convert: MagicMock, downloaded_docx: Path
    ) -> None:
        mock_convert.return_value = _mammoth_result("<h1>T</h1>")
        style_map = "p[style-name='Title'] => h1:fresh"

        DocxConverter(style_map=style_map).to_html(downloaded_docx)

        assert mock_convert.call_args.kwargs == {"style_map": style_map}

    @patch("gdoc_parser.conversion.docx_converter.mammoth.convert_to_html")
    def test_empty_document(
        self, mock_convert: MagicMock, downloaded_docx: Path
    ) -> None:
        mock_convert.return_value = _mammoth_result(None)
        assert DocxConverter().to_html(downloaded_docx) == ""

    @patch("gdoc_parser.conversion.docx_converter.mammoth.convert_to_html")
    def test_messages_logged(
        self,
        mock_convert: MagicMock,
        downloaded_docx: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        mock_convert.return_value = _mammoth_result(
            "<p>x</p>", ["Unrecognised paragraph style: Fancy"]
        )

        with caplog.at_level(logging.WARNING):
            DocxConverter().to_html(downloaded_docx)

        assert "Unrecognised paragraph style: Fancy" in caplog.text

    @patch("gdoc_parser.conversion.docx_converter.mammoth.convert_to_html")
    def test_library_failure_wrapped(
        self, mock_convert: MagicMock, downloaded_docx: Path
    ) -> None:
        mock_convert.side_effect = ValueError("not a zip file")

        with pytest.raises(DocParserError) as exc_info:
            DocxConverter().to_html(downloaded_docx)

        assert exc_info.value.kind == ErrorKind.CONVERSION_FAILURE
        assert str(exc_info.value) == "Failed to convert DOCX to HTML: not a zip file"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(DocParserError) as exc_info:
            DocxConverter().to_html(tmp_path / "missing.docx")
        assert exc_info.value.kind == ErrorKind.CONVERSION_FAILURE
        assert "does not exist" in str(exc_info.value)

    @pytest.mark.parametrize("path", ["", None, 42])
    def test_invalid_path(self, path: object) -> None:
        with pytest.raises(DocParserError) as exc_info:
            DocxConverter().to_html(path)  # type: ignore[arg-type]
        assert str(exc_info.value) == "Invalid DOCX path."

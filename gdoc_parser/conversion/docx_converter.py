"""DOCX to HTML conversion backed by mammoth."""

from pathlib import Path

import mammoth

from gdoc_parser.errors import DocParserError, ErrorKind
from gdoc_parser.utils.logger import get_logger

logger = get_logger(__name__)


class DocxConverter:
    """Converts DOCX files to HTML markup.

    Args:
        style_map: Optional mammoth style map appended to the default
            mapping of Word styles to HTML elements.
    """

    def __init__(self, style_map: str | None = None) -> None:
        self.style_map = style_map

    def to_html(self, docx_path: str | Path) -> str:
        """Convert a DOCX file to an HTML string.

        Args:
            docx_path: Path to an existing DOCX file.

        Returns:
            HTML produced by mammoth, or an empty string for an empty
            document.

        Raises:
            DocParserError: ``CONVERSION_FAILURE`` if the path is invalid,
                the file is missing, or mammoth fails.
        """
        if not docx_path or not isinstance(docx_path, str | Path):
            raise DocParserError(ErrorKind.CONVERSION_FAILURE, "Invalid DOCX path.")

        path = Path(docx_path)
        if not path.exists():
            raise DocParserError(
                ErrorKind.CONVERSION_FAILURE,
                "DOCX file does not exist at the given path.",
            )

        kwargs = {"style_map": self.style_map} if self.style_map else {}
        try:
            with open(path, "rb") as f:
                result = mammoth.convert_to_html(f, **kwargs)
        except Exception as exc:
            raise DocParserError(
                ErrorKind.CONVERSION_FAILURE,
                f"Failed to convert DOCX to HTML: {exc}",
            ) from exc

        for message in result.messages:
            logger.warning("mammoth: %s", message)

        html = result.value or ""
        logger.info("Converted %s to %d characters of HTML", path.name, len(html))
        return html

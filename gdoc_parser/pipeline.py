"""End-to-end Google Doc parsing pipeline.

Downloads the document, converts it to HTML, and extracts keyword values,
removing the downloaded file whatever the outcome.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from gdoc_parser.conversion.docx_converter import DocxConverter
from gdoc_parser.errors import DocParserError, ErrorKind
from gdoc_parser.extraction.keyword_extractor import KeywordExtractor
from gdoc_parser.fetch.google_docs import GoogleDocsFetcher, cleanup_download
from gdoc_parser.utils.config import AppConfig
from gdoc_parser.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ParseResult:
    """Converted HTML and the values extracted from it."""

    raw_html: str
    structured_data: dict[str, str] = field(default_factory=dict)


class GoogleDocProcessor:
    """Fetch, convert, and extract in a single call.

    Args:
        config: Application configuration object.
    """

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig()
        self.fetcher = GoogleDocsFetcher(self.config.fetch)
        self.converter = DocxConverter(style_map=self.config.conversion.style_map)
        self.extractor = KeywordExtractor()

    def process(self, url: str, keywords: Sequence[str] | None = None) -> ParseResult:
        """Parse a Google Doc and extract values for the given keywords.

        Args:
            url: Google Docs document URL.
            keywords: Labels to extract. ``None`` extracts nothing.

        Returns:
            The converted HTML and the extracted mapping.

        Raises:
            DocParserError: From any stage of the pipeline.
        """
        docx_path: Path | None = None
        try:
            docx_path = self.fetcher.download(url)
            raw_html = self.converter.to_html(docx_path)
            structured_data = self.extractor.extract(raw_html, keywords or [])
        finally:
            cleanup_download(docx_path)

        return ParseResult(raw_html=raw_html, structured_data=structured_data)

    def process_file(
        self, path: Path, keywords: Sequence[str] | None = None
    ) -> ParseResult:
        """Parse a local DOCX or HTML file without downloading anything.

        Args:
            path: Path to a ``.docx`` file, or an ``.html``/``.htm`` file
                that is used as-is.
            keywords: Labels to extract.

        Returns:
            The HTML and the extracted mapping.
        """
        if path.suffix.lower() in (".html", ".htm"):
            try:
                raw_html = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise DocParserError(
                    ErrorKind.CONVERSION_FAILURE, f"Failed to read HTML file: {exc}"
                ) from exc
        else:
            raw_html = self.converter.to_html(path)

        logger.info("Parsing local file %s", path.name)
        structured_data = self.extractor.extract(raw_html, keywords or [])
        return ParseResult(raw_html=raw_html, structured_data=structured_data)

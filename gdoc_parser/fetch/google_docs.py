"""Download Google Docs documents as DOCX files.

Resolves the document ID from a Docs URL, requests the DOCX export, and
stores the payload in a freshly created temporary directory owned by the
caller. Failures are classified into :class:`~gdoc_parser.errors.ErrorKind`
values so the API can pick a status code without inspecting messages.
"""

import re
import shutil
import tempfile
from pathlib import Path

import requests

from gdoc_parser.errors import DocParserError, ErrorKind
from gdoc_parser.utils.config import FetchConfig
from gdoc_parser.utils.logger import get_logger

logger = get_logger(__name__)

DOCX_MIME_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)

_DOC_URL_PATTERN = re.compile(r"https?://docs\.google\.com/document/d/([^/?#]+)")

UNAUTHORIZED_MESSAGE = (
    "Unauthorized access: The Google Doc is not publicly accessible "
    "or requires authentication."
)
UNEXPECTED_RESPONSE_MESSAGE = (
    "Unexpected response from Google Docs. The document may not be publicly "
    "accessible or the URL may be invalid."
)
NOT_FOUND_MESSAGE = "Document not found: Please verify the Google Docs URL."


def extract_doc_id(url: object) -> str:
    """Extract the document ID from a Google Docs URL.

    ``https://docs.google.com/document/d/1ABC123XYZ/edit`` -> ``1ABC123XYZ``

    Args:
        url: Google Docs document URL.

    Returns:
        The document ID path segment.

    Raises:
        DocParserError: ``INVALID_INPUT`` if the URL is empty, not a string,
            or does not point at a Google Docs document.
    """
    if not isinstance(url, str) or not url.strip():
        raise DocParserError(
            ErrorKind.INVALID_INPUT, "Invalid URL: URL must be a non-empty string."
        )

    match = _DOC_URL_PATTERN.search(url)
    if not match:
        raise DocParserError(
            ErrorKind.INVALID_INPUT,
            "Invalid Google Docs URL: Unable to extract document ID.",
        )
    return match.group(1)


def build_export_url(
    doc_id: str, template: str = FetchConfig().export_url_template
) -> str:
    """Build the DOCX export URL for a document ID."""
    return template.format(doc_id=doc_id)


def cleanup_download(path: Path | None) -> None:
    """Remove a downloaded file and its temporary directory.

    Best effort: failures are logged and never raised, so cleanup can run
    while another error is propagating.

    Args:
        path: Path returned by :meth:`GoogleDocsFetcher.download`, or
            ``None`` when nothing was downloaded.
    """
    if path is None:
        return

    try:
        shutil.rmtree(path.parent)
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("Could not remove temporary directory %s: %s", path.parent, exc)


class GoogleDocsFetcher:
    """Fetches publicly accessible Google Docs as DOCX files.

    Args:
        config: Download settings (timeout, export URL template, temp
            directory prefix).
    """

    def __init__(self, config: FetchConfig | None = None) -> None:
        self.config = config or FetchConfig()

    def download(self, url: str) -> Path:
        """Download a Google Doc and save it to a new temporary directory.

        The caller owns the returned file and should release it with
        :func:`cleanup_download`.

        Args:
            url: Google Docs document URL.

        Returns:
            Path to the downloaded ``<doc_id>.docx`` file.

        Raises:
            DocParserError: ``INVALID_INPUT`` for a bad URL, ``UNAUTHORIZED``
                for private documents, ``NOT_FOUND`` for unknown documents,
                and ``DOWNLOAD_FAILURE`` for any other failure.
        """
        doc_id = extract_doc_id(url)
        export_url = build_export_url(doc_id, self.config.export_url_template)

        temp_dir = Path(tempfile.mkdtemp(prefix=self.config.temp_prefix))
        temp_file = temp_dir / f"{doc_id}.docx"

        try:
            response = self._request(export_url)
            self._check_response(response)
            temp_file.write_bytes(response.content)
        except OSError as exc:
            cleanup_download(temp_file)
            raise DocParserError(
                ErrorKind.DOWNLOAD_FAILURE,
                f"Failed to download document from Google Docs: {exc}",
            ) from exc
        except Exception:
            cleanup_download(temp_file)
            raise

        logger.info("Downloaded document %s (%d bytes)", doc_id, len(response.content))
        return temp_file

    def _request(self, export_url: str) -> requests.Response:
        logger.debug("Requesting %s", export_url)
        try:
            return requests.get(
                export_url,
                timeout=self.config.timeout_seconds,
                allow_redirects=True,
            )
        except requests.RequestException as exc:
            raise DocParserError(
                ErrorKind.DOWNLOAD_FAILURE,
                f"Failed to download document from Google Docs: {exc}",
            ) from exc

    def _check_response(self, response: requests.Response) -> None:
        """Classify a non-DOCX or non-success export response.

        Args:
            response: Response from the export endpoint.

        Raises:
            DocParserError: If the response does not carry a DOCX payload.
        """
        status = response.status_code
        if status in (401, 403):
            raise DocParserError(ErrorKind.UNAUTHORIZED, UNAUTHORIZED_MESSAGE)
        if status == 404:
            raise DocParserError(ErrorKind.NOT_FOUND, NOT_FOUND_MESSAGE)
        if status >= 400:
            raise DocParserError(
                ErrorKind.DOWNLOAD_FAILURE,
                "Failed to download document from Google Docs: "
                f"export returned status {status}",
            )

        content_type = response.headers.get("content-type", "")
        if DOCX_MIME_TYPE not in content_type:
            logger.warning(
                "Export returned status %d with content-type %r", status, content_type
            )
            raise DocParserError(ErrorKind.UNAUTHORIZED, UNEXPECTED_RESPONSE_MESSAGE)

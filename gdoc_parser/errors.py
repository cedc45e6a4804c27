"""Error taxonomy shared by the fetch, conversion, and extraction layers.

Every failure the pipeline can classify is raised as a
:class:`DocParserError` carrying an :class:`ErrorKind`. The API maps kinds
to HTTP status codes; the message is what the client sees.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Closed set of failure categories."""

    INVALID_INPUT = "invalid_input"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    DOWNLOAD_FAILURE = "download_failure"
    CONVERSION_FAILURE = "conversion_failure"
    EXTRACTION_FAILURE = "extraction_failure"


class DocParserError(Exception):
    """A classified pipeline failure.

    Args:
        kind: Failure category.
        message: Human-readable description returned to the caller.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"DocParserError({self.kind.value!r}, {self.message!r})"

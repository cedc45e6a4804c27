"""FastAPI application for the Google Docs parser.

Provides a health check and a single endpoint that parses a public Google
Doc and extracts values for caller-supplied keywords.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gdoc_parser.errors import DocParserError, ErrorKind
from gdoc_parser.pipeline import GoogleDocProcessor
from gdoc_parser.utils.config import load_config
from gdoc_parser.utils.logger import get_logger

from .schemas import ErrorResponse, HealthResponse, ParseDocRequest, ParseDocResponse

logger = get_logger(__name__)

MAX_BODY_BYTES = 2 * 1024 * 1024

INVALID_URL_MESSAGE = 'Invalid request: "url" is required and must be a string.'
INVALID_KEYWORDS_MESSAGE = (
    'Invalid request: "keywords" must be an array of strings if provided.'
)
INVALID_JSON_MESSAGE = "Invalid request: body must be valid JSON."

STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.INVALID_INPUT: 400,
    ErrorKind.UNAUTHORIZED: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.DOWNLOAD_FAILURE: 500,
    ErrorKind.CONVERSION_FAILURE: 500,
    ErrorKind.EXTRACTION_FAILURE: 500,
}

app = FastAPI(
    title="Google Docs Parser API",
    description="Extract labeled values from public Google Docs documents",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_processor() -> GoogleDocProcessor:
    """Build the parsing pipeline from the current configuration."""
    return GoogleDocProcessor(load_config())


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )


@app.middleware("http")
async def limit_body_size(request: Request, call_next):
    """Reject requests whose declared body exceeds ``MAX_BODY_BYTES``."""
    content_length = request.headers.get("content-length", "")
    if content_length.isdigit() and int(content_length) > MAX_BODY_BYTES:
        return _error_response(413, "Request body too large.")
    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies as 400 with an ``error`` message."""
    errors = exc.errors()
    fields = {str(loc) for err in errors for loc in err.get("loc", ())[1:2]}

    if any(err.get("type") == "json_invalid" for err in errors):
        message = INVALID_JSON_MESSAGE
    elif "keywords" in fields and "url" not in fields:
        message = INVALID_KEYWORDS_MESSAGE
    else:
        message = INVALID_URL_MESSAGE

    logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
    return _error_response(400, message)


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Return service health status."""
    return HealthResponse(status="ok")


@app.post(
    "/parse-doc",
    response_model=ParseDocResponse,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
def parse_doc(body: ParseDocRequest) -> ParseDocResponse | JSONResponse:
    """Parse a Google Doc and extract values for the requested keywords.

    Declared without ``async`` so the blocking download and conversion run
    in the server's threadpool.

    Args:
        body: Document URL and optional keyword list.

    Returns:
        The converted HTML and the extracted keyword values.
    """
    if not body.url.strip():
        return _error_response(400, INVALID_URL_MESSAGE)

    try:
        result = _get_processor().process(body.url, body.keywords or [])
    except DocParserError as exc:
        status_code = STATUS_BY_KIND[exc.kind]
        logger.warning("Parse failed (%s, %d): %s", exc.kind, status_code, exc)
        return _error_response(status_code, exc.message)
    except Exception as exc:
        logger.exception("Unexpected failure while parsing %s", body.url)
        return _error_response(500, str(exc) or "Unknown error")

    return ParseDocResponse(
        raw_html=result.raw_html,
        structured_data=result.structured_data,
    )

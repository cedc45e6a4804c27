"""Application entry point for the Google Docs parser API server."""

import uvicorn

from gdoc_parser.api.app import app
from gdoc_parser.utils.config import load_config
from gdoc_parser.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    """Start the FastAPI application server."""
    config = load_config()
    setup_logging(config.log_level)
    logger.info("Server listening on port %d", config.server.port)
    uvicorn.run(app, host=config.server.host, port=config.server.port)


if __name__ == "__main__":
    main()

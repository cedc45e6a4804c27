"""Logging setup shared by the API server and the CLI."""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that are chatty at INFO/DEBUG during downloads.
_NOISY_LOGGERS = ("urllib3", "charset_normalizer")


def _resolve_level(level: str) -> int:
    resolved = logging.getLevelName(level.upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_logging(level: str = "INFO") -> None:
    """Attach a stdout handler to the root logger and set its level.

    Calling this more than once only updates the level, so the server and
    the CLI can both call it without duplicating output.

    Args:
        level: Logging level name. Unknown names fall back to INFO.
    """
    numeric_level = _resolve_level(level)
    root = logging.getLogger()
    root.setLevel(numeric_level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    if root.handlers:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module, usually called with ``__name__``."""
    return logging.getLogger(name)

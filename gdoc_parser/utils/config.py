"""Configuration management for the Google Docs parser.

Loads and validates YAML configuration with defaults for the HTTP server,
the document download, and DOCX conversion. The ``PORT`` environment
variable overrides the configured server port.
"""

import logging
import os
from pathlib import Path

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

PORT_ENV_VAR = "PORT"
DEFAULT_CONFIG_PATH = Path("configs/config.yaml")


class ServerConfig(BaseModel):
    """Configuration for the HTTP server."""

    host: str = "0.0.0.0"
    port: int = 3000


class FetchConfig(BaseModel):
    """Configuration for downloading documents from Google Docs."""

    timeout_seconds: float = 30.0
    export_url_template: str = (
        "https://docs.google.com/document/d/{doc_id}/export?format=docx"
    )
    temp_prefix: str = "gdoc-parser-"


class ConversionConfig(BaseModel):
    """Configuration for DOCX to HTML conversion."""

    style_map: str | None = None


class AppConfig(BaseModel):
    """Top-level application configuration."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    conversion: ConversionConfig = Field(default_factory=ConversionConfig)
    log_level: str = "INFO"


def _apply_env_overrides(config: AppConfig) -> AppConfig:
    raw_port = os.environ.get(PORT_ENV_VAR)
    if not raw_port:
        return config

    try:
        config.server.port = int(raw_port)
    except ValueError:
        logger.warning(
            "Ignoring invalid %s=%r, keeping port %d",
            PORT_ENV_VAR,
            raw_port,
            config.server.port,
        )
    return config


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.
            Defaults to configs/config.yaml.

    Returns:
        Validated application configuration with environment overrides
        applied.
    """
    if path is None:
        path = DEFAULT_CONFIG_PATH

    if path.exists():
        logger.debug("Loading configuration from %s", path)
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
        config = AppConfig(**raw)
    else:
        logger.debug("No config file found at %s, using defaults", path)
        config = AppConfig()

    return _apply_env_overrides(config)

"""Pydantic request/response schemas for the FastAPI endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class ParseDocRequest(BaseModel):
    """Request body for ``POST /parse-doc``.

    ``keywords`` accepts any list; non-string entries are ignored by the
    extractor rather than rejected.
    """

    url: StrictStr
    keywords: list[Any] | None = None


class ParseDocResponse(BaseModel):
    """Response body for a successful parse."""

    model_config = ConfigDict(populate_by_name=True)

    raw_html: str = Field(alias="rawHtml")
    structured_data: dict[str, str] = Field(alias="structuredData")


class ErrorResponse(BaseModel):
    """Response body for any failed request."""

    error: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str

"""API request and response schemas.

This module contains Pydantic models for API request validation
and response serialization. Every response carries ``success``,
``message`` and an ``alertType`` the web UI uses to style its alert.
"""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, field_validator

from shortlink.models.link import ShortLinkRecord


class AlertType(str, Enum):
    """Alert classification shown by the UI."""
    SUCCESS = "success"
    DANGER = "danger"


class ShortenRequest(BaseModel):
    """Request schema for creating a short link (JSON or form body)."""
    url: Optional[str] = None
    name: Optional[str] = None

    # Scalars sent as JSON numbers are treated as their text
    @field_validator("url", "name", mode="before")
    def scalar_to_str(cls, v: Any) -> Any:
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class LinkResponse(BaseModel):
    """Response schema wrapping a short link record."""
    success: bool = True
    message: str
    alertType: AlertType = AlertType.SUCCESS
    data: ShortLinkRecord


class ErrorResponse(BaseModel):
    """Uniform response schema for errors."""
    success: bool = False
    message: str
    alertType: AlertType = AlertType.DANGER


class HealthResponse(BaseModel):
    """Response schema for the health check."""
    status: str
    version: str
    environment: str
    timestamp: float
    components: Dict[str, Dict[str, Any]]

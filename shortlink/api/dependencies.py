"""API dependencies for FastAPI.

This module provides dependency injection functions for FastAPI endpoints
to access settings, the record store, service instances and request-scoped
values such as the client IP.
"""

import json
from collections.abc import Mapping
from typing import Optional

from fastapi import Depends, Request
from pydantic import ValidationError as PydanticValidationError

from shortlink.api.schemas import ShortenRequest
from shortlink.core.config import Settings
from shortlink.repositories.link_repository import LinkRepository
from shortlink.services.exceptions import MalformedRequestError
from shortlink.services.shortener import ShortenerService
from shortlink.services.stats import StatsService

# Checked in order, the first header present wins
CLIENT_IP_HEADERS = (
    "x-client-ip",
    "x-forwarded-for",
    "cf-connecting-ip",
    "x-real-ip",
)


def get_settings(request: Request) -> Settings:
    """Get the settings the running app was built with."""
    return request.app.state.settings


def get_link_repository(request: Request) -> LinkRepository:
    """Get the app-wide record store."""
    return request.app.state.link_repository


def get_shortener_service(
    link_repo: LinkRepository = Depends(get_link_repository),
    settings: Settings = Depends(get_settings),
) -> ShortenerService:
    """Get an instance of the URL shortening service."""
    return ShortenerService(link_repository=link_repo, base_domain=settings.BASE_DOMAIN)


def get_stats_service(
    link_repo: LinkRepository = Depends(get_link_repository),
) -> StatsService:
    """Get an instance of the statistics service."""
    return StatsService(link_repository=link_repo)


def get_client_ip(request: Request) -> Optional[str]:
    """
    Resolve the client IP, honouring common proxy headers.

    Forwarded headers may carry a comma-separated chain; the first
    address is the original client.
    """
    for header in CLIENT_IP_HEADERS:
        value = request.headers.get(header)
        if value:
            first = value.split(",")[0].strip()
            if first:
                return first
    return request.client.host if request.client else None


async def get_shorten_request(request: Request) -> ShortenRequest:
    """
    Parse the create-link body from JSON or form data.

    Raises:
        MalformedRequestError: If the body cannot be decoded
    """
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith("application/json"):
            body = await request.body()
            payload = json.loads(body) if body.strip() else {}
        else:
            payload = await request.form()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedRequestError() from e

    if payload is None:
        payload = {}
    if not isinstance(payload, Mapping):
        raise MalformedRequestError()

    try:
        return ShortenRequest.model_validate(
            {"url": payload.get("url"), "name": payload.get("name")}
        )
    except PydanticValidationError as e:
        raise MalformedRequestError() from e

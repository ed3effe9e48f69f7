"""Routes package initialization.

This module exports the route collection for the application.
"""

from fastapi import APIRouter

from shortlink.api.routes import health, redirect, shortener, stats

API_PREFIX = "/api"

# Create root router
api_router = APIRouter()

# Create-link endpoint lives at the root: POST /shorten
api_router.include_router(shortener.router)

# Stats and health check routes with API prefix
api_router.include_router(stats.router, prefix=API_PREFIX)
api_router.include_router(health.router, prefix=API_PREFIX)

# Include redirect routes last so /{name} never shadows the routes above
api_router.include_router(redirect.router)

__all__ = ["api_router"]

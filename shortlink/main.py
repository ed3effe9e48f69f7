"""Main application module.

This module builds the FastAPI application, includes routes,
and configures middleware and exception handlers.
"""

from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException

from shortlink.api import api_router
from shortlink.api.schemas import ErrorResponse
from shortlink.core.config import Settings, settings as default_settings
from shortlink.core.logging import setup_logging
from shortlink.middleware.logging import LoggingMiddleware
from shortlink.repositories.base import RepositoryError
from shortlink.repositories.link_repository import LinkRepository
from shortlink.services.exceptions import ServiceError, StorageError


def error_response(status_code: int, message: str) -> JSONResponse:
    """Uniform error envelope."""
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(mode="json"),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Run startup and shutdown tasks."""
    app_settings: Settings = app.state.settings
    logger.info(f"Starting {app_settings.APP_NAME} v{app_settings.APP_VERSION}")
    logger.info(f"Environment: {app_settings.ENVIRONMENT.value}")
    logger.info(f"Short links are served as {app_settings.BASE_DOMAIN}/<name>")

    # Creates the store file if it is missing
    try:
        store = await app.state.link_repository.load()
        logger.info(f"Record store {app_settings.STORE_PATH} holds {len(store)} links")
    except RepositoryError as e:
        logger.error(f"Record store is not readable: {e}")

    yield

    logger.info(f"Shutting down {app_settings.APP_NAME}")


def register_exception_handlers(app: FastAPI) -> None:
    """Translate errors into the uniform error envelope."""

    @app.exception_handler(ServiceError)
    async def service_exception_handler(request: Request, exc: ServiceError):
        if isinstance(exc, StorageError):
            logger.bind(cause=repr(exc.__cause__)).error(
                f"Storage failure in {request.method} {request.url.path}"
            )
        else:
            logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = exc.detail if isinstance(exc.detail, str) else "Request failed"
        return error_response(exc.status_code, message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Request validation error: {exc}")
        return error_response(400, "Invalid request!")

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Catch and log all unhandled exceptions."""
        logger.bind(
            client_host=request.client.host if request.client else None,
        ).opt(exception=exc).error(f"Unhandled exception in {request.method} {request.url.path}")
        return error_response(500, StorageError.default_message)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use instead of the environment-loaded singleton

    Returns:
        FastAPI: The configured application
    """
    settings = settings or default_settings

    setup_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/api/docs" if settings.DEBUG else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if settings.DEBUG else None,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.link_repository = LinkRepository(settings.STORE_PATH)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.REQUEST_LOGGING_ENABLED:
        app.add_middleware(LoggingMiddleware)

    app.include_router(api_router)
    register_exception_handlers(app)

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    logger.info(f"Server running at http://localhost:{default_settings.PORT}")
    uvicorn.run(
        app,
        host=default_settings.HOST,
        port=default_settings.PORT,
        log_level=default_settings.LOG_LEVEL.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    run()

"""Test fixtures for the URL shortener application."""

from pathlib import Path
from typing import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from shortlink.core.config import Settings
from shortlink.main import create_app
from shortlink.repositories.link_repository import LinkRepository
from shortlink.services.shortener import ShortenerService
from shortlink.services.stats import StatsService

TEST_BASE_DOMAIN = "shortmyurl.us.kg"


@pytest.fixture
def store_path(tmp_path) -> Path:
    """Location of an isolated store file."""
    return tmp_path / "database.json"


@pytest.fixture
def test_settings(store_path) -> Settings:
    """Settings pointing at the isolated store, ignoring any .env file."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="testing",
        DEBUG=True,
        BASE_DOMAIN=TEST_BASE_DOMAIN,
        STORE_PATH=store_path,
        LOG_LEVEL="DEBUG",
    )


@pytest.fixture
def link_repository(store_path) -> LinkRepository:
    """Return a record store over the isolated file."""
    return LinkRepository(store_path)


@pytest.fixture
def shortener_service(link_repository) -> ShortenerService:
    """Return a shortener service over the isolated store."""
    return ShortenerService(link_repository=link_repository, base_domain=TEST_BASE_DOMAIN)


@pytest.fixture
def stats_service(link_repository) -> StatsService:
    """Return a stats service over the isolated store."""
    return StatsService(link_repository=link_repository)


@pytest.fixture
def test_app(test_settings) -> FastAPI:
    """Create FastAPI test app over the isolated store."""
    return create_app(test_settings)


@pytest.fixture
def client(test_app) -> Generator[TestClient, None, None]:
    """Return FastAPI TestClient instance."""
    with TestClient(test_app) as test_client:
        yield test_client

import pytest
from fastapi.testclient import TestClient

from intolink.services import ResolveService, ShortenService
from intolink.utils.config import AppSettings
from intolink.web import create_app


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(redis_url='redis://redis.test:6379/0')


@pytest.fixture
def app(memory_dao, generator, settings):
    """Application wired to the in-memory mapping store."""
    return create_app(
        shorten_service=ShortenService(dao=memory_dao, generator=generator),
        resolve_service=ResolveService(dao=memory_dao),
        settings=settings,
    )


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)

import pytest
from faker import Faker
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app


@pytest.fixture
def settings() -> Settings:
    """Fast, finite stream settings so the streaming routes can be read to the end."""
    return Settings(STREAM_INTERVAL_SECONDS=0, STREAM_LIMIT=3)


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def faker() -> Faker:
    f = Faker("zh_CN")
    f.seed_instance(1234)
    return f

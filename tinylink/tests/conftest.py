import pytest
from fastapi.testclient import TestClient

from tinylink.core.config import Settings
from tinylink.db.registry import Registry
from tinylink.main import create_app


@pytest.fixture
def test_settings():
    return Settings(BASE_URL="http://sho.rt", ENVIRONMENT="development")


@pytest.fixture
def registry():
    """Creates a fresh registry for each test."""
    return Registry()


@pytest.fixture
def app(test_settings, registry):
    return create_app(settings=test_settings, registry=registry)


@pytest.fixture
def client(app):
    """Creates a test client bound to the per-test registry."""
    return TestClient(app)


@pytest.fixture
def sample_urls():
    """Provides sample URLs for testing."""
    return [
        "https://example.com/test1",
        "https://google.com/search?q=test",
        "http://github.com/user/repo",
    ]


@pytest.fixture
def code_sequence():
    """Factory for code generators that hand out the given codes in order."""
    def make(*codes):
        remaining = list(codes)

        def generate():
            return remaining.pop(0)

        return generate
    return make

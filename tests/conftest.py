"""Test configuration and fixtures."""
import pytest

from app import create_app


class TestConfig:
    """Test configuration."""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    LOG_LEVEL = 'DEBUG'
    API_KEY = None  # Disable auth for tests
    CORS_ORIGINS = '*'
    MAX_SOURCE_RECORDS = 50


class AuthTestConfig(TestConfig):
    """Test configuration with API key auth enabled."""
    API_KEY = 'test-api-key'


@pytest.fixture
def app():
    """Create and configure a test application instance."""
    app = create_app(TestConfig)
    yield app


@pytest.fixture
def client(app):
    """Create a test client."""
    return app.test_client()


@pytest.fixture
def auth_client():
    """Create a test client for an app that requires an API key."""
    return create_app(AuthTestConfig).test_client()


@pytest.fixture
def square_source():
    """PP records tracing a 4x4 square."""
    return [
        {'command': 'PP', 'numbers': [0, 0]},
        {'command': 'PP', 'numbers': [4, 0]},
        {'command': 'PP', 'numbers': [4, 4]},
        {'command': 'PP', 'numbers': [0, 4]},
    ]


@pytest.fixture
def arc_source():
    """A start point followed by a KB semicircle and an infeasible KB arc."""
    return [
        {'command': 'PP', 'numbers': [0, 0]},
        {'command': 'KB', 'numbers': [4, 0, 2], 'type': 'cc'},
        {'command': 'KB', 'numbers': [14, 0, 1], 'type': 'cw'},
    ]

"""
Shared Test Fixtures for the Blog

Fixtures build an application on a temporary SQLite file and assets
folder, and provide fake avatar responses so no test touches the network.
"""

import pytest
from unittest.mock import MagicMock, patch

from blog import create_app, db


PNG_BYTES = b'\x89PNG\r\n\x1a\n' + b'\x00\x00\x00\rIHDR' + b'\x01' * 32


# =============================================================================
# Application Fixtures
# =============================================================================

@pytest.fixture
def app(tmp_path):
    """An application backed by a throwaway database and assets folder."""
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'posts.db'}",
        'ASSETS_FOLDER': str(tmp_path / 'assets'),
        'AVATAR_FETCH_TIMEOUT': 5.0,
    })
    yield app
    with app.app_context():
        db.session.remove()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def app_ctx(app):
    """Push an application context for tests calling modules directly."""
    with app.app_context():
        yield app


# =============================================================================
# Data Fixtures
# =============================================================================

@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def make_submission():
    """Factory for Submission objects with valid defaults."""
    from blog.submission import Submission

    def _make(**overrides):
        fields = {
            'user': 'alice',
            'date': '2024-03-01',
            'text': 'hello',
            'avatar': '',
            'image': b'',
            'image_content_type': None,
        }
        fields.update(overrides)
        return Submission(**fields)

    return _make


# =============================================================================
# HTTP Fixtures
# =============================================================================

def make_response(content=PNG_BYTES, content_type='image/png'):
    response = MagicMock()
    response.headers = {} if content_type is None else {'Content-Type': content_type}
    response.content = content
    return response


@pytest.fixture
def mock_avatar_get():
    """Patch requests.get as seen by the avatar fetcher.

    Usage:
        def test_x(mock_avatar_get):
            mock_avatar_get.return_value = make_response(content_type='text/html')
    """
    with patch('blog.avatar.requests.get') as mock_get:
        mock_get.return_value = make_response()
        yield mock_get

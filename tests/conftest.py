"""
Pytest configuration and fixtures.
"""

import pytest

from app import create_app
from config import Config


@pytest.fixture
def static_dir(tmp_path):
    """A static directory with an index page and a nested asset."""
    root = tmp_path / "frontend"
    (root / "js").mkdir(parents=True)
    (root / "index.html").write_text("<h1>Books</h1>", encoding="utf-8")
    (root / "js" / "app.js").write_text("console.log('books');", encoding="utf-8")
    (tmp_path / "secret.txt").write_text("not for you", encoding="utf-8")
    return root


@pytest.fixture
def app(static_dir):
    class TestConfig(Config):
        TESTING = True
        STATIC_DIRECTORY = str(static_dir)

    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()

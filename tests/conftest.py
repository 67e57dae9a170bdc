"""
Shared test fixtures and configuration for jsondb tests.
"""
import json
from pathlib import Path

import pytest
from flask import Flask
from flask.testing import FlaskClient

from jsondb import create_app
from jsondb.config import Config
from jsondb.storage.collection_store import CollectionStore
from jsondb.storage.document_store import DocumentStore


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Backing file location inside a temporary directory (not created)."""
    return tmp_path / "data" / "db.json"


@pytest.fixture
def static_dir(tmp_path: Path) -> Path:
    """Location for built front-end assets (not created)."""
    return tmp_path / "dist"


@pytest.fixture
def app(db_path: Path, static_dir: Path) -> Flask:
    """Create a test Flask application bound to a temporary document."""

    class TestConfig(Config):
        TESTING = True
        JSONDB_PATH = db_path
        STATIC_DIR = static_dir

    yield create_app(TestConfig)


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Create a Flask test client."""
    return app.test_client()


@pytest.fixture
def document_store(db_path: Path) -> DocumentStore:
    """A DocumentStore whose file has not been created yet."""
    return DocumentStore(db_path)


@pytest.fixture
def collection_store(document_store: DocumentStore) -> CollectionStore:
    """An initialized CollectionStore over an empty document."""
    store = CollectionStore(document_store)
    store.initialize()
    return store


@pytest.fixture
def write_raw(db_path: Path):
    """Write arbitrary (possibly invalid) content to the backing file."""

    def _write(text: str) -> Path:
        db_path.parent.mkdir(parents=True, exist_ok=True)
        db_path.write_text(text, encoding="utf-8")
        return db_path

    return _write


@pytest.fixture
def read_disk(db_path: Path):
    """Decode whatever is currently on disk."""
    return lambda: json.loads(db_path.read_text(encoding="utf-8"))

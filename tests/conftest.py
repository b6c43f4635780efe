import pytest

from site_pins.app import create_app, get_store
from site_pins.database_client import MarkerStore


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "markers.db")


@pytest.fixture
def app(db_path):
    app = create_app({"TESTING": True, "MARKERS_DB_PATH": db_path})
    yield app
    get_store(app).close()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(db_path):
    store = MarkerStore(db_path)
    store.initialize()
    yield store
    store.close()

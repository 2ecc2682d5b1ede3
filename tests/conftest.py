import os

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///./test_tunesearch.db")
os.environ.setdefault("CATALOG_COUNTRY", "sa")
os.environ.setdefault("CATALOG_LIMIT", "30")
os.environ.setdefault("STRICT_UPSTREAM_ERRORS", "false")

from tests.helpers import StubConnector  # noqa: E402
from tunesearch.api.deps import get_catalog_connector  # noqa: E402
from tunesearch.config import get_settings  # noqa: E402
from tunesearch.database import SessionLocal, engine  # noqa: E402
from tunesearch.main import create_app  # noqa: E402
from tunesearch.models.base import Base  # noqa: E402


@pytest.fixture(autouse=True)
def reset_db():
    get_settings.cache_clear()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def catalog():
    return StubConnector()


@pytest.fixture()
def app(catalog):
    application = create_app()
    application.dependency_overrides[get_catalog_connector] = lambda: catalog
    return application


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def db_session():
    with SessionLocal() as db:
        yield db
        db.rollback()

import pytest
from fastapi.testclient import TestClient

import config
from database import Database
from main import create_app


@pytest.fixture
def settings(tmp_path):
    return config.Settings(mode=config.TEST_MODE, database_url=f"sqlite:///{tmp_path / 'emails.db'}")


@pytest.fixture
def database(settings):
    db = Database(settings.sqlalchemy_url())
    yield db
    db.dispose()


@pytest.fixture
def app(settings, database):
    return create_app(settings, database)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def payload():
    return {
        "conta": "financeiro@example.com",
        "empresa_id": 7,
        "crd_id": "CRD-001",
        "tipo_conta": "imap",
    }

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session

# Pas d'echo SQL ni de fichier app.db pendant les tests
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from app.db.session import build_engine, get_session, init_db  # noqa: E402
from app.main import app  # noqa: E402


@pytest.fixture
def engine():
    # Une base en mémoire par test, partagée entre les sessions grâce à StaticPool
    engine = build_engine("sqlite://", echo=False, poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _session_override():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = _session_override
    yield TestClient(app)
    app.dependency_overrides.clear()

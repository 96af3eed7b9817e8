import pytest
from fastapi.testclient import TestClient

from medibloc.db.base import Base
from medibloc.db.session import build_engine, build_session_factory
from medibloc.main import create_app

from tests.helpers import create_user


@pytest.fixture()
def engine(tmp_path):
    """One SQLite file per test: handlers run in worker threads, so no in-memory db."""
    engine = build_engine(f"sqlite:///{tmp_path / 'medibloc-test.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def app(session_factory):
    return create_app(session_factory)


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def admin(db_session):
    return create_user(db_session, "admin@example.com", role="ADMIN")


@pytest.fixture()
def doctor_user(db_session):
    return create_user(db_session, "house@example.com", role="DOCTOR")


@pytest.fixture()
def patient_user(db_session):
    return create_user(db_session, "john@example.com", role="PATIENT")

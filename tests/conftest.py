import os

# Must be set before ebank modules read their configuration
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_DIR"] = ""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from ebank.database import create_db_and_tables, get_session
from ebank.main import app
from ebank.services.bank_account import BankAccountService


@pytest.fixture
def engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def service(session):
    return BankAccountService(session)


@pytest.fixture
def client(engine):
    """API client whose requests hit the test database"""
    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()

"""Shared test fixtures: in-memory database, API client and users."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from stock_tracker.database import Base, get_db
from stock_tracker.dependencies.auth import USER_ID_HEADER
from stock_tracker.dependencies.market_data import get_quote_client
from stock_tracker.main import app
from stock_tracker.models import User
from stock_tracker.rate_limiter import limiter
from stock_tracker.services.market_data.alpha_vantage_client import AlphaVantageClient


@pytest.fixture
def engine():
    """Create an in-memory SQLite engine shared across connections."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    """Create a fresh database session for each test."""
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = testing_session_local()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def quote_client():
    """Quote client double; returns no prices unless a test says otherwise."""
    client = MagicMock(spec=AlphaVantageClient)
    client.get_current_prices.return_value = {}
    return client


@pytest.fixture
def client(db, quote_client):
    """Create test client with database and quote client overrides."""
    limiter.reset()

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_quote_client] = lambda: quote_client
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db):
    """Create a test user."""
    user = User(email="investor@example.com", name="Test Investor")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def other_user(db):
    """Create a second user for ownership checks."""
    user = User(email="someone.else@example.com", name="Someone Else")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def auth_headers(test_user):
    """Headers identifying the test user."""
    return {USER_ID_HEADER: test_user.id}


@pytest.fixture
def auth_client(client, auth_headers):
    """Client acting as the test user."""
    client.headers.update(auth_headers)
    return client

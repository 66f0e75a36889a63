"""Pytest configuration and shared fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("OTEL_ENABLED", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from ticketorder_api import models
from ticketorder_api.database import Base, get_db, make_engine
from ticketorder_api.main import app


def seed_scenario(db) -> None:
    db.add_all([
        models.Event(id=1, name="Concert"),
        models.Event(id=2, name="Theater"),
        models.Customer(id=1, full_name="John Doe"),
        models.Customer(id=2, full_name="Jane Smith"),
    ])
    db.flush()
    db.add_all([
        models.TicketOrder(id=1, event_id=1, customer_id=1, ticket_count=2),
        models.TicketOrder(id=2, event_id=2, customer_id=2, ticket_count=3),
    ])
    db.commit()


@pytest.fixture
def engine():
    engine = make_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    seed_scenario(db)
    yield db
    db.close()


@pytest.fixture
def api_client(db_session, session_factory) -> TestClient:
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()

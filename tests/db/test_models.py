from datetime import datetime, timezone

import pytest
from sqlalchemy import inspect, select

from src.db.database import get_engine, get_session_factory, init_db
from src.db.models import Lead

# In-memory SQLite is enough for the single JSON-column table
TEST_DATABASE_URL = "sqlite:///:memory:"


# --- Test Fixtures ---

@pytest.fixture
def test_engine():
    engine = get_engine(TEST_DATABASE_URL)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(test_engine):
    """Provides a session per test."""
    with get_session_factory(test_engine)() as session:
        yield session


# --- Test Cases ---

def test_leads_table_created(test_engine):
    inspector = inspect(test_engine)
    assert "leads" in inspector.get_table_names()
    columns = {c["name"] for c in inspector.get_columns("leads")}
    assert columns == {"id", "name", "whatsapp", "email", "result", "answers", "created_at", "updated_at"}


def test_create_lead_defaults(db_session):
    lead = Lead(
        name="Test User",
        whatsapp="0501234567",
        result={"riskScore": 10, "profileType": "low-risk"},
        answers=[{"questionId": "q1", "value": False}],
    )
    db_session.add(lead)
    db_session.commit()

    fetched = db_session.scalars(select(Lead)).one()
    assert len(fetched.id) == 36
    assert fetched.email is None
    assert fetched.created_at is not None
    assert fetched.result["profileType"] == "low-risk"
    assert fetched.answers == [{"questionId": "q1", "value": False}]


def test_to_dict_uses_camel_case_timestamps():
    stamp = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    lead = Lead(
        id="abc",
        name="Test User",
        whatsapp="0501234567",
        email="t@example.com",
        result={},
        answers=[],
        created_at=stamp,
        updated_at=stamp,
    )
    data = lead.to_dict()
    assert data["id"] == "abc"
    assert data["createdAt"] == "2024-01-02T03:04:05+00:00"
    assert data["updatedAt"] == data["createdAt"]

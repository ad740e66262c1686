"""Shared fixtures: in-memory SQLite for both the app and repository tests."""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["DB_RESET_ON_STARTUP"] = "true"
os.environ["API_KEY"] = ""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import sessionmaker


@pytest.fixture
def client():
    """Test client; the lifespan recreates the tables on every use."""
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def session():
    """Async session on a private in-memory database."""
    from db.database import create_engine_for, init_models

    engine = create_engine_for("sqlite+aiosqlite:///:memory:")
    await init_models(bind=engine)
    session_factory = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as db_session:
        yield db_session
    await engine.dispose()


@pytest.fixture
def customer_payload():
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@example.com",
        "phone": "555-0100",
    }


@pytest.fixture
def staff_payload():
    return {
        "firstName": "Maria",
        "lastName": "Garcia",
        "role": "Massage Therapist",
        "email": "maria.garcia@serenespa.com",
    }


@pytest.fixture
def service_payload():
    return {
        "name": "Swedish Massage",
        "description": "Full body massage",
        "duration": 60,
        "price": "85.00",
    }


@pytest.fixture
def booking_refs(client, customer_payload, staff_payload, service_payload):
    """Create a customer, staff member and service; return their ids."""
    customer_id = client.post("/api/customers", json=customer_payload).json()["id"]
    staff_id = client.post("/api/staff", json=staff_payload).json()["id"]
    service_id = client.post("/api/services", json=service_payload).json()["id"]
    return {"customerId": customer_id, "staffId": staff_id, "serviceId": service_id}


@pytest.fixture
def appointment_payload(booking_refs):
    return {
        "date": "2025-01-15",
        "startTime": "10:00:00",
        "endTime": "11:00:00",
        "notes": "First visit",
        **booking_refs,
    }

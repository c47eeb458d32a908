"""
CareBook Backend — Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, so every test starts clean):
    ├── registry / patient_service / ...: services over fresh seeded stores
    ├── empty_registry: services over empty stores
    ├── app: a FastAPI app from create_app() with its own stores
    └── test_client: HTTPX AsyncClient talking to `app` in-process
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_DEMO_DATA"] = "true"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from carebook.config import Settings
from carebook.main import create_app
from carebook.registry import build_registry


# ══════════════════════════════════════════════════════════════════════════
# Service Fixtures (no HTTP)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def registry():
    """Stores seeded with pat1/pat2, prov1/prov2, app1/app2."""
    return build_registry(seed_demo_data=True)


@pytest.fixture
def empty_registry():
    return build_registry(seed_demo_data=False)


@pytest.fixture
def patient_service(registry):
    return registry.patients


@pytest.fixture
def provider_service(registry):
    return registry.providers


@pytest.fixture
def appointment_service(registry):
    return registry.appointments


# ══════════════════════════════════════════════════════════════════════════
# Request Payloads
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def patient_payload():
    return {"firstName": "Alice", "lastName": "Smith", "dateOfBirth": "1990-01-01"}


@pytest.fixture
def provider_payload():
    return {"firstName": "Dr. Sarah", "lastName": "Doe", "specialty": "Dermatology"}


@pytest.fixture
def appointment_payload():
    return {
        "patientId": "pat1",
        "providerId": "prov1",
        "date": "2025-06-15T10:00:00Z",
        "type": "Check-up",
    }


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app():
    """A new application (and therefore new stores) for each test."""
    return create_app(Settings(seed_demo_data=True, log_level="WARNING"))


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

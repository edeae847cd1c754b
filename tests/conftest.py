"""
Test configuration for the hospital patient management backend.
"""
import os

# Settings are read at import time, so the environment is prepared first
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["BOOTSTRAP_STAFF_EMAIL"] = ""
os.environ["BOOTSTRAP_STAFF_PASSWORD"] = ""

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.database import Base, get_db
from src.main import app
from src.chat.client import AIGatewayClient, get_ai_gateway_client

# Test database URL
TEST_DATABASE_URL = "sqlite:///./test.db"

# Create test database engine
engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

STAFF_ACCOUNT = {
    "email": "nurse@stmarys-hospital.org",
    "full_name": "Nina Nurse",
    "password": "Password123!",
}

GATEWAY_URL = "https://gateway.test/v1/chat/completions"


@pytest.fixture(scope="function")
def db():
    """
    Create a fresh database for each test.
    """
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """
    Create a test client with a test database session.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    app.dependency_overrides = {}


@pytest.fixture
def staff():
    """
    Registration payload of the test staff account.
    """
    return dict(STAFF_ACCOUNT)


@pytest.fixture
def auth_headers(client):
    """
    Register a staff account and return a bearer Authorization header.
    """
    response = client.post("/api/v1/auth/register", json=STAFF_ACCOUNT)
    assert response.status_code == 201

    response = client.post(
        "/api/v1/auth/login",
        json={"email": STAFF_ACCOUNT["email"], "password": STAFF_ACCOUNT["password"]},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def patient_payload():
    """
    A fully populated add-patient form.
    """
    return {
        "full_name": "John Smith",
        "date_of_birth": "1980-04-12",
        "gender": "Male",
        "contact_number": "555-0101",
        "email": "john.smith@example.com",
        "address": "12 Elm Street",
        "emergency_contact_name": "Mary Smith",
        "emergency_contact_number": "555-0199",
        "blood_group": "O+",
        "allergies": "Penicillin",
    }


@pytest.fixture
def patient(client, auth_headers, patient_payload):
    """
    Create a patient through the API and return the response body.
    """
    response = client.post("/api/v1/patients", json=patient_payload, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def gateway(client):
    """
    Replace the AI gateway with an httpx mock transport.

    Call the fixture with a handler (request -> httpx.Response). It returns
    the list of requests the handler received.
    """
    def install(handler, api_key="test-key"):
        requests = []

        def recording_handler(request):
            requests.append(request)
            return handler(request)

        app.dependency_overrides[get_ai_gateway_client] = lambda: AIGatewayClient(
            api_key=api_key,
            url=GATEWAY_URL,
            model="test-model",
            transport=httpx.MockTransport(recording_handler),
        )
        return requests

    return install

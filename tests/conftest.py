import os
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set testing environment variable
os.environ["TESTING"] = "1"

# Ensure we're using SQLite for tests
os.environ["TEST_DATABASE_URL"] = "sqlite:///./test.db"

from medibook.main import app
from medibook.core.database import get_db, Base

# Create test database
SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(
    SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False}
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def override_get_db():
    try:
        db = TestingSessionLocal()
        yield db
    finally:
        db.close()

app.dependency_overrides[get_db] = override_get_db

@pytest.fixture(scope="function")
def test_db():
    # Create tables
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

@pytest.fixture
def db(test_db):
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture
def client():
    with TestClient(app, base_url="http://testserver") as test_client:
        yield test_client

# Test data
@pytest.fixture
def patient_data():
    return {
        "name": "Ann",
        "age": 30,
        "gender": "female",
        "contact": "555",
        "address": "1 Rd"
    }

@pytest.fixture
def doctor_data():
    return {
        "name": "Dr. Gregory House",
        "specialization": "Diagnostics",
        "experience": 20,
        "contact": "555-0100",
        "email": "house@example.com"
    }

@pytest.fixture
def patient(client, test_db, patient_data):
    response = client.post("/api/patients", json=patient_data)
    assert response.status_code == 201
    return response.json()

@pytest.fixture
def doctor(client, test_db, doctor_data):
    response = client.post("/api/doctors", json=doctor_data)
    assert response.status_code == 201
    return response.json()

@pytest.fixture
def book(client, patient, doctor):
    """Create appointments through the API; defaults to the patient and doctor fixtures."""
    def _book(date, time="09:00", reason="checkup", **overrides):
        body = {
            "patientId": patient["id"],
            "doctorId": doctor["id"],
            "date": str(date),
            "time": time,
            "reason": reason,
        }
        body.update(overrides)
        response = client.post("/api/appointments", json=body)
        assert response.status_code == 201, response.text
        return response.json()
    return _book

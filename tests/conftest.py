"""Shared pytest fixtures and configuration."""

from datetime import timedelta

import mongomock
import pytest
from fastapi.testclient import TestClient

from app.core.auth import create_access_token
from app.core.config import Settings
from app.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        mongodb_db="student_management_test",
        jwt_secret_key="test-secret",
        jwt_expire_minutes=5,
    )


@pytest.fixture
def mongo_client():
    """In-memory MongoDB client."""
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def db(mongo_client, settings: Settings):
    return mongo_client[settings.mongodb_db]


@pytest.fixture
def app(settings: Settings, mongo_client):
    return create_app(settings=settings, mongo_client=mongo_client)


@pytest.fixture
def client(app):
    """Test client; startup (index creation) runs on enter."""
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def token(settings: Settings) -> str:
    return create_access_token({"sub": "registrar"}, settings=settings)


@pytest.fixture
def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def expired_token(settings: Settings) -> str:
    return create_access_token(
        {"sub": "registrar"}, settings=settings, expires_delta=timedelta(minutes=-1)
    )


def make_student(**overrides) -> dict:
    """A fully valid student payload."""
    student = {
        "Student_ID": 1,
        "StudentStatus": "Active",
        "YearLevel": 2,
        "FirstName": "John",
        "LastName": "Doe",
        "MiddleName": "Michael",
        "Address": "1234 Elm St, Springfield, IL",
        "Email": "john@x.com",
        "Phone": 123,
        "DateOfBirth": "2000-01-01",
        "PlaceOfBirth": "Springfield, IL",
        "Sex": "Male",
        "Religion": "Christianity",
        "Nationality": "American",
        "CivilStatus": "Single",
        "Course_ID": 101,
        "Subject_ID": 202,
        "Enrollment_ID": 56789,
    }
    student.update(overrides)
    return student


def make_enrollment(**overrides) -> dict:
    enrollment = {
        "Enrollment_ID": 56789,
        "Student_ID": 1,
        "Course_ID": 101,
        "EnrollmentDate": "2024-08-15",
    }
    enrollment.update(overrides)
    return enrollment


def make_subject(**overrides) -> dict:
    subject = {
        "Subject_ID": 202,
        "SubjectName": "Data Structures",
        "SubjectDescription": "Lists, trees, graphs and the algorithms over them.",
        "Course_ID": 101,
    }
    subject.update(overrides)
    return subject


@pytest.fixture
def student_payload() -> dict:
    return make_student()


@pytest.fixture
def enrollment_payload() -> dict:
    return make_enrollment()


@pytest.fixture
def subject_payload() -> dict:
    return make_subject()


@pytest.fixture
def student_factory():
    return make_student


@pytest.fixture
def enrollment_factory():
    return make_enrollment


@pytest.fixture
def subject_factory():
    return make_subject

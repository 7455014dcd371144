"""
Pytest configuration and fixtures for backend tests
"""

import pytest
from starlette.testclient import TestClient

from app.config import Settings
from app.main import get_application
from app.services.store import Store


def make_settings(**overrides) -> Settings:
    values = {
        "DB_FILE": None,
        "API_PREFIX": "",
        "CORS_ALLOW_ALL": True,
        "REQUEST_LOGGING": True,
        "LOG_LEVEL": "INFO",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def make_client():
    """Factory for a client around an app built with overridden settings"""
    def _make_client(**overrides) -> TestClient:
        return TestClient(get_application(make_settings(**overrides)))
    return _make_client


@pytest.fixture
def app():
    """Fresh application with an empty in-memory store"""
    return get_application(make_settings())


@pytest.fixture
def client(app):
    """FastAPI test client"""
    return TestClient(app)


@pytest.fixture
def store():
    """Empty in-memory store"""
    return Store()


@pytest.fixture
def db_file(tmp_path):
    """Path for a backing JSON file (not created)"""
    return tmp_path / "db.json"


@pytest.fixture
def course_data():
    return {
        "title": "Python Basics",
        "description": "Learn Python programming from scratch",
        "teacher": "Dr. Sarah Johnson",
    }


@pytest.fixture
def student_data():
    return {"name": "Ana", "email": "ana@x.com"}


@pytest.fixture
def course(client, course_data):
    """Course created through the API"""
    response = client.post("/courses", json=course_data)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def student(client, student_data):
    """Student created through the API"""
    response = client.post("/students", json=student_data)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def enrollment(client, student, course):
    """Enrollment of ``student`` in ``course``"""
    response = client.post(
        "/enrollments",
        json={"studentId": student["id"], "courseId": course["id"], "date": "2025-01-01"},
    )
    assert response.status_code == 201
    return response.json()

import pytest

from enrollment_app import create_app
from enrollment_app.store import get_store


@pytest.fixture
def app():
    app = create_app({'TESTING': True, 'SQLALCHEMY_DATABASE_URI': 'sqlite://'})
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return get_store()


@pytest.fixture
def valid_form():
    return {
        'studentName': 'Ann Lee',
        'studentId': '1234-5678',
        'courseCode': 'CS401',
        'semester': 'Fall 2024',
        'reason': '',
    }

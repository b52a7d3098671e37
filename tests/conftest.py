import pytest
from fastapi.testclient import TestClient

from contact_directory_api.app.main import create_app
from contact_directory_api.app.services.contact_service import ContactStore


@pytest.fixture
def store():
    return ContactStore()


@pytest.fixture
def app():
    """A fresh application with an empty store."""
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client

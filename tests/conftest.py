"""
Shared pytest fixtures.

Every fixture runs against an in-memory mongomock client, so no MongoDB
server is needed. Each test gets a fresh, empty store.
"""
import os

import mongomock
import pytest
from fastapi.testclient import TestClient

# Quiet logs before any app import
os.environ["LOG_LEVEL"] = "WARNING"

from hrms.core.config import get_settings  # noqa: E402
from hrms.di.container import DIContainer  # noqa: E402
from hrms.domain.repositories.employee_repository import EmployeeRepository  # noqa: E402
from hrms.infrastructure.db.mongo_connection import MongoConnectionManager  # noqa: E402
from hrms.main import create_application  # noqa: E402


@pytest.fixture
def mongo_client():
    """Fresh in-memory MongoClient."""
    return mongomock.MongoClient()


@pytest.fixture
def connection(mongo_client):
    """Connection manager whose client factory hands out the mongomock client."""
    return MongoConnectionManager(
        settings=get_settings(),
        client_factory=lambda *args, **kwargs: mongo_client,
    )


@pytest.fixture
def container(connection):
    return DIContainer(connection)


@pytest.fixture
def repository(container):
    return container.get(EmployeeRepository)


@pytest.fixture
def employees_collection(mongo_client):
    """Raw collection for asserting on stored documents."""
    settings = get_settings()
    return mongo_client[settings.mongo_database_name][settings.employees_collection]


@pytest.fixture
def app(connection):
    return create_application(container_factory=lambda: DIContainer(connection))


@pytest.fixture
def client(app):
    """
    HTTP test client with startup/shutdown hooks run.

    Usage:
        def test_list(client):
            response = client.get("/employee")
            assert response.status_code == 200
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def ana():
    return {"name": "Ana", "age": 30, "salary": 5000}

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from harbor.api.deps import HarborServices, build_memory_services, build_sql_services
from harbor.api.main import create_app
from harbor.application.services import ResourceRegistry, ShipRegistry
from harbor.domain.assignment.read_models import HarborQueries


@pytest.fixture
def services() -> HarborServices:
    """Fresh in-memory services for each test."""
    return build_memory_services()


@pytest.fixture
def sql_services() -> HarborServices:
    """Services backed by a private in-memory SQLite database."""
    return build_sql_services("sqlite://")


@pytest.fixture(params=["memory", "sql"])
def any_services(request) -> HarborServices:
    """Run a test once per storage backend."""
    if request.param == "sql":
        return build_sql_services("sqlite://")
    return build_memory_services()


@pytest.fixture
def resource_registry(services: HarborServices) -> ResourceRegistry:
    return services.resource_registry


@pytest.fixture
def ship_registry(services: HarborServices) -> ShipRegistry:
    return services.ship_registry


@pytest.fixture
def queries(services: HarborServices) -> HarborQueries:
    return services.queries


@pytest.fixture
def client(services: HarborServices) -> Generator[TestClient, None, None]:
    with TestClient(create_app(services)) as c:
        yield c


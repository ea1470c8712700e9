"""
API Dependencies

Builds the repositories, lock manager and services the routes depend on and
exposes them to FastAPI through typed dependencies.
"""

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Request

from harbor.application.services import ResourceRegistry, ShipRegistry
from harbor.core.config import Settings, settings
from harbor.core.db import build_engine, init_db
from harbor.core.observability import get_logger
from harbor.domain.assignment.read_models import HarborQueries
from harbor.domain.assignment.repositories import ResourceRepository, ShipRepository
from harbor.domain.assignment.services.lock_manager import AssignmentLockManager
from harbor.infrastructure.database.repositories import (
    SqlResourceRepository,
    SqlShipRepository,
)
from harbor.infrastructure.memory import (
    InMemoryResourceRepository,
    InMemoryShipRepository,
)

logger = get_logger(__name__)


@dataclass
class HarborServices:
    """Everything one application instance shares between requests."""

    resources: ResourceRepository
    ships: ShipRepository
    locks: AssignmentLockManager
    resource_registry: ResourceRegistry
    ship_registry: ShipRegistry
    queries: HarborQueries

    @classmethod
    def from_repositories(
        cls, resources: ResourceRepository, ships: ShipRepository
    ) -> "HarborServices":
        # One lock manager per store: it is the single serialization point
        locks = AssignmentLockManager()
        return cls(
            resources=resources,
            ships=ships,
            locks=locks,
            resource_registry=ResourceRegistry(resources, ships, locks),
            ship_registry=ShipRegistry(resources, ships, locks),
            queries=HarborQueries(resources, ships),
        )


def build_memory_services() -> HarborServices:
    return HarborServices.from_repositories(
        InMemoryResourceRepository(), InMemoryShipRepository()
    )


def build_sql_services(database_url: str | None = None) -> HarborServices:
    engine = build_engine(database_url)
    init_db(engine)
    return HarborServices.from_repositories(
        SqlResourceRepository(engine), SqlShipRepository(engine)
    )


def build_services(config: Settings = settings) -> HarborServices:
    """Build services for the configured storage backend."""
    logger.info("building_services", storage_backend=config.STORAGE_BACKEND)
    if config.STORAGE_BACKEND == "sql":
        return build_sql_services(config.DATABASE_URL)
    return build_memory_services()


def get_services(request: Request) -> HarborServices:
    return request.app.state.services


def get_resource_registry(
    services: Annotated[HarborServices, Depends(get_services)],
) -> ResourceRegistry:
    return services.resource_registry


def get_ship_registry(
    services: Annotated[HarborServices, Depends(get_services)],
) -> ShipRegistry:
    return services.ship_registry


def get_queries(
    services: Annotated[HarborServices, Depends(get_services)],
) -> HarborQueries:
    return services.queries


ResourceRegistryDep = Annotated[ResourceRegistry, Depends(get_resource_registry)]
ShipRegistryDep = Annotated[ShipRegistry, Depends(get_ship_registry)]
HarborQueriesDep = Annotated[HarborQueries, Depends(get_queries)]

"""
In-memory repository implementations.

Records are kept in insertion-ordered dicts guarded by a lock. Every read and
write copies the entity so callers never share state with the store.
"""

import threading

from harbor.domain.assignment.entities import Resource, Ship
from harbor.domain.assignment.repositories import ResourceRepository, ShipRepository
from harbor.domain.assignment.value_objects import ResourceKind
from harbor.domain.shared.exceptions import (
    AlreadyExistsError,
    ResourceNotFoundError,
    ShipNotFoundError,
)


class _IdSequence:
    def __init__(self) -> None:
        self._last = 0

    def next(self, taken: dict) -> int:
        candidate = self._last + 1
        while candidate in taken:
            candidate += 1
        self._last = candidate
        return candidate


class InMemoryResourceRepository(ResourceRepository):
    """Resource store backed by a dict."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: dict[int, Resource] = {}
        self._ids = _IdSequence()

    def add(self, resource: Resource) -> Resource:
        with self._lock:
            if resource.id is None:
                resource_id = self._ids.next(self._items)
            elif resource.id in self._items:
                raise AlreadyExistsError("resource", resource.id)
            else:
                resource_id = resource.id

            stored = resource.model_copy(update={"id": resource_id})
            self._items[resource_id] = stored
            return stored.model_copy()

    def get_by_id(self, resource_id: int) -> Resource | None:
        with self._lock:
            resource = self._items.get(resource_id)
            return resource.model_copy() if resource is not None else None

    def get_all(self, kind: ResourceKind | None = None) -> list[Resource]:
        with self._lock:
            return [
                r.model_copy()
                for r in self._items.values()
                if kind is None or r.kind == kind
            ]

    def save(self, resource: Resource) -> Resource:
        with self._lock:
            if resource.id is None or resource.id not in self._items:
                raise ResourceNotFoundError(resource.id or 0)
            self._items[resource.id] = resource.model_copy()
            return resource.model_copy()


class InMemoryShipRepository(ShipRepository):
    """Ship store backed by a dict."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._items: dict[int, Ship] = {}
        self._ids = _IdSequence()

    def add(self, ship: Ship) -> Ship:
        with self._lock:
            if ship.id is None:
                ship_id = self._ids.next(self._items)
            elif ship.id in self._items:
                raise AlreadyExistsError("ship", ship.id)
            else:
                ship_id = ship.id

            stored = ship.model_copy(update={"id": ship_id})
            self._items[ship_id] = stored
            return stored.model_copy()

    def get_by_id(self, ship_id: int) -> Ship | None:
        with self._lock:
            ship = self._items.get(ship_id)
            return ship.model_copy() if ship is not None else None

    def get_all(self) -> list[Ship]:
        with self._lock:
            return [s.model_copy() for s in self._items.values()]

    def get_by_resource(self, resource_id: int) -> list[Ship]:
        with self._lock:
            return [
                s.model_copy()
                for s in self._items.values()
                if s.assigned_resource_id == resource_id
            ]

    def count_by_resource(self, resource_id: int) -> int:
        with self._lock:
            return sum(
                1 for s in self._items.values() if s.assigned_resource_id == resource_id
            )

    def save(self, ship: Ship) -> Ship:
        with self._lock:
            if ship.id is None or ship.id not in self._items:
                raise ShipNotFoundError(ship.id or 0)
            self._items[ship.id] = ship.model_copy()
            return ship.model_copy()

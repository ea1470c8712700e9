"""
SQL repository implementation for docks and haulers.
"""

from harbor.domain.assignment.entities import Resource
from harbor.domain.assignment.repositories import ResourceRepository
from harbor.domain.assignment.value_objects import ResourceKind
from harbor.domain.shared.exceptions import AlreadyExistsError, ResourceNotFoundError

from ..models import ResourceRow
from .base import BaseRepository
from .mappers import resource_to_domain, resource_to_row


class SqlResourceRepository(BaseRepository[ResourceRow], ResourceRepository):
    """Resource repository backed by the resources table."""

    row_class = ResourceRow

    def add(self, resource: Resource) -> Resource:
        with self.session("add_resource") as session:
            if resource.id is not None and self._get_row(session, resource.id):
                raise AlreadyExistsError("resource", resource.id)
            row = self._insert(session, resource_to_row(resource))
            return resource_to_domain(row)

    def get_by_id(self, resource_id: int) -> Resource | None:
        with self.session("get_resource") as session:
            row = self._get_row(session, resource_id)
            return resource_to_domain(row) if row is not None else None

    def get_all(self, kind: ResourceKind | None = None) -> list[Resource]:
        with self.session("list_resources") as session:
            criteria = [ResourceRow.kind == kind.value] if kind is not None else []
            return [resource_to_domain(row) for row in self._all_rows(session, *criteria)]

    def save(self, resource: Resource) -> Resource:
        with self.session("save_resource") as session:
            row = self._get_row(session, resource.id) if resource.id else None
            if row is None:
                raise ResourceNotFoundError(resource.id or 0)
            row = self._insert(session, resource_to_row(resource, row))
            return resource_to_domain(row)

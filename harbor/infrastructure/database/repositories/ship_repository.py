"""
SQL repository implementation for ships.
"""

from sqlalchemy import func
from sqlmodel import select

from harbor.domain.assignment.entities import Ship
from harbor.domain.assignment.repositories import ShipRepository
from harbor.domain.shared.exceptions import AlreadyExistsError, ShipNotFoundError

from ..models import ShipRow
from .base import BaseRepository
from .mappers import ship_to_domain, ship_to_row


class SqlShipRepository(BaseRepository[ShipRow], ShipRepository):
    """Ship repository backed by the ships table."""

    row_class = ShipRow

    def add(self, ship: Ship) -> Ship:
        with self.session("add_ship") as session:
            if ship.id is not None and self._get_row(session, ship.id):
                raise AlreadyExistsError("ship", ship.id)
            row = self._insert(session, ship_to_row(ship))
            return ship_to_domain(row)

    def get_by_id(self, ship_id: int) -> Ship | None:
        with self.session("get_ship") as session:
            row = self._get_row(session, ship_id)
            return ship_to_domain(row) if row is not None else None

    def get_all(self) -> list[Ship]:
        with self.session("list_ships") as session:
            return [ship_to_domain(row) for row in self._all_rows(session)]

    def get_by_resource(self, resource_id: int) -> list[Ship]:
        with self.session("list_ships_by_resource") as session:
            rows = self._all_rows(session, ShipRow.resource_id == resource_id)
            return [ship_to_domain(row) for row in rows]

    def count_by_resource(self, resource_id: int) -> int:
        with self.session("count_ships_by_resource") as session:
            statement = (
                select(func.count())
                .select_from(ShipRow)
                .where(ShipRow.resource_id == resource_id)
            )
            return session.exec(statement).one()

    def save(self, ship: Ship) -> Ship:
        with self.session("save_ship") as session:
            row = self._get_row(session, ship.id) if ship.id else None
            if row is None:
                raise ShipNotFoundError(ship.id or 0)
            row = self._insert(session, ship_to_row(ship, row))
            return ship_to_domain(row)

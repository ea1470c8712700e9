"""
Tests for the occupancy read models and the harbor query surface.
"""

import pytest

from harbor.domain.assignment.value_objects import ResourceKind
from harbor.domain.shared.exceptions import ResourceNotFoundError
from harbor.tests.factories import fill, make_resource, make_ship


class TestResourceWithShips:
    def test_view_reports_occupants_and_free_capacity(self, any_services):
        dock = make_resource(any_services, capacity=3)
        occupants = fill(any_services, dock.id, 2)
        make_ship(any_services)

        view = any_services.queries.resource_with_ships(dock.id)

        assert view.resource.id == dock.id
        assert {s.id for s in view.ships} == {s.id for s in occupants}
        assert view.occupancy == 2
        assert view.free_capacity == 1
        assert not view.is_full
        assert view.utilization == pytest.approx(2 / 3)

    def test_view_tracks_later_changes(self, services):
        dock = make_resource(services, capacity=1)
        ship = make_ship(services, dock.id)
        assert services.queries.resource_with_ships(dock.id).is_full

        services.ship_registry.release(ship.id)

        view = services.queries.resource_with_ships(dock.id)
        assert view.occupancy == 0
        assert view.free_capacity == 1

    def test_unknown_resource(self, queries):
        with pytest.raises(ResourceNotFoundError):
            queries.resource_with_ships(3)

    def test_serialized_view_includes_computed_fields(self, services):
        dock = make_resource(services, capacity=2)
        make_ship(services, dock.id)

        data = services.queries.resource_with_ships(dock.id).model_dump()

        assert data["occupancy"] == 1
        assert data["free_capacity"] == 1
        assert len(data["ships"]) == 1


class TestHarborOverview:
    def test_overview_totals(self, any_services):
        a = make_resource(any_services, capacity=2)
        b = make_resource(any_services, capacity=3, kind=ResourceKind.HAULER)
        fill(any_services, a.id, 2)
        fill(any_services, b.id, 1)
        make_ship(any_services, name="Drifter")

        overview = any_services.queries.harbor_overview()

        assert overview.total_capacity == 5
        assert overview.total_occupancy == 3
        assert [s.name for s in overview.unassigned_ships] == ["Drifter"]
        assert [v.resource.id for v in overview.resources] == [a.id, b.id]

    def test_overview_by_kind(self, services):
        make_resource(services, capacity=2)
        hauler = make_resource(services, capacity=1, kind=ResourceKind.HAULER)

        overview = services.queries.harbor_overview(kind=ResourceKind.HAULER)

        assert [v.resource.id for v in overview.resources] == [hauler.id]


class TestResourcesWithFreeCapacity:
    def test_full_resources_are_excluded(self, any_services):
        full = make_resource(any_services, capacity=1, name="Full")
        roomy = make_resource(any_services, capacity=2, name="Roomy")
        fill(any_services, full.id, 1)
        fill(any_services, roomy.id, 1)

        available = any_services.queries.resources_with_free_capacity()

        assert [v.resource.name for v in available] == ["Roomy"]

    def test_filter_by_kind(self, services):
        make_resource(services, capacity=1, name="Dock")
        make_resource(services, capacity=1, name="Tug", kind=ResourceKind.HAULER)

        available = services.queries.resources_with_free_capacity(
            kind=ResourceKind.DOCK
        )

        assert [v.resource.name for v in available] == ["Dock"]

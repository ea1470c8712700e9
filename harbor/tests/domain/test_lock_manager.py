"""
Concurrency tests for the assignment lock manager and the registries.
"""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from harbor.application.dtos import ResourceUpdate, ShipCreate
from harbor.domain.assignment.services.lock_manager import (
    AssignmentLockManager,
    resource_key,
    ship_key,
)
from harbor.domain.shared.exceptions import (
    CapacityExceededError,
    CapacityViolationError,
)
from harbor.tests.factories import make_resource, make_ship


class TestAssignmentLockManager:
    def test_keys_are_held_inside_the_block(self):
        locks = AssignmentLockManager()

        with locks.hold([resource_key(1), ship_key(2)]) as held:
            assert held == ["resource:1", "ship:2"]
            assert locks.is_held("resource:1")
            assert locks.is_held("ship:2")

        assert not locks.is_held("resource:1")
        assert not locks.is_held("ship:2")

    def test_none_keys_are_skipped(self):
        locks = AssignmentLockManager()
        with locks.hold([None, resource_key(3), None]) as held:
            assert held == ["resource:3"]

    def test_duplicate_keys_are_held_once(self):
        locks = AssignmentLockManager()
        with locks.hold([resource_key(3), resource_key(3)]) as held:
            assert held == ["resource:3"]

    def test_locks_are_released_on_error(self):
        locks = AssignmentLockManager()
        with pytest.raises(RuntimeError):
            with locks.hold([resource_key(1)]):
                raise RuntimeError("boom")
        assert not locks.is_held(resource_key(1))

    def test_opposite_key_order_does_not_deadlock(self):
        locks = AssignmentLockManager()
        counter = {"value": 0}

        def work(keys):
            for _ in range(200):
                with locks.hold(keys):
                    counter["value"] += 1

        t1 = threading.Thread(target=work, args=(["resource:1", "resource:2"],))
        t2 = threading.Thread(target=work, args=(["resource:2", "resource:1"],))
        t1.start()
        t2.start()
        t1.join(timeout=10)
        t2.join(timeout=10)

        assert not t1.is_alive() and not t2.is_alive()
        assert counter["value"] == 400


class TestConcurrentAssignments:
    def test_parallel_creates_never_exceed_capacity(self, any_services):
        dock = make_resource(any_services, capacity=5)
        barrier = threading.Barrier(20)

        def create(i):
            barrier.wait()
            try:
                any_services.ship_registry.create(
                    ShipCreate(
                        name=f"Ship {i}", type="Cargo", assigned_resource_id=dock.id
                    )
                )
                return True
            except CapacityExceededError:
                return False

        with ThreadPoolExecutor(max_workers=20) as pool:
            results = list(pool.map(create, range(20)))

        assert results.count(True) == 5
        assert any_services.resource_registry.occupancy(dock.id) == 5

    def test_parallel_moves_into_one_slot(self, any_services):
        target = make_resource(any_services, capacity=1, name="Target")
        origin = make_resource(any_services, capacity=10, name="Origin")
        movers = [make_ship(any_services, origin.id, name=f"M{i}") for i in range(10)]
        barrier = threading.Barrier(len(movers))

        def move(ship):
            barrier.wait()
            try:
                any_services.ship_registry.assign(ship.id, target.id)
                return True
            except CapacityExceededError:
                return False

        with ThreadPoolExecutor(max_workers=len(movers)) as pool:
            results = list(pool.map(move, movers))

        assert results.count(True) == 1
        assert any_services.resource_registry.occupancy(target.id) == 1
        assert any_services.resource_registry.occupancy(origin.id) == 9

    def test_shrink_races_with_assignments(self, any_services):
        dock = make_resource(any_services, capacity=4)
        make_ship(any_services, dock.id)
        barrier = threading.Barrier(4)

        def assign(i):
            barrier.wait()
            try:
                make_ship(any_services, dock.id, name=f"Late {i}")
            except CapacityExceededError:
                pass

        def shrink():
            barrier.wait()
            try:
                any_services.resource_registry.update(
                    dock.id, ResourceUpdate(capacity=2)
                )
            except CapacityViolationError:
                pass

        threads = [threading.Thread(target=assign, args=(i,)) for i in range(3)]
        threads.append(threading.Thread(target=shrink))
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        resource = any_services.resource_registry.get(dock.id)
        assert any_services.resource_registry.occupancy(dock.id) <= resource.capacity

"""
API tests for the resource, ship and harbor routes.
"""

import pytest

API = "/api/v1"


def create_resource(client, capacity: int = 2, **fields) -> dict:
    body = {"name": "Pier", "location": "North", "capacity": capacity, **fields}
    response = client.post(f"{API}/resources", json=body)
    assert response.status_code == 201, response.text
    return response.json()


def create_ship(client, resource_id: int | None = None, **fields) -> dict:
    body = {"name": "Nautilus", "type": "Cargo", **fields}
    if resource_id is not None:
        body["assigned_resource_id"] = resource_id
    response = client.post(f"{API}/ships", json=body)
    assert response.status_code == 201, response.text
    return response.json()


class TestResourceRoutes:
    def test_create_and_get(self, client):
        created = create_resource(client, capacity=3, kind="hauler")

        response = client.get(f"{API}/resources/{created['id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Pier"
        assert data["kind"] == "hauler"
        assert data["capacity"] == 3

    @pytest.mark.parametrize("capacity", [0, -1, "two"])
    def test_invalid_capacity(self, client, capacity):
        response = client.post(
            f"{API}/resources", json={"name": "Pier", "capacity": capacity}
        )

        assert response.status_code == 400
        assert response.json()["error"]["type"] == "validation"

    def test_non_object_body(self, client):
        response = client.post(f"{API}/resources", json=[1, 2])
        assert response.status_code == 400

    def test_unknown_resource(self, client):
        response = client.get(f"{API}/resources/999")

        assert response.status_code == 404
        assert response.json()["error"]["type"] == "not_found"

    def test_non_integer_path_is_a_bad_request(self, client):
        response = client.get(f"{API}/resources/pier")
        assert response.status_code == 400

    def test_duplicate_id(self, client):
        create_resource(client, id=5)
        response = client.post(
            f"{API}/resources", json={"id": 5, "name": "Again", "capacity": 1}
        )

        assert response.status_code == 409
        assert response.json()["error"]["type"] == "already_exists"

    def test_list_by_kind(self, client):
        create_resource(client, name="Dock")
        create_resource(client, name="Tug", kind="hauler")

        response = client.get(f"{API}/resources", params={"kind": "hauler"})

        assert [r["name"] for r in response.json()] == ["Tug"]

    def test_shrink_below_occupancy(self, client):
        dock = create_resource(client, capacity=3)
        create_ship(client, dock["id"])
        create_ship(client, dock["id"])

        response = client.patch(f"{API}/resources/{dock['id']}", json={"capacity": 1})

        assert response.status_code == 409
        error = response.json()["error"]
        assert error["type"] == "capacity_violation"
        assert error["details"]["occupancy"] == 2
        assert client.get(f"{API}/resources/{dock['id']}").json()["capacity"] == 3

    def test_shrink_to_occupancy(self, client):
        dock = create_resource(client, capacity=3)
        create_ship(client, dock["id"])

        response = client.patch(f"{API}/resources/{dock['id']}", json={"capacity": 1})

        assert response.status_code == 200
        assert response.json()["capacity"] == 1

    def test_occupancy_view(self, client):
        dock = create_resource(client, capacity=2)
        ship = create_ship(client, dock["id"])

        data = client.get(f"{API}/resources/{dock['id']}/occupancy").json()

        assert data["occupancy"] == 1
        assert data["free_capacity"] == 1
        assert [s["id"] for s in data["ships"]] == [ship["id"]]

    def test_available(self, client):
        full = create_resource(client, capacity=1, name="Full")
        create_resource(client, capacity=1, name="Empty")
        create_ship(client, full["id"])

        data = client.get(f"{API}/resources/available").json()

        assert [v["resource"]["name"] for v in data] == ["Empty"]

    def test_ships_at_unknown_resource(self, client):
        response = client.get(f"{API}/resources/42/ships")
        assert response.status_code == 404


class TestShipRoutes:
    def test_assignment_at_capacity_is_rejected(self, client):
        dock = create_resource(client, capacity=1)
        create_ship(client, dock["id"])

        response = client.post(
            f"{API}/ships",
            json={"name": "Late", "type": "Cargo", "assigned_resource_id": dock["id"]},
        )

        assert response.status_code == 409
        error = response.json()["error"]
        assert error["type"] == "capacity_exceeded"
        assert error["details"]["capacity"] == 1
        assert len(client.get(f"{API}/ships").json()) == 1

    def test_assignment_to_unknown_resource(self, client):
        response = client.post(
            f"{API}/ships",
            json={"name": "Lost", "type": "Cargo", "assigned_resource_id": 77},
        )
        assert response.status_code == 404

    def test_move_between_resources(self, client):
        a = create_resource(client, capacity=1, name="A")
        b = create_resource(client, capacity=1, name="B")
        ship = create_ship(client, a["id"])

        response = client.patch(
            f"{API}/ships/{ship['id']}", json={"assigned_resource_id": b["id"]}
        )

        assert response.status_code == 200
        assert response.json()["assigned_resource_id"] == b["id"]
        assert client.get(f"{API}/resources/{a['id']}/ships").json() == []

    def test_release_with_explicit_null(self, client):
        dock = create_resource(client, capacity=1)
        ship = create_ship(client, dock["id"])

        response = client.patch(
            f"{API}/ships/{ship['id']}", json={"assigned_resource_id": None}
        )

        assert response.status_code == 200
        assert response.json()["assigned_resource_id"] is None
        assert client.get(f"{API}/resources/{dock['id']}/occupancy").json()[
            "occupancy"
        ] == 0

    def test_rename_keeps_assignment(self, client):
        dock = create_resource(client, capacity=1)
        ship = create_ship(client, dock["id"])

        response = client.patch(f"{API}/ships/{ship['id']}", json={"name": "Renamed"})

        assert response.json()["name"] == "Renamed"
        assert response.json()["assigned_resource_id"] == dock["id"]

    def test_filter_by_resource(self, client):
        dock = create_resource(client, capacity=2)
        docked = create_ship(client, dock["id"], name="Docked")
        create_ship(client, name="Drifting")

        response = client.get(f"{API}/ships", params={"resource_id": dock["id"]})

        assert [s["id"] for s in response.json()] == [docked["id"]]

    def test_unknown_ship(self, client):
        response = client.patch(f"{API}/ships/31", json={"name": "Ghost"})
        assert response.status_code == 404


class TestHarborRoutes:
    def test_overview(self, client):
        dock = create_resource(client, capacity=2)
        create_ship(client, dock["id"])
        create_ship(client, name="Drifter")

        data = client.get(f"{API}/harbor/overview").json()

        assert data["total_capacity"] == 2
        assert data["total_occupancy"] == 1
        assert [s["name"] for s in data["unassigned_ships"]] == ["Drifter"]

    def test_correlation_id_is_echoed(self, client):
        response = client.get(
            f"{API}/harbor/overview", headers={"X-Correlation-ID": "abc-123"}
        )
        assert response.headers["X-Correlation-ID"] == "abc-123"

    def test_correlation_id_is_generated(self, client):
        response = client.get(f"{API}/harbor/overview")
        assert response.headers["X-Correlation-ID"]

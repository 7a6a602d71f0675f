"""Integration tests for the REST API.

Each test gets a fresh application, and therefore a fresh in-memory
warehouse with the built-in rooms.
"""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from storerooms.application import ServiceFactory
from storerooms.infrastructure import JsonPendingItemSource
from storerooms.web.app import create_app

ITEMS_PATH = Path(__file__).parent.parent / "fixtures" / "items.json"

pytestmark = pytest.mark.integration


@pytest.fixture
def client(factory: ServiceFactory) -> TestClient:
    return TestClient(create_app(factory, item_source=JsonPendingItemSource(ITEMS_PATH)))


@pytest.fixture
def loaded(client: TestClient) -> TestClient:
    response = client.post("/api/v1/consignments", json={"reference": "GC-1001"})
    assert response.status_code == 200
    return client


class TestRooms:
    """Tests for room endpoints."""

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "healthy"}

    def test_list_rooms(self, client: TestClient) -> None:
        rooms = client.get("/api/v1/rooms").json()
        assert [(r["id"], r["capacity"], r["free"]) for r in rooms] == [
            ("room-a", 100, 100),
            ("room-b", 96, 96),
            ("room-c", 48, 48),
        ]

    def test_unknown_room_is_404(self, client: TestClient) -> None:
        response = client.get("/api/v1/rooms/room-z")
        assert response.status_code == 404
        assert response.json()["error_type"] == "unknown_room"

    def test_slots_are_row_major(self, client: TestClient) -> None:
        slots = client.get("/api/v1/rooms/room-c/slots").json()
        assert len(slots) == 48
        assert slots[8]["id"] == "C-R02-C01"
        assert slots[0]["status"] == "empty"

    def test_select_room(self, client: TestClient) -> None:
        response = client.post("/api/v1/rooms/room-b/select")
        assert response.status_code == 200
        assert response.json()["short_code"] == "B"


class TestConsignments:
    """Tests for loading and listing pending items."""

    def test_load_from_item_source(self, loaded: TestClient) -> None:
        body = loaded.get("/api/v1/pending").json()
        assert body["reference"] == "GC-1001"
        assert body["total_quantity"] == 5
        assert [item["qty"] for item in body["items"]] == [3, 2]

    def test_load_with_inline_items(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/consignments",
            json={"reference": "GC-5", "items": [{"id": "9", "qty": 4, "prefix": "SALT"}]},
        )
        assert response.json()["total_quantity"] == 4

    def test_sorted_listing(self, loaded: TestClient) -> None:
        body = loaded.get(
            "/api/v1/pending", params={"sort_by": "weight", "descending": "false"}
        ).json()
        assert [item["id"] for item in body["items"]] == ["2", "1"]

    def test_selection(self, loaded: TestClient) -> None:
        response = loaded.put("/api/v1/pending/selection", json={"item_ids": ["2"]})
        assert response.json()["selected_item_ids"] == ["2"]

    def test_unknown_selection(self, loaded: TestClient) -> None:
        response = loaded.put("/api/v1/pending/selection", json={"item_ids": ["42"]})
        assert response.status_code == 404


class TestAllocations:
    """Tests for advice and allocation endpoints."""

    def test_advice(self, loaded: TestClient) -> None:
        body = loaded.post("/api/v1/advice", json={"item_id": "1"}).json()
        assert body["kind"] == "current_room"
        assert body["suggested_slot_id"] == "A-R01-C01"

    def test_advice_unknown_item(self, loaded: TestClient) -> None:
        assert loaded.post("/api/v1/advice", json={"item_id": "42"}).status_code == 404

    def test_allocate_then_inspect(self, loaded: TestClient) -> None:
        response = loaded.post(
            "/api/v1/allocations",
            json={"target_slot_id": "A-R01-C01", "item_ids": ["1", "2"]},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["allocated"] == 5
        assert body["message"] == "Successfully allocated 5 slots"

        slot = loaded.get("/api/v1/slots/A-R01-C02").json()
        assert slot["display_label"] == "RICE"
        assert slot["source_reference"] == "GC-1001"
        assert loaded.get("/api/v1/slots/A-R01-C04").json()["display_label"] == "PKG"
        assert loaded.get("/api/v1/pending").json()["items"] == []

    def test_allocation_in_other_room(self, loaded: TestClient) -> None:
        body = loaded.post(
            "/api/v1/allocations",
            json={
                "target_slot_id": "C-R06-C08",
                "item_ids": ["1"],
                "mode": "vertical",
                "room_id": "room-c",
            },
        ).json()
        assert body["slot_ids"] == ["C-R06-C08", "C-R01-C08", "C-R02-C08"]

    def test_capacity_error_is_409(self, client: TestClient) -> None:
        client.post("/api/v1/consignments", json={"reference": "GC-1002"})
        response = client.post(
            "/api/v1/allocations",
            json={"target_slot_id": "C-R01-C01", "item_ids": ["1"], "room_id": "room-c"},
        )
        assert response.status_code == 409
        assert response.json()["details"] == {
            "needed": 60,
            "available": 48,
            "room_id": "room-c",
        }
        assert client.get("/api/v1/rooms/room-c").json()["free"] == 48

    def test_unknown_target_slot_is_404(self, loaded: TestClient) -> None:
        response = loaded.post(
            "/api/v1/allocations", json={"target_slot_id": "A-R99-C99", "item_ids": ["1"]}
        )
        assert response.status_code == 404
        assert response.json()["error_type"] == "unknown_slot"


class TestRemovalAndUndo:
    """Tests for removal, search and undo endpoints."""

    @pytest.fixture
    def stocked(self, loaded: TestClient) -> TestClient:
        loaded.post(
            "/api/v1/allocations",
            json={"target_slot_id": "A-R01-C01", "item_ids": ["1", "2"]},
        )
        return loaded

    def test_search(self, stocked: TestClient) -> None:
        body = stocked.get("/api/v1/rooms/room-a/search", params={"q": "sugar"}).json()
        assert body["slot_ids"] == ["A-R01-C04", "A-R01-C05"]

    def test_remove_slot(self, stocked: TestClient) -> None:
        body = stocked.delete("/api/v1/slots/A-R01-C01").json()
        assert body["message"] == "Removed item from slot A-R01-C01"
        assert stocked.delete("/api/v1/slots/A-R01-C01").json()["noop"] is True

    def test_batch_removal_across_rooms_rejected(self, stocked: TestClient) -> None:
        response = stocked.post(
            "/api/v1/removals", json={"slot_ids": ["A-R01-C01", "B-R01-C01"]}
        )
        assert response.status_code == 422
        assert response.json()["error_type"] == "invalid_request"

    def test_clear_and_undo(self, stocked: TestClient) -> None:
        cleared = stocked.post("/api/v1/rooms/room-a/clear").json()
        assert cleared["removed"] == 5

        history = stocked.get("/api/v1/history").json()
        assert [entry["description"] for entry in history] == [
            "Cleared Room A - Main Storage",
            "Allocated 5 slots",
        ]

        undo = stocked.post("/api/v1/undo").json()
        assert undo["undone"] is True
        assert undo["kind"] == "removal"
        assert stocked.get("/api/v1/rooms/room-a").json()["occupied"] == 5

    def test_undo_allocation_restores_pending(self, stocked: TestClient) -> None:
        stocked.post("/api/v1/undo")
        assert stocked.get("/api/v1/pending").json()["total_quantity"] == 5

    def test_nothing_to_undo(self, client: TestClient) -> None:
        body = client.post("/api/v1/undo").json()
        assert body == {
            "undone": False,
            "room_id": None,
            "kind": None,
            "message": "Nothing to undo",
        }

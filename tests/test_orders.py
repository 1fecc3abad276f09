"""
Tests for /orders: server-assigned createdAt and the status default.
"""
from datetime import datetime, timedelta

ORDER = {"orderNumber": "ORD-20251111-001", "customerName": "Ali Yilmaz", "totalAmount": 1299.99}


class TestCreate:
    def test_status_defaults_to_created(self, client) -> None:
        resp = client.post("/orders", json=ORDER)
        assert resp.status_code == 201
        assert resp.get_json()["status"] == "CREATED"

    def test_blank_status_defaults_to_created(self, client) -> None:
        resp = client.post("/orders", json={**ORDER, "status": "   "})
        assert resp.get_json()["status"] == "CREATED"

    def test_explicit_status_kept(self, client) -> None:
        resp = client.post("/orders", json={**ORDER, "status": "CANCELED"})
        order_id = resp.get_json()["id"]
        assert client.get(f"/orders/{order_id}").get_json()["status"] == "CANCELED"

    def test_client_created_at_discarded(self, client) -> None:
        before = datetime.now() - timedelta(seconds=1)
        resp = client.post("/orders", json={**ORDER, "createdAt": "1999-01-01T00:00:00"})
        created_at = datetime.fromisoformat(resp.get_json()["createdAt"])
        assert created_at >= before
        assert created_at.year != 1999

    def test_create_then_get(self, client) -> None:
        created = client.post("/orders", json=ORDER).get_json()
        fetched = client.get(f"/orders/{created['id']}").get_json()
        assert fetched == created
        for key, value in ORDER.items():
            assert fetched[key] == value

    def test_zero_total_allowed(self, client) -> None:
        assert client.post("/orders", json={**ORDER, "totalAmount": 0}).status_code == 201

    def test_negative_total_rejected(self, client) -> None:
        resp = client.post("/orders", json={**ORDER, "totalAmount": -1})
        assert resp.status_code == 400
        assert resp.get_json()["message"] == "totalAmount must be zero or positive"

    def test_blank_required_fields(self, client) -> None:
        resp = client.post("/orders", json={"totalAmount": 10})
        assert resp.get_json()["message"] == "orderNumber must not be blank, customerName must not be blank"


class TestUpdate:
    def test_created_at_preserved_and_status_copied(self, client) -> None:
        created = client.post("/orders", json=ORDER).get_json()
        resp = client.put(
            f"/orders/{created['id']}",
            json={**ORDER, "status": "PAID", "createdAt": "2000-01-01T00:00:00"},
        )
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["status"] == "PAID"
        assert body["createdAt"] == created["createdAt"]

    def test_status_not_defaulted_on_update(self, client) -> None:
        created = client.post("/orders", json=ORDER).get_json()
        body = client.put(f"/orders/{created['id']}", json=ORDER).get_json()
        assert body["status"] is None

    def test_missing_id(self, client) -> None:
        resp = client.put("/orders/5", json=ORDER)
        assert resp.status_code == 404
        assert resp.get_json()["message"] == "Order not found"
        assert client.get("/orders").get_json() == []


class TestDelete:
    def test_second_delete_is_404(self, client) -> None:
        created = client.post("/orders", json=ORDER).get_json()
        assert client.delete(f"/orders/{created['id']}").status_code == 204
        assert client.delete(f"/orders/{created['id']}").status_code == 404

from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from app.repos.cart_repo import CartRepo


@pytest.fixture
def seeded(client):
    user = client.post("/users/", json={"name": "Bob", "email": "bob@example.com"}).json()
    pizzeria = client.post("/vendors/", json={"name": "Pizzeria"}).json()
    sushi = client.post("/vendors/", json={"name": "Sushi Bar"}).json()

    def item(vendor, name, price):
        resp = client.post("/items/", json={"vendor_id": vendor["id"], "name": name, "price": price})
        assert resp.status_code == 201
        return resp.json()["id"]

    return {
        "user": user["id"],
        "pizzeria": pizzeria["id"],
        "sushi": sushi["id"],
        "A": item(pizzeria, "Margherita", "10.00"),
        "B": item(pizzeria, "Garlic bread", "5.00"),
        "C": item(sushi, "Salmon roll", "7.50"),
    }


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "database": "up"}


def test_create_user_is_idempotent_on_email(client):
    first = client.post("/users/", json={"name": "Bob", "email": "bob@example.com"}).json()
    second = client.post("/users/", json={"name": "Robert", "email": "bob@example.com"}).json()

    assert first["id"] == second["id"]
    assert client.get(f"/users/{first['id']}").json()["name"] == "Bob"


def test_get_missing_user(client):
    assert client.get("/users/999").status_code == 404


def test_cart_and_checkout_flow(client, seeded, notifier):
    user = seeded["user"]

    resp = client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["A"], "quantity": 2})
    assert resp.status_code == 200
    client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["B"], "quantity": 1})

    cart = client.get(f"/cart?user_id={user}").json()
    assert Decimal(cart["total_price"]) == Decimal("25.00")
    assert cart["quantity"] == 3
    assert cart["vendor_id"] == seeded["pizzeria"]

    resp = client.post(f"/cart/checkout?user_id={user}")
    assert resp.status_code == 201
    order = resp.json()
    assert Decimal(order["total_order_cost"]) == Decimal("25.00")
    assert order["status"] == "preparing"
    assert [(i["item_id"], i["quantity"], Decimal(i["price"])) for i in order["items"]] == [
        (seeded["A"], 2, Decimal("10.00")),
        (seeded["B"], 1, Decimal("5.00")),
    ]
    assert notifier.sent == [(user, order["id"])]

    cart = client.get(f"/cart?user_id={user}").json()
    assert cart["items"] == []
    assert cart["quantity"] == 0
    assert cart["vendor_id"] is None

    orders = client.get(f"/orders?user_id={user}").json()
    assert [o["id"] for o in orders] == [order["id"]]


def test_checkout_empty_cart_conflict(client, seeded):
    user = seeded["user"]
    client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["A"], "quantity": 1})
    client.delete(f"/cart?user_id={user}")

    resp = client.post(f"/cart/checkout?user_id={user}")

    assert resp.status_code == 409
    assert resp.json()["detail"] == "Cart is empty"


def test_checkout_without_cart(client, seeded):
    assert client.post(f"/cart/checkout?user_id={seeded['user']}").status_code == 404


def test_vendor_switch_over_http(client, seeded):
    user = seeded["user"]
    client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["A"], "quantity": 2})

    cart = client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["C"], "quantity": 1}).json()

    assert cart["vendor_id"] == seeded["sushi"]
    assert [i["item_id"] for i in cart["items"]] == [seeded["C"]]


def test_remove_item(client, seeded):
    user = seeded["user"]
    client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["A"], "quantity": 2})
    client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["B"], "quantity": 3})

    cart = client.delete(f"/cart/items/{seeded['A']}?user_id={user}").json()

    assert Decimal(cart["total_price"]) == Decimal("15.00")
    assert client.delete(f"/cart/items/{seeded['A']}?user_id={user}").status_code == 404


@pytest.mark.parametrize(
    "payload, status",
    [
        ({"item_id": 999, "quantity": 1}, 404),
        ({"item_id": 1, "quantity": 0}, 422),
        ({"item_id": 1}, 422),
    ],
)
def test_add_item_errors(client, seeded, payload, status):
    resp = client.post(f"/cart/items?user_id={seeded['user']}", json=payload)

    assert resp.status_code == status


def test_add_item_for_unknown_user(client, seeded):
    resp = client.post("/cart/items?user_id=999", json={"item_id": seeded["A"], "quantity": 1})

    assert resp.status_code == 404


def test_get_cart_missing(client, seeded):
    assert client.get(f"/cart?user_id={seeded['user']}").status_code == 404


def test_order_status_transitions(client, seeded):
    user = seeded["user"]
    client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["C"], "quantity": 1})
    order = client.post(f"/cart/checkout?user_id={user}").json()

    resp = client.put(f"/orders/{order['id']}/status", json={"status": "ready"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "ready"

    assert client.put(f"/orders/{order['id']}/status", json={"status": "preparing"}).status_code == 409
    assert client.put(f"/orders/{order['id']}/status", json={"status": "lost"}).status_code == 400
    assert client.put("/orders/999/status", json={"status": "ready"}).status_code == 404


def test_get_order(client, seeded):
    user = seeded["user"]
    client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["B"], "quantity": 2})
    order = client.post(f"/cart/checkout?user_id={user}").json()

    assert client.get(f"/orders/{order['id']}").json()["id"] == order["id"]
    assert client.get(f"/orders/{order['id']}?user_id={user}").status_code == 200
    assert client.get(f"/orders/{order['id']}?user_id={user + 1}").status_code == 404


def test_catalog_endpoints(client, seeded):
    items = client.get(f"/vendors/{seeded['pizzeria']}/items").json()
    assert [i["id"] for i in items] == [seeded["A"], seeded["B"]]

    resp = client.put(f"/items/{seeded['A']}", json={"price": "11.50"})
    assert resp.status_code == 200
    assert Decimal(resp.json()["price"]) == Decimal("11.50")

    assert client.get("/items/999").status_code == 404
    assert client.get("/vendors/999").status_code == 404
    assert client.post("/items/", json={"vendor_id": 999, "name": "X", "price": "1.00"}).status_code == 404


def test_checkout_storage_failure_returns_500(client, seeded, notifier, monkeypatch):
    user = seeded["user"]
    client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["A"], "quantity": 2})
    client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["B"], "quantity": 1})

    def broken_clear(self, cart_id):
        raise OperationalError("DELETE FROM cart_items", {}, Exception("disk I/O error"))

    monkeypatch.setattr(CartRepo, "clear_lines", broken_clear)

    resp = client.post(f"/cart/checkout?user_id={user}")

    assert resp.status_code == 500
    assert resp.json()["detail"] == "Internal server error"
    assert notifier.sent == []

    monkeypatch.undo()
    cart = client.get(f"/cart?user_id={user}").json()
    assert cart["quantity"] == 3
    assert Decimal(cart["total_price"]) == Decimal("25.00")
    assert client.get(f"/orders?user_id={user}").json() == []


def test_vendor_update_and_delete(client, seeded):
    resp = client.put(f"/vendors/{seeded['sushi']}", json={"name": "Sushi House"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Sushi House"

    assert client.delete(f"/vendors/{seeded['sushi']}").status_code == 409

    empty = client.post("/vendors/", json={"name": "Pop-up"}).json()
    assert client.delete(f"/vendors/{empty['id']}").status_code == 204
    assert client.get(f"/vendors/{empty['id']}").status_code == 404
    assert client.put("/vendors/999", json={"name": "X"}).status_code == 404


def test_item_delete(client, seeded):
    user = seeded["user"]
    client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["A"], "quantity": 1})

    assert client.delete(f"/items/{seeded['A']}").status_code == 409
    assert client.delete(f"/items/{seeded['C']}").status_code == 204
    assert client.get(f"/items/{seeded['C']}").status_code == 404
    assert client.delete("/items/999").status_code == 404


def test_user_update_and_delete(client, seeded):
    user = seeded["user"]

    resp = client.put(f"/users/{user}", json={"name": "Robert"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Robert"

    other = client.post("/users/", json={"name": "Carol", "email": "carol@example.com"}).json()
    assert client.put(f"/users/{other['id']}", json={"email": "bob@example.com"}).status_code == 409
    assert client.put(f"/users/{user}", json={"email": "not-an-email"}).status_code == 422

    assert client.delete(f"/users/{other['id']}").status_code == 204
    assert client.get(f"/users/{other['id']}").status_code == 404

    client.post(f"/cart/items?user_id={user}", json={"item_id": seeded["C"], "quantity": 1})
    client.post(f"/cart/checkout?user_id={user}")
    assert client.delete(f"/users/{user}").status_code == 409


def test_tables_crud(client, seeded):
    resp = client.post("/tables/", json={"name": "T1", "vendor_id": seeded["pizzeria"]})
    assert resp.status_code == 201
    table = resp.json()
    assert table["is_available"] is True
    assert table["is_needs_service"] is False
    assert table["customer_id"] is None

    client.post("/tables/", json={"name": "S1", "vendor_id": seeded["sushi"]})
    listed = client.get(f"/tables/?vendor_id={seeded['pizzeria']}").json()
    assert [t["id"] for t in listed] == [table["id"]]
    assert len(client.get("/tables/").json()) == 2

    resp = client.put(
        f"/tables/{table['id']}",
        json={"customer_id": seeded["user"], "is_available": False, "is_needs_service": True},
    )
    assert resp.status_code == 200
    assert resp.json()["customer_id"] == seeded["user"]

    resp = client.put(f"/tables/{table['id']}", json={"customer_id": None, "is_available": True})
    assert resp.json()["customer_id"] is None
    assert resp.json()["is_needs_service"] is True

    assert client.get(f"/tables/{table['id']}").json()["is_available"] is True
    assert client.delete(f"/tables/{table['id']}").status_code == 204
    assert client.get(f"/tables/{table['id']}").status_code == 404


@pytest.mark.parametrize(
    "payload, status",
    [
        ({"name": "T1", "vendor_id": 999}, 404),
        ({"name": "T1", "vendor_id": 1, "customer_id": 999}, 404),
        ({"name": "", "vendor_id": 1}, 422),
        ({"vendor_id": 1}, 422),
    ],
)
def test_create_table_errors(client, seeded, payload, status):
    assert client.post("/tables/", json=payload).status_code == status

import pytest


@pytest.fixture
def cart_line(lookups):
    def _line(*, location="tijuana", color="Black", size="M8-W10", quantity=1):
        return {
            "location_id": lookups["locations"][location],
            "model_name": "Classic",
            "color": color,
            "size": size,
            "quantity": quantity,
        }

    return _line


def test_handoff_builds_message_and_link(client, add_pairs, cart_line):
    add_pairs(quantity=2, price=450)
    add_pairs(size="C8", price=350)

    resp = client.post(
        "/api/cart/whatsapp",
        json={"lang": "es", "lines": [cart_line(quantity=2), cart_line(size="C8")]},
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["total_units"] == 3
    assert data["total_price"] == 1250.0
    assert "Cantidad: 2" in data["message"]
    assert "Total: $1,250 MXN (3 pares)" in data["message"]
    assert data["whatsapp_url"].startswith("https://wa.me/526641234567?text=Hola!%20")


def test_handoff_clamps_to_stock(client, add_pairs, cart_line):
    ids = add_pairs(quantity=2)
    client.patch("/api/admin/inventory", json={"id": ids[0], "status": "reserved"})

    resp = client.post("/api/cart/whatsapp", json={"lines": [cart_line(quantity=5)]})

    assert resp.status_code == 200
    assert resp.json()["data"]["lines"][0]["quantity"] == 1


def test_empty_cart_is_rejected(client, cart_line, lookups):
    for lines in ([], [cart_line(quantity=0)]):
        resp = client.post("/api/cart/whatsapp", json={"lines": lines})
        assert resp.status_code == 400
        assert resp.json()["error_code"] == "EMPTY_CART"


def test_unavailable_line_is_rejected(client, add_pairs, cart_line):
    add_pairs()

    resp = client.post("/api/cart/whatsapp", json={"lines": [cart_line(size="C8")]})

    assert resp.status_code == 409
    assert resp.json()["error_code"] == "ITEM_UNAVAILABLE"


def test_mixed_locations_are_rejected(client, add_pairs, cart_line):
    add_pairs(location="tijuana")
    add_pairs(location="rosarito")

    resp = client.post(
        "/api/cart/whatsapp",
        json={"lines": [cart_line(location="tijuana"), cart_line(location="rosarito")]},
    )

    assert resp.status_code == 400
    assert resp.json()["error_code"] == "MIXED_LOCATIONS"


def test_mixed_price_variant_is_charged_per_pair(client, add_pairs, cart_line):
    add_pairs(price=450)
    add_pairs(price=500)

    resp = client.post("/api/cart/whatsapp", json={"lines": [cart_line(quantity=2)]})

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["total_price"] == 950.0
    assert data["lines"][0]["subtotal"] == 950.0
    assert "1 x $450 MXN + 1 x $500 MXN = $950 MXN | Cantidad: 2" in data["message"]
    assert "Total: $950 MXN (2 pares)" in data["message"]

    resp = client.post("/api/cart/whatsapp", json={"lines": [cart_line(quantity=1)]})
    assert resp.json()["data"]["total_price"] == 450.0


def test_colon_in_color_resolves_the_right_card(client, add_pairs, cart_line):
    add_pairs(model="Classic:Black", color="Pink", size="M8-W10")
    add_pairs(model="Classic", color="Black:Pink", size="C8")

    resp = client.post(
        "/api/cart/whatsapp",
        json={"lines": [cart_line(color="Black:Pink", size="C8")]},
    )

    assert resp.status_code == 200
    line = resp.json()["data"]["lines"][0]
    assert line["model_name"] == "Classic"
    assert line["color"] == "Black:Pink"

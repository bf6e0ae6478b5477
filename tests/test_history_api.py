from storefront.services.inventory.history_service import normalize_limit


def test_normalize_limit():
    assert normalize_limit(None) == 20
    assert normalize_limit("abc") == 20
    assert normalize_limit("0") == 20
    assert normalize_limit("-4") == 20
    assert normalize_limit("5") == 5
    assert normalize_limit("100") == 30


def test_history_lists_only_non_available_pairs(admin_client, add_pairs):
    ids = add_pairs(quantity=3)
    admin_client.patch("/api/admin/inventory", json={"id": ids[2], "status": "reserved"})
    admin_client.patch("/api/admin/inventory", json={"id": ids[0], "status": "delivered"})

    data = admin_client.get("/api/admin/history").json()["data"]

    assert data["limit"] == 20
    assert [item["id"] for item in data["history"]] == [ids[0], ids[2]]
    assert {item["status"] for item in data["history"]} == {"reserved", "delivered"}
    assert data["history"][0]["status_label"] == "Entregado"


def test_history_limit_is_capped(admin_client, add_pairs):
    resp = admin_client.get("/api/admin/history", params={"limit": "500"})
    assert resp.status_code == 200
    assert resp.json()["data"]["limit"] == 30

    resp = admin_client.get("/api/admin/history", params={"limit": "nope"})
    assert resp.json()["data"]["limit"] == 20


def test_history_location_filter(admin_client, add_pairs, lookups):
    tijuana = add_pairs(location="tijuana")[0]
    rosarito = add_pairs(location="rosarito")[0]
    for item_id in (tijuana, rosarito):
        admin_client.patch("/api/admin/inventory", json={"id": item_id, "status": "cancelled"})

    def history_ids(location):
        resp = admin_client.get("/api/admin/history", params={"locationId": location})
        return [item["id"] for item in resp.json()["data"]["history"]]

    assert history_ids("rosarito") == [rosarito]
    assert history_ids(str(lookups["locations"]["tijuana"])) == [tijuana]
    assert sorted(history_ids("all")) == sorted([tijuana, rosarito])

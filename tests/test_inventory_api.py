def test_add_pairs_creates_one_row_per_pair(admin_client, add_pairs):
    ids = add_pairs(quantity=3, price=450)
    assert len(ids) == 3

    data = admin_client.get("/api/admin/inventory").json()["data"]
    assert data["total"] == 3
    assert data["counts_by_status"]["available"] == 3
    assert data["counts_by_status"]["reserved"] == 0
    assert {item["price_mxn"] for item in data["items"]} == {450.0}
    assert data["items"][0]["location"]["slug"] == "tijuana"


def test_new_model_and_color_are_created_on_the_fly(admin_client, add_pairs):
    add_pairs(model="Echo Clog", color="Arctic")

    models = admin_client.get("/api/admin/models").json()["data"]["models"]
    colors = admin_client.get("/api/admin/colors").json()["data"]["colors"]
    assert "Echo Clog" in [m["name"] for m in models]
    assert "Arctic" in [c["name_en"] for c in colors]


def test_add_rejects_unknown_size_and_location(admin_client, lookups):
    payload = {
        "model_name": "Classic",
        "color": "Black",
        "size_id": 9999,
        "price_mxn": 450,
        "quantity": 1,
        "location_id": lookups["locations"]["tijuana"],
    }
    resp = admin_client.post("/api/admin/inventory", json=payload)
    assert resp.status_code == 400
    assert resp.json()["error_code"] == "INVALID_SIZE"

    payload["size_id"] = lookups["sizes"]["C8"]
    payload["location_id"] = 9999
    resp = admin_client.post("/api/admin/inventory", json=payload)
    assert resp.status_code == 400
    assert resp.json()["error_code"] == "INVALID_LOCATION"


def test_add_validates_price_quantity_and_blank_text(admin_client, lookups):
    base = {
        "model_name": "Classic",
        "color": "Black",
        "size_id": lookups["sizes"]["C8"],
        "price_mxn": 450,
        "quantity": 1,
        "location_id": lookups["locations"]["tijuana"],
    }
    for override in ({"price_mxn": 0}, {"quantity": 0}, {"quantity": 101}, {"model_name": "   "}):
        resp = admin_client.post("/api/admin/inventory", json={**base, **override})
        assert resp.status_code == 422, override
        assert resp.json()["error_code"] == "VALIDATION_ERROR"


def test_reserve_pair_with_customer(admin_client, add_pairs):
    item_id = add_pairs()[0]

    resp = admin_client.patch(
        "/api/admin/inventory",
        json={
            "id": item_id,
            "status": "reserved",
            "customer_name": "Ana",
            "customer_whatsapp": "6641112233",
            "price_mxn": 1,
        },
    )

    assert resp.status_code == 200
    item = resp.json()["data"]
    assert item["status"] == "reserved"
    assert item["customer_name"] == "Ana"
    # price is not editable
    assert item["price_mxn"] == 450.0


def test_list_filters(admin_client, add_pairs):
    black = add_pairs(color="Black", size="C8", quantity=2)
    add_pairs(color="Pink", size="J2", location="rosarito")
    admin_client.patch(
        "/api/admin/inventory",
        json={"id": black[0], "status": "reserved", "customer_name": "Luis Pérez"},
    )

    def total(**params):
        return admin_client.get("/api/admin/inventory", params=params).json()["data"]["total"]

    assert total() == 3
    assert total(status="reserved") == 1
    assert total(color="pink") == 1
    assert total(q="luis") == 1

    data = admin_client.get("/api/admin/inventory", params={"page_size": 2, "page": 9}).json()["data"]
    assert data["total_pages"] == 2
    assert data["page"] == 2
    assert len(data["items"]) == 1


def test_update_errors(admin_client, add_pairs):
    item_id = add_pairs()[0]

    resp = admin_client.patch("/api/admin/inventory", json={"id": item_id, "unknown": 1})
    assert resp.status_code == 400
    assert resp.json()["error_code"] == "NO_FIELDS"

    resp = admin_client.patch("/api/admin/inventory", json={"id": 9999, "notes": "x"})
    assert resp.status_code == 404
    assert resp.json()["error_code"] == "ITEM_NOT_FOUND"

    resp = admin_client.patch("/api/admin/inventory", json={"id": item_id, "status": None})
    assert resp.status_code == 400

    resp = admin_client.patch("/api/admin/inventory", json={"id": item_id, "location_id": 9999})
    assert resp.status_code == 400
    assert resp.json()["error_code"] == "INVALID_LOCATION"

    resp = admin_client.patch("/api/admin/inventory", json={"id": item_id, "status": "lost"})
    assert resp.status_code == 422


def test_move_pair_to_other_location(admin_client, add_pairs, lookups):
    item_id = add_pairs()[0]

    resp = admin_client.patch(
        "/api/admin/inventory",
        json={"id": item_id, "location_id": lookups["locations"]["rosarito"]},
    )

    assert resp.status_code == 200
    assert resp.json()["data"]["location"]["slug"] == "rosarito"


def test_sold_pairs_leave_public_inventory(admin_client, add_pairs):
    ids = add_pairs(quantity=2)
    admin_client.patch("/api/admin/inventory", json={"id": ids[0], "status": "paid_complete"})

    items = admin_client.get("/api/inventory").json()["data"]["items"]
    assert [item["id"] for item in items] == [ids[1]]


def test_status_labels_follow_lang(admin_client, add_pairs):
    add_pairs()

    es = admin_client.get("/api/admin/inventory").json()["data"]["items"][0]
    en = admin_client.get("/api/admin/inventory", params={"lang": "en"}).json()["data"]["items"][0]

    assert es["status_label"] == "Disponible"
    assert en["status_label"] == "Available"

def test_admin_actions_are_logged(admin_client, add_pairs):
    item_id = add_pairs(quantity=2)[0]
    admin_client.patch("/api/admin/inventory", json={"id": item_id, "status": "reserved"})

    data = admin_client.get("/api/admin/activity").json()["data"]

    assert data["total"] == 3
    codes = [row["code"] for row in data["items"]]
    assert codes == ["UPDATE_INVENTORY", "CREATE_INVENTORY", "LOGIN"]

    messages = [row["message"] for row in data["items"]]
    assert messages[0] == f"Updated item #{item_id}: status: available → reserved"
    assert messages[1] == "Added 2 x Classic / Black / M8-W10 at Tijuana ($450 MXN each)"


def test_unchanged_update_is_not_logged(admin_client, add_pairs):
    item_id = add_pairs()[0]
    admin_client.patch("/api/admin/inventory", json={"id": item_id, "notes": "talla chica"})
    admin_client.patch("/api/admin/inventory", json={"id": item_id, "notes": "talla chica"})

    resp = admin_client.get("/api/admin/activity", params={"code": "update_inventory"})
    assert resp.json()["data"]["total"] == 1


def test_activity_sort_order_validation(admin_client):
    resp = admin_client.get("/api/admin/activity", params={"sort_order": "sideways"})
    assert resp.status_code == 400

def test_lookup_lists(admin_client, lookups):
    locations = admin_client.get("/api/admin/locations").json()["data"]["locations"]
    assert [loc["slug"] for loc in locations] == ["rosarito", "tijuana"]

    sizes = admin_client.get("/api/admin/sizes").json()["data"]["sizes"]
    assert [size["label"] for size in sizes] == ["C8", "J2", "M8-W10", "M10-W12"]

    colors = admin_client.get("/api/admin/colors").json()["data"]["colors"]
    assert [color["name_en"] for color in colors] == ["Black", "Pink"]

    models = admin_client.get("/api/admin/models").json()["data"]["models"]
    assert [model["name"] for model in models] == ["Classic"]

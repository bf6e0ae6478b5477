def test_submit_feedback(client):
    resp = client.post(
        "/api/feedback",
        json={"message": "  Me encantó la página  ", "lang": "en", "context": "catalog"},
        headers={"User-Agent": "pytest-browser"},
    )

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["message"] == "Me encantó la página"
    assert data["lang"] == "en"
    assert data["context"] == "catalog"
    assert data["user_agent"] == "pytest-browser"


def test_unknown_language_falls_back_to_spanish(client):
    resp = client.post("/api/feedback", json={"message": "hola", "lang": "fr"})
    assert resp.json()["data"]["lang"] == "es"


def test_invalid_messages_are_rejected(client):
    for payload in ({}, {"message": ""}, {"message": "   "}, {"message": 42}):
        resp = client.post("/api/feedback", json=payload)
        assert resp.status_code == 400, payload
        assert resp.json()["error_code"] == "INVALID_MESSAGE"


def test_admin_feedback_newest_first(admin_client):
    admin_client.post("/api/feedback", json={"message": "first"})
    admin_client.post("/api/feedback", json={"message": "second"})

    rows = admin_client.get("/api/admin/feedback").json()["data"]["feedback"]
    assert [row["message"] for row in rows] == ["second", "first"]

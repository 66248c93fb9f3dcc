from __future__ import annotations

EMPTY = {"consolation": [], "third": [], "second": [], "first": [], "special": []}


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.get_json()["data"]
    assert data["status"] == "ok"
    assert data["consolation_max"] == 15
    assert data["show_toasts"] is True


def test_get_results_creates_default_document(client, app):
    resp = client.get("/api/results")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"] == EMPTY
    assert app.extensions["results_repository"].path.exists()


def test_post_results_overwrites_storage(client):
    document = {**EMPTY, "consolation": ["528", "anything"], "note": "kept"}

    resp = client.post("/api/results", json=document)
    assert resp.status_code == 200
    assert resp.get_json()["data"] == {"ok": True}

    assert client.get("/api/results").get_json()["data"] == document


def test_post_results_requires_json_object(client):
    resp = client.post("/api/results", data="[1, 2]", content_type="application/json")

    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "validation_error"


def test_add_entry_accepts_valid_number(client):
    resp = client.post("/api/results/consolation/entries", json={"value": "528"})

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["data"]["consolation"] == ["528"]
    assert body["message"] == "Đã lưu 528 cho Giải khuyến khích."


def test_add_entry_accepts_integer_value(client):
    resp = client.post("/api/results/consolation/entries", json={"value": 528})
    assert resp.status_code == 201


def test_add_entry_rejects_with_user_message(client):
    client.post("/api/results/consolation/entries", json={"value": "528"})

    resp = client.post("/api/results/third/entries", json={"value": "1528"})

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert body["message"] == "Vui lòng nhập đúng thứ tự các nhóm giải."
    assert body["error"]["code"] == "validation_error"
    assert body["error"]["details"] == {"tier": "third"}


def test_add_entry_suffix_conflict(client):
    consolation = ["528", *[f"{100 + i}" for i in range(14)]]
    client.post("/api/results", json={**EMPTY, "consolation": consolation})

    resp = client.post("/api/results/third/entries", json={"value": "1528"})

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "3 số cuối (528) trùng với Giải khuyến khích."


def test_add_entry_unknown_tier(client):
    resp = client.post("/api/results/jackpot/entries", json={"value": "528"})
    assert resp.status_code == 400


def test_add_entry_missing_value(client):
    resp = client.post("/api/results/consolation/entries", json={})

    assert resp.status_code == 400
    assert "value" in resp.get_json()["error"]["details"]


def test_unknown_route_returns_envelope(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json()["error"]["code"] == "not_found"


def test_add_entry_with_corrupt_document_returns_envelope(app, client):
    path = app.extensions["results_repository"].path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("{not json", encoding="utf-8")

    resp = client.post("/api/results/consolation/entries", json={"value": "528"})

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["error"]["code"] == "storage_error"
    assert body["message"] == "Không thể tải dữ liệu đã lưu."


def test_wrong_method_returns_envelope(client):
    resp = client.delete("/api/results")

    assert resp.status_code == 405
    assert resp.get_json()["error"]["code"] == "method_not_allowed"

import os

from tests.conftest import screenshot_form, seed_user


def _upload(client, **kwargs):
    return client.post("/api/upload", data=screenshot_form(**kwargs), content_type="multipart/form-data")


def test_upload_endpoint(client, app):
    resp = _upload(client, username="alice")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "Uploaded and rewarded"
    assert body["username"] == "alice"
    assert body["screenshots"] == 1
    assert body["balance"] == 0.5
    assert os.listdir(app.config["UPLOAD_FOLDER"]) == []


def test_upload_without_file(client):
    resp = client.post("/api/upload", data={"username": "alice"}, content_type="multipart/form-data")

    assert resp.status_code == 400
    assert resp.get_json()["error"]["message"] == "no file"


def test_upload_cap_returns_400_and_discards_file(client, app):
    for _ in range(3):
        assert _upload(client, username="alice").status_code == 200

    resp = _upload(client, username="alice")

    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "CAPACITY_EXCEEDED"
    assert os.listdir(app.config["UPLOAD_FOLDER"]) == []


def test_balance_endpoint_defaults_to_guest(client):
    resp = client.get("/api/balance")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["username"] == "guest"
    assert body["screenshots"] == 0
    assert body["balance"] == 0.0
    assert body["withdraws"] == []


def test_balance_endpoint_lists_withdraws(client):
    seed_user("alice", screenshots=3, balance="55.00")
    client.post("/api/withdraw", json={"username": "alice"})

    body = client.get("/api/balance", query_string={"username": "alice"}).get_json()

    assert body["balance"] == 0.0
    assert len(body["withdraws"]) == 1
    w = body["withdraws"][0]
    assert w["amount"] == 55.0
    assert w["status"] == "pending"
    assert "requestedAt" in w
    assert "processedAt" not in w


def test_withdraw_endpoint(client):
    seed_user("alice", balance="50.00")

    resp = client.post("/api/withdraw", json={"username": "alice"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "Withdraw requested. Admin will process within 72 hours."
    assert body["withdraw"]["amount"] == 50.0
    assert body["withdraw"]["status"] == "pending"
    assert body["withdraw"]["id"].startswith("wd_")


def test_withdraw_endpoint_errors(client):
    assert client.post("/api/withdraw", json={}).status_code == 400
    assert client.post("/api/withdraw", data="not json").status_code == 400

    resp = client.post("/api/withdraw", json={"username": "poor"})
    assert resp.status_code == 400
    assert resp.get_json()["error"]["code"] == "INSUFFICIENT_BALANCE"


def test_unknown_route_uses_error_format(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.get_json()["error"]["code"] == "NOT_FOUND"

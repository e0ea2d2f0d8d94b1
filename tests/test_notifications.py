import json
import os
from decimal import Decimal

import pytest
import responses

from screenpay.extensions import notifier
from screenpay.services.notification_service import fmt_amount
from screenpay.models import Withdrawal

from tests.conftest import screenshot_form, seed_user

BASE = "https://telegram.test/bot123:abc"


@pytest.fixture(autouse=True)
def reset_responses():
    responses.reset()
    yield
    responses.reset()


@responses.activate
def test_send_message_posts_to_channel(telegram_app):
    responses.add(responses.POST, f"{BASE}/sendMessage", json={"ok": True})

    assert notifier.send_message("hello") is True

    assert len(responses.calls) == 1
    assert json.loads(responses.calls[0].request.body) == {"chat_id": "@rewards", "text": "hello"}


@responses.activate
def test_send_message_failure_is_absorbed(telegram_app):
    responses.add(responses.POST, f"{BASE}/sendMessage", json={"ok": False}, status=502)

    assert notifier.send_message("hello") is False


@responses.activate
def test_send_message_network_error_is_absorbed(telegram_app):
    # nothing registered: responses raises ConnectionError
    assert notifier.send_message("hello") is False


@responses.activate
def test_disabled_without_credentials(app, make_upload):
    assert notifier.enabled is False
    assert notifier.send_message("hello") is False
    assert notifier.send_photo("caption", make_upload()) is False
    assert notifier.dispatch_message("hello") is None
    assert len(responses.calls) == 0


@responses.activate
def test_send_photo_uploads_file(telegram_app, make_upload):
    responses.add(responses.POST, f"{BASE}/sendPhoto", json={"ok": True})

    assert notifier.send_photo("caption here", make_upload(b"PNGDATA")) is True

    body = responses.calls[0].request.body
    assert b"PNGDATA" in body
    assert b"caption here" in body
    assert b"@rewards" in body


@responses.activate
def test_upload_sends_photo_and_cleans_up_even_on_failure(telegram_app):
    responses.add(responses.POST, f"{BASE}/sendPhoto", json={"ok": False}, status=500)
    client = telegram_app.test_client()

    resp = client.post("/api/upload", data=screenshot_form(username="alice"),
                       content_type="multipart/form-data")

    assert resp.status_code == 200
    assert resp.get_json()["balance"] == 0.5
    assert len(responses.calls) == 1
    assert b"Screenshots: 1" in responses.calls[0].request.body
    assert b"Balance: 0.5 Taka" in responses.calls[0].request.body
    assert os.listdir(telegram_app.config["UPLOAD_FOLDER"]) == []


@responses.activate
def test_withdraw_announces_request(telegram_app):
    responses.add(responses.POST, f"{BASE}/sendMessage", json={"ok": True})
    seed_user("alice", balance="50.00")
    client = telegram_app.test_client()

    withdraw = client.post("/api/withdraw", json={"username": "alice"}).get_json()["withdraw"]

    text = json.loads(responses.calls[0].request.body)["text"]
    assert "Withdraw requested" in text
    assert "Amount: 50 Taka" in text
    assert withdraw["id"] in text


@responses.activate
def test_sweep_announces_each_change(telegram_app):
    from datetime import timedelta

    from screenpay.services.sweeper_service import sweep_stale_withdrawals
    from screenpay.utils.timestamps import to_iso, utc_now

    responses.add(responses.POST, f"{BASE}/sendMessage", json={"ok": True})
    old = to_iso(utc_now() - timedelta(hours=100))
    seed_user("alice", withdraws=[
        Withdrawal(id="w1", amount="50", requested_at=old),
        Withdrawal(id="w2", amount="60", requested_at=old),
    ])

    sweep_stale_withdrawals()

    texts = [json.loads(c.request.body)["text"] for c in responses.calls]
    assert len(texts) == 2
    assert all("auto_completed" in t for t in texts)


def test_dispatch_message_runs_in_background(telegram_app, monkeypatch):
    sent = []
    monkeypatch.setattr(notifier, "run_async", True)
    monkeypatch.setattr(notifier, "send_message", lambda text: sent.append(text) or True)

    future = notifier.dispatch_message("later")
    assert future.result(timeout=5) is True
    assert sent == ["later"]
    notifier.shutdown()


@pytest.mark.parametrize("amount, expected", [
    (Decimal("0.50"), "0.5"),
    (Decimal("50.00"), "50"),
    (Decimal("42.25"), "42.25"),
    (Decimal("0.00"), "0"),
    (Decimal("100.00"), "100"),
])
def test_fmt_amount_drops_trailing_zeros(amount, expected):
    assert fmt_amount(amount) == expected

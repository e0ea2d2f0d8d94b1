import io

import pytest

from screenpay.extensions import store
from screenpay.main import create_app


@pytest.fixture
def app(tmp_path):
    app = create_app("testing", overrides={
        "DB_FILE": str(tmp_path / "db.json"),
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
    })
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def telegram_app(tmp_path):
    app = create_app("testing", overrides={
        "DB_FILE": str(tmp_path / "db.json"),
        "UPLOAD_FOLDER": str(tmp_path / "uploads"),
        "BOT_TOKEN": "123:abc",
        "CHANNEL_ID": "@rewards",
        "TELEGRAM_API_URL": "https://telegram.test",
    })
    with app.app_context():
        yield app


@pytest.fixture
def make_upload(tmp_path):
    counter = {"n": 0}

    def _make(content=b"\x89PNG fake"):
        counter["n"] += 1
        path = tmp_path / f"shot_{counter['n']}.png"
        path.write_bytes(content)
        return str(path)

    return _make


def screenshot_form(username="alice", content=b"\x89PNG fake", filename="shot.png"):
    data = {"screenshot": (io.BytesIO(content), filename)}
    if username is not None:
        data["username"] = username
    return data


def seed_user(username, screenshots=0, balance="0.00", withdraws=None):
    from screenpay.models import UserRecord

    with store.transaction() as document:
        document.users[username] = UserRecord(
            screenshots=screenshots,
            balance=balance,
            withdraws=withdraws or [],
        )
        store.save(document)
    return document.users[username]

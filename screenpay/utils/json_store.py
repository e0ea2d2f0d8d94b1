import json
import os
import tempfile
import threading
from contextlib import contextmanager

from marshmallow import ValidationError

from screenpay.models.user_record import Document


class JsonStore:
    """Whole-document JSON persistence for the user map.

    Every operation reads the full file and writes it back in full. Writers
    inside one process are serialised through ``transaction()``.
    """

    def __init__(self, app=None):
        self.path = None
        self.logger = None
        self._lock = threading.RLock()
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.path = app.config["DB_FILE"]
        self.logger = app.logger
        app.extensions["json_store"] = self

    @staticmethod
    def _schemas():
        from screenpay.schemas.user_schema import DocumentSchema, UserRecordSchema
        return DocumentSchema(), UserRecordSchema()

    def load(self) -> Document:
        """Read the document, keeping every user record that validates.

        A record that fails validation is logged and kept aside in
        ``Document.unreadable`` so the next save writes it back as it was.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as fh:
                raw = json.load(fh)
        except FileNotFoundError:
            return Document()
        except (OSError, ValueError) as e:
            self.logger.warning("Could not read %s, starting from an empty document: %s", self.path, e)
            return Document()

        users = raw.get("users") if isinstance(raw, dict) else None
        if not isinstance(users, dict):
            self.logger.warning("No user map in %s, starting from an empty document", self.path)
            return Document()

        _, user_schema = self._schemas()
        document = Document()
        for username, record in users.items():
            try:
                document.users[username] = user_schema.load(record)
            except ValidationError as e:
                self.logger.warning("Skipping unreadable record for %r in %s: %s", username, self.path, e.messages)
                document.unreadable[username] = record
        return document

    def save(self, document: Document):
        document_schema, _ = self._schemas()
        users = dict(document.unreadable)
        users.update(document_schema.dump(document)["users"])
        payload = {"users": users}
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(prefix=".db-", suffix=".json", dir=directory)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(payload, fh, indent=2, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise

    def ensure_exists(self):
        if not os.path.exists(self.path):
            self.save(Document())
            return True
        return False

    @contextmanager
    def transaction(self):
        """Hold the store lock across one load and at most one save."""
        with self._lock:
            yield self.load()

import os
import uuid

from flask import current_app
from werkzeug.utils import secure_filename


def save_uploaded_file(file, upload_dir=None):
    """Store an uploaded screenshot under a unique name and return its path."""
    upload_dir = upload_dir or current_app.config["UPLOAD_FOLDER"]
    os.makedirs(upload_dir, exist_ok=True)
    filename = secure_filename(file.filename or "") or "screenshot"
    unique_name = f"{uuid.uuid4().hex}_{filename}"
    file_path = os.path.join(upload_dir, unique_name)
    file.save(file_path)
    return file_path


def discard_file(file_path):
    try:
        os.remove(file_path)
    except FileNotFoundError:
        pass
    except OSError as e:
        current_app.logger.warning("Could not remove upload %s: %s", file_path, e)

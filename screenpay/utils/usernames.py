from flask import current_app


def normalize_username(raw, default=None):
    """Stringify and truncate a username; fall back to ``default`` when empty."""
    limit = current_app.config["USERNAME_MAX_LENGTH"]
    username = "" if raw is None else str(raw)
    username = username[:limit]
    if not username and default is not None:
        return default[:limit]
    return username

import hmac

from flask import current_app

from screenpay.extensions import store, notifier
from screenpay.services.notification_service import withdraw_updated_text
from screenpay.utils.exceptions import Forbidden, InvalidInput, NotFound
from screenpay.utils.usernames import normalize_username


def check_admin_secret(provided):
    expected = current_app.config["ADMIN_SECRET"] or ""
    provided = provided or ""
    if not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        raise Forbidden()


def update_withdrawal_status(secret, username, withdraw_id, status):
    """Set an arbitrary status on one withdrawal.

    ``status`` is stored as given; there is no fixed set of allowed values.
    """
    check_admin_secret(secret)

    if not username or not withdraw_id or not status:
        raise InvalidInput("missing", details={"required": ["username", "withdrawId", "status"]})

    username = normalize_username(username)
    status = str(status)

    with store.transaction() as document:
        user = document.get_user(username)
        if user is None:
            raise NotFound("user not found")

        withdrawal = user.find_withdrawal(withdraw_id)
        if withdrawal is None:
            raise NotFound("withdraw not found")

        withdrawal.mark(status)
        store.save(document)

    current_app.logger.info("Withdrawal %s for %s set to %s", withdrawal.id, username, status)
    notifier.dispatch_message(withdraw_updated_text(username, withdrawal))
    return withdrawal

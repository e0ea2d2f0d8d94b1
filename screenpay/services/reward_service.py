from flask import current_app

from screenpay.extensions import store, notifier
from screenpay.models.user_record import UserRecord
from screenpay.models.withdrawal import Withdrawal
from screenpay.services.notification_service import upload_caption, withdraw_requested_text
from screenpay.services.upload_service import discard_file
from screenpay.utils.exceptions import CapacityExceeded, InsufficientBalance, InvalidInput
from screenpay.utils.money import add_money, to_money
from screenpay.utils.usernames import normalize_username


def get_balance(username):
    username = normalize_username(username, default=current_app.config["DEFAULT_USERNAME"])
    user = store.load().get_user(username) or UserRecord()
    return username, user


def record_upload(username, file_path):
    """Credit one screenshot to ``username`` and announce it.

    The file at ``file_path`` is removed before returning, whether the
    upload was accepted or not.
    """
    cfg = current_app.config
    username = normalize_username(username, default=cfg["DEFAULT_USERNAME"])

    try:
        with store.transaction() as document:
            user = document.get_or_create_user(username)
            if user.screenshots >= cfg["MAX_SCREENSHOTS"]:
                raise CapacityExceeded(
                    "max screenshots reached",
                    details={"max_screenshots": cfg["MAX_SCREENSHOTS"]},
                )

            user.screenshots += 1
            user.balance = add_money(user.balance, cfg["REWARD"])
            store.save(document)

        current_app.logger.info(
            "Upload accepted for %s (%s screenshots, balance %s)",
            username, user.screenshots, user.balance,
        )
        notifier.send_photo(upload_caption(username, user), file_path)
    finally:
        discard_file(file_path)

    return username, user


def request_withdrawal(username):
    cfg = current_app.config
    username = normalize_username(username)
    if not username:
        raise InvalidInput("username required")

    minimum = to_money(cfg["WITHDRAW_MIN"])

    with store.transaction() as document:
        user = document.get_or_create_user(username)
        if user.balance < minimum:
            raise InsufficientBalance(
                f"minimum {minimum} Taka required",
                details={"balance": float(user.balance), "minimum": float(minimum)},
            )

        withdrawal = Withdrawal.create(user.balance)
        user.withdraws.append(withdrawal)
        user.balance = to_money(0)
        store.save(document)

    current_app.logger.info("Withdrawal %s requested by %s for %s", withdrawal.id, username, withdrawal.amount)
    notifier.dispatch_message(withdraw_requested_text(username, withdrawal))
    return username, withdrawal

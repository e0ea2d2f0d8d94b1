from concurrent.futures import ThreadPoolExecutor

import requests


class TelegramNotifier:
    """Best-effort announcements to a Telegram channel.

    Failures are logged and dropped. Nothing is retried.
    """

    def __init__(self, app=None):
        self.bot_token = ""
        self.channel_id = ""
        self.api_url = "https://api.telegram.org"
        self.timeout = 10
        self.run_async = True
        self.logger = None
        self._executor = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        self.bot_token = app.config.get("BOT_TOKEN") or ""
        self.channel_id = app.config.get("CHANNEL_ID") or ""
        self.api_url = app.config.get("TELEGRAM_API_URL", self.api_url).rstrip("/")
        self.timeout = app.config.get("HTTP_TIMEOUT_SEC", self.timeout)
        self.run_async = app.config.get("NOTIFY_ASYNC", True)
        self.logger = app.logger
        if not self.enabled:
            app.logger.info("BOT_TOKEN or CHANNEL_ID not set, Telegram notifications disabled")

    @property
    def enabled(self):
        return bool(self.bot_token and self.channel_id)

    def _endpoint(self, method):
        return f"{self.api_url}/bot{self.bot_token}/{method}"

    def send_message(self, text):
        if not self.enabled:
            return False
        try:
            resp = requests.post(
                self._endpoint("sendMessage"),
                json={"chat_id": self.channel_id, "text": text},
                timeout=self.timeout,
            )
            resp.raise_for_status()
            return True
        except requests.RequestException as e:
            self.logger.error("Telegram sendMessage failed: %s", e)
            return False

    def send_photo(self, caption, file_path):
        if not self.enabled:
            return False
        try:
            with open(file_path, "rb") as photo:
                resp = requests.post(
                    self._endpoint("sendPhoto"),
                    data={"chat_id": self.channel_id, "caption": caption},
                    files={"photo": photo},
                    timeout=self.timeout,
                )
            resp.raise_for_status()
            return True
        except (requests.RequestException, OSError) as e:
            self.logger.error("Telegram sendPhoto failed: %s", e)
            return False

    def dispatch_message(self, text):
        """Send without waiting for the result."""
        if not self.enabled:
            return None
        if not self.run_async:
            self.send_message(text)
            return None
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=4, thread_name_prefix="telegram")
        return self._executor.submit(self.send_message, text)

    def shutdown(self):
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None


# ----------------------------------------------------------
# Message texts
# ----------------------------------------------------------

def fmt_amount(amount):
    """2 dp without trailing zeros: 0.5, 50, 42.25."""
    return f"{amount:.2f}".rstrip("0").rstrip(".")


def upload_caption(username, user):
    return (
        "📸 New screenshot\n"
        f"User: {username}\n"
        f"Screenshots: {user.screenshots}\n"
        f"Balance: {fmt_amount(user.balance)} Taka"
    )


def withdraw_requested_text(username, withdrawal):
    return (
        "💳 Withdraw requested\n"
        f"User: {username}\n"
        f"Amount: {fmt_amount(withdrawal.amount)} Taka\n"
        f"ID: {withdrawal.id}\n"
        f"Status: {withdrawal.status}"
    )


def withdraw_updated_text(username, withdrawal):
    return f"🔔 Withdraw {withdrawal.id} for {username} updated to: {withdrawal.status}"


def withdraw_auto_completed_text(username, withdrawal):
    return (
        f"✅ Withdraw ID {withdrawal.id} for {username} marked auto_completed by worker. "
        "Please process actual payout manually."
    )

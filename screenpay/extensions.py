from flask_marshmallow import Marshmallow
from flask_cors import CORS
from apscheduler.schedulers.background import BackgroundScheduler

ma = Marshmallow()
cors = CORS()

from screenpay.utils.json_store import JsonStore  # noqa: E402
from screenpay.services.notification_service import TelegramNotifier  # noqa: E402

store = JsonStore()
notifier = TelegramNotifier()
scheduler = BackgroundScheduler(daemon=True, timezone="UTC")

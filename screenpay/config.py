import os
from dotenv import load_dotenv

load_dotenv()

INSECURE_ADMIN_SECRET = "change_this"


class Config:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    PORT = int(os.getenv("PORT", 3000))

    BOT_TOKEN = os.getenv("BOT_TOKEN", "")
    CHANNEL_ID = os.getenv("CHANNEL_ID", "")  # @channelname or numeric id
    ADMIN_SECRET = os.getenv("ADMIN_SECRET", INSECURE_ADMIN_SECRET)

    TELEGRAM_API_URL = os.getenv("TELEGRAM_API_URL", "https://api.telegram.org")
    HTTP_TIMEOUT_SEC = float(os.getenv("HTTP_TIMEOUT_SEC", 10))
    NOTIFY_ASYNC = os.getenv("NOTIFY_ASYNC", "1") == "1"

    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")

    basedir = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

    DB_FILE = os.getenv("DB_FILE", os.path.join(basedir, "db.json"))
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(basedir, "uploads"))
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024

    REWARD = 0.5
    MAX_SCREENSHOTS = 3
    WITHDRAW_MIN = 50.0
    USERNAME_MAX_LENGTH = 64
    DEFAULT_USERNAME = "guest"

    SWEEPER_ENABLED = os.getenv("SWEEPER_ENABLED", "1") == "1"
    SWEEP_INTERVAL_HOURS = 1
    STALE_AFTER_HOURS = 72


class DevelopmentConfig(Config):
    DEBUG = True


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    BOT_TOKEN = ""
    CHANNEL_ID = ""
    ADMIN_SECRET = "test-secret"
    NOTIFY_ASYNC = False
    SWEEPER_ENABLED = False

import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SETTINGS_BACKEND = os.getenv("SETTINGS_BACKEND", "mysql")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "salon_db"),
}

DEFAULT_TIMEZONE = os.getenv("DEFAULT_TIMEZONE") or None

SLOT_INTERVAL_MINUTES = int(os.getenv("SLOT_INTERVAL_MINUTES", "60"))

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_SETTINGS = bool(int(os.getenv("AUTO_SEED_SETTINGS", "0")))

import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# 'memory' keeps settings in-process; 'mysql' stores them in app_settings
SETTINGS_BACKEND = os.getenv("SETTINGS_BACKEND", "memory")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "salon_db"),
}

# Overrides the host zone at the end of the business-timezone chain
DEFAULT_TIMEZONE = os.getenv("DEFAULT_TIMEZONE") or None

SLOT_INTERVAL_MINUTES = int(os.getenv("SLOT_INTERVAL_MINUTES", "60"))

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Write default hours and pay-period anchor when none are stored
AUTO_SEED_SETTINGS = bool(int(os.getenv("AUTO_SEED_SETTINGS", "1")))

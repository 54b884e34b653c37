from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.salon_calendar.salon_calendar.database.bootstrap import seed_default_settings
from src.salon_calendar.salon_calendar.database.connection import DatabaseConnection, DBConfig
from src.salon_calendar.salon_calendar.settings.mysql_settings_store import MySQLSettingsStore


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    config = DBConfig.from_dict(dict(settings.DB_CONFIG))
    store = MySQLSettingsStore(DatabaseConnection.get_instance(config))

    seed_default_settings(store)
    print(f"OK: Seeded default settings -> {config.user}@{config.host}:{config.port}/{config.database}")


if __name__ == "__main__":
    main()

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable

from ..core.constants import BUSINESS_INFO_KEY, PAYROLL_SETTINGS_KEY
from ..core.logging import get_logger
from ..hours.model import DEFAULT_HOURS_OF_OPERATION
from ..payroll.model import DEFAULT_PAY_PERIOD_SETTINGS
from ..settings.store import SettingsStore
from .connection import DatabaseConnection
from .mysql_base import db_cursor, fetchall

logger = get_logger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[4] / "database" / "schema.sql"


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql usable regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Schema files hold DDL only; no ';' inside literals.
    for stmt in sql.split(";"):
        stmt = stmt.strip()
        if stmt:
            yield stmt


def ensure_database_exists(conn_factory: DatabaseConnection, database: str) -> None:
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci")
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
    logger.info("schema_applied", path=str(schema_path))


def seed_default_settings(store: SettingsStore) -> None:
    """Write the default hours table and bi-weekly anchor where nothing is stored yet."""

    def _with_hours(current):
        doc = dict(current) if isinstance(current, dict) else {}
        doc.setdefault("hoursOfOperation", [row.to_dict() for row in DEFAULT_HOURS_OF_OPERATION])
        return doc

    def _with_pay_period(current):
        doc = dict(current) if isinstance(current, dict) else {}
        doc.setdefault("payPeriod", DEFAULT_PAY_PERIOD_SETTINGS.to_dict())
        return doc

    store.set(BUSINESS_INFO_KEY, _with_hours)
    store.set(PAYROLL_SETTINGS_KEY, _with_pay_period)


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in fetchall(cur)]

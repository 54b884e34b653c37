from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Union

from mysql.connector import Error as MySQLError

from ..core.exceptions import SettingsError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .store import SettingsStore, UpdateFn, decode_snapshot, encode_snapshot, resolve_update


class MySQLSettingsStore(SettingsStore):
    """Settings snapshots in the ``app_settings`` table (one JSON document per key)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @contextmanager
    def _cursor(self, key: str):
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                yield cur
        except MySQLError as e:
            raise SettingsError(f"settings '{key}' unavailable: {e}") from e

    def get(self, key: str, default: Any = None) -> Any:
        with self._cursor(key) as cur:
            cur.execute(
                """
                SELECT setting_value
                FROM app_settings
                WHERE setting_key=%s
                """,
                (key,),
            )
            r = fetchone(cur)
        return decode_snapshot(key, r["setting_value"] if r else None, default)

    def set(self, key: str, value: Union[Any, UpdateFn]) -> None:
        with self._cursor(key) as cur:
            current = None
            if callable(value):
                cur.execute("SELECT setting_value FROM app_settings WHERE setting_key=%s", (key,))
                r = fetchone(cur)
                current = decode_snapshot(key, r["setting_value"] if r else None, None)

            cur.execute(
                """
                INSERT INTO app_settings(setting_key, setting_value)
                VALUES(%s,%s)
                ON DUPLICATE KEY UPDATE setting_value=VALUES(setting_value)
                """,
                (key, encode_snapshot(resolve_update(value, current))),
            )

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Optional

from .clock.provider import SettingsTimezoneProvider, host_timezone_name
from .clock.service import BusinessClock
from .core.constants import DEFAULT_SLOT_INTERVAL_MINUTES
from .core.enums import SettingsBackend
from .database.connection import DatabaseConnection, DBConfig
from .hours.service import BusinessHoursService
from .payroll.service import PayrollService
from .settings.mysql_settings_store import MySQLSettingsStore
from .settings.store import InMemorySettingsStore, SettingsStore


@dataclass(frozen=True)
class Container:
    settings_store: SettingsStore
    clock: BusinessClock
    hours_service: BusinessHoursService
    payroll_service: PayrollService
    slot_interval_minutes: int = DEFAULT_SLOT_INTERVAL_MINUTES
    conn: Optional[DatabaseConnection] = None


def build_container(
    *,
    settings_backend: str = SettingsBackend.MEMORY.value,
    db_config: Optional[dict] = None,
    default_timezone: Optional[str] = None,
    slot_interval_minutes: int = DEFAULT_SLOT_INTERVAL_MINUTES,
    settings_store: Optional[SettingsStore] = None,
) -> Container:
    conn = None
    if settings_store is None:
        if SettingsBackend(settings_backend) == SettingsBackend.MYSQL:
            conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
            settings_store = MySQLSettingsStore(conn)
        else:
            settings_store = InMemorySettingsStore()

    provider = SettingsTimezoneProvider(settings_store, host_zone=partial(host_timezone_name, default_timezone))
    clock = BusinessClock(provider)

    return Container(
        settings_store=settings_store,
        clock=clock,
        hours_service=BusinessHoursService(clock),
        payroll_service=PayrollService(settings_store, clock),
        slot_interval_minutes=int(slot_interval_minutes),
        conn=conn,
    )

"""Boundary between the raw settings store and the calendar/payroll core.

Everything read here is validated and turned into typed, immutable config.
Anything missing or malformed is logged and replaced by the documented
default, so callers downstream never see a parse error.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.constants import BUSINESS_INFO_KEY, BUSINESS_SETTINGS_KEY, PAYROLL_SETTINGS_KEY
from ..core.exceptions import ValidationError
from ..core.logging import get_logger
from ..hours.model import DEFAULT_HOURS_OF_OPERATION, HoursOfOperation, hours_table_from_dicts
from ..payroll.model import DEFAULT_PAY_PERIOD_SETTINGS, PayPeriodSettings
from .store import SettingsStore

logger = get_logger(__name__)


@dataclass(frozen=True)
class BusinessSettings:
    """Typed view of a ``business-info`` / ``business-settings`` snapshot."""

    timezone: Optional[str] = None
    hours_of_operation: Optional[tuple[HoursOfOperation, ...]] = None


def is_valid_timezone(name: Any) -> bool:
    if not isinstance(name, str) or not name.strip():
        return False
    try:
        ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return False
    return True


def load_business_settings(store: SettingsStore, key: str) -> Optional[BusinessSettings]:
    raw = store.get(key, None)
    if raw is None:
        return None
    if not isinstance(raw, dict):
        logger.warning("settings_invalid_shape", key=key, type=type(raw).__name__)
        return None

    timezone = raw.get("timezone")
    if timezone is not None and not is_valid_timezone(timezone):
        logger.warning("settings_invalid_timezone", key=key, timezone=timezone)
        timezone = None

    rows = raw.get("hoursOfOperation")
    hours = hours_table_from_dicts(rows) if isinstance(rows, list) else None

    return BusinessSettings(timezone=timezone or None, hours_of_operation=hours)


def load_hours_of_operation(store: SettingsStore) -> tuple[HoursOfOperation, ...]:
    """Weekly hours from ``business-info``, then ``business-settings``, else the default week."""
    for key in (BUSINESS_INFO_KEY, BUSINESS_SETTINGS_KEY):
        settings = load_business_settings(store, key)
        if settings is not None and settings.hours_of_operation is not None:
            return settings.hours_of_operation
    return DEFAULT_HOURS_OF_OPERATION


def load_pay_period_settings(store: SettingsStore) -> PayPeriodSettings:
    raw = store.get(PAYROLL_SETTINGS_KEY, None)
    if not isinstance(raw, dict) or not isinstance(raw.get("payPeriod"), dict):
        return DEFAULT_PAY_PERIOD_SETTINGS

    try:
        return PayPeriodSettings.from_dict(raw["payPeriod"])
    except ValidationError as e:
        logger.warning("settings_invalid_pay_period", key=PAYROLL_SETTINGS_KEY, error=str(e))
        return DEFAULT_PAY_PERIOD_SETTINGS


def validate_snapshot(key: str, doc: Any) -> dict:
    """Strict check for snapshots written by the settings screens.

    Reads are forgiving; writes are not, so bad data is refused before it is
    stored instead of being silently defaulted on every later read.
    """
    if key not in (BUSINESS_INFO_KEY, BUSINESS_SETTINGS_KEY, PAYROLL_SETTINGS_KEY):
        raise ValidationError(f"Unknown settings key: {key}")
    if not isinstance(doc, dict):
        raise ValidationError(f"{key} must be an object")

    if key == PAYROLL_SETTINGS_KEY:
        pay_period = doc.get("payPeriod")
        if not isinstance(pay_period, dict):
            raise ValidationError("payPeriod must be an object")
        if PayPeriodSettings.from_dict(pay_period).cadence is None:
            raise ValidationError(f"Unsupported pay period type: {pay_period.get('type')!r}")
        return doc

    if "timezone" in doc and not is_valid_timezone(doc["timezone"]):
        raise ValidationError(f"Unknown timezone: {doc['timezone']!r}")

    rows = doc.get("hoursOfOperation")
    if rows is not None:
        if not isinstance(rows, list):
            raise ValidationError("hoursOfOperation must be a list")
        for raw in rows:
            if not isinstance(raw, dict):
                raise ValidationError("hoursOfOperation rows must be objects")
            entry = HoursOfOperation.from_dict(raw)
            if entry.open_time is None or entry.close_time is None:
                raise ValidationError(f"{entry.day.value}: times must look like 09:00 or 9:00 AM")
            if entry.is_open and entry.window is None:
                raise ValidationError(f"{entry.day.value}: opening time must be before closing time")
    return doc


def save_pay_period_settings(store: SettingsStore, settings: PayPeriodSettings) -> None:
    def _merge(current: Any) -> dict:
        doc = dict(current) if isinstance(current, dict) else {}
        doc["payPeriod"] = settings.to_dict()
        return doc

    store.set(PAYROLL_SETTINGS_KEY, _merge)


def save_business_settings(
    store: SettingsStore,
    *,
    timezone: Optional[str] = None,
    hours_of_operation: Optional[Sequence[HoursOfOperation]] = None,
    key: str = BUSINESS_INFO_KEY,
) -> None:
    """Merge a timezone and/or hours table into a business snapshot."""

    if timezone is not None and not is_valid_timezone(timezone):
        raise ValidationError(f"Unknown timezone: {timezone!r}")

    def _merge(current: Any) -> dict:
        doc = dict(current) if isinstance(current, dict) else {}
        if timezone is not None:
            doc["timezone"] = timezone
        if hours_of_operation is not None:
            doc["hoursOfOperation"] = [row.to_dict() for row in hours_of_operation]
        return doc

    store.set(key, _merge)

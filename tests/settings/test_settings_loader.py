from __future__ import annotations

from datetime import date

import pytest

from src.salon_calendar.salon_calendar.core.enums import PayPeriodCadence, Weekday
from src.salon_calendar.salon_calendar.core.exceptions import ValidationError
from src.salon_calendar.salon_calendar.database.bootstrap import seed_default_settings
from src.salon_calendar.salon_calendar.hours.model import DEFAULT_HOURS_OF_OPERATION, HoursOfOperation
from src.salon_calendar.salon_calendar.payroll.model import DEFAULT_PAY_PERIOD_SETTINGS, PayPeriodSettings
from src.salon_calendar.salon_calendar.settings.loader import (
    load_business_settings,
    load_hours_of_operation,
    load_pay_period_settings,
    save_business_settings,
    save_pay_period_settings,
    validate_snapshot,
)
from src.salon_calendar.salon_calendar.settings.store import InMemorySettingsStore


def test_store_returns_default_for_missing_and_corrupt_keys():
    store = InMemorySettingsStore()
    store.put_raw("business-info", "{oops")

    assert store.get("business-info", {"fallback": True}) == {"fallback": True}
    assert store.get("nothing-here", 42) == 42


def test_store_set_accepts_update_function():
    store = InMemorySettingsStore({"payroll-settings": {"payPeriod": {"type": "weekly"}}})

    store.set("payroll-settings", lambda current: {**current, "note": "edited"})

    assert store.get("payroll-settings") == {"payPeriod": {"type": "weekly"}, "note": "edited"}


def test_store_snapshots_are_copies():
    store = InMemorySettingsStore({"business-info": {"timezone": "UTC"}})

    snapshot = store.get("business-info")
    snapshot["timezone"] = "Asia/Tokyo"

    assert store.get("business-info") == {"timezone": "UTC"}


def test_hours_come_from_business_info_then_business_settings():
    monday_only = [{"day": "Monday", "isOpen": True, "openTime": "08:00", "closeTime": "12:00"}]
    store = InMemorySettingsStore({"business-settings": {"hoursOfOperation": monday_only}})

    table = load_hours_of_operation(store)
    assert [row.day for row in table] == [Weekday.MONDAY]

    store.set("business-info", {"timezone": "UTC", "hoursOfOperation": []})
    assert load_hours_of_operation(store) == ()


def test_hours_default_when_nothing_usable():
    store = InMemorySettingsStore({"business-info": {"hoursOfOperation": "closed"}})

    assert load_hours_of_operation(store) == DEFAULT_HOURS_OF_OPERATION


def test_business_settings_drop_unknown_timezone():
    store = InMemorySettingsStore({"business-info": {"timezone": "Nowhere/Special"}})

    settings = load_business_settings(store, "business-info")
    assert settings.timezone is None
    assert settings.hours_of_operation is None


def test_pay_period_settings_default_on_bad_shapes():
    for raw in (None, [], {"payPeriod": "weekly"}, {"payPeriod": {"type": "weekly"}}):
        store = InMemorySettingsStore()
        if raw is not None:
            store.set("payroll-settings", raw)
        assert load_pay_period_settings(store) == DEFAULT_PAY_PERIOD_SETTINGS


def test_save_pay_period_settings_keeps_other_keys():
    store = InMemorySettingsStore({"payroll-settings": {"overtimeThreshold": 44}})
    settings = PayPeriodSettings(
        cadence=PayPeriodCadence.WEEKLY,
        anchor_start_date=date(2025, 1, 6),
        anchor_end_date=date(2025, 1, 12),
        anchor_pay_date=date(2025, 1, 15),
    )

    save_pay_period_settings(store, settings)

    assert store.get("payroll-settings")["overtimeThreshold"] == 44
    assert load_pay_period_settings(store) == settings


def test_save_business_settings_merges_and_validates_zone():
    store = InMemorySettingsStore({"business-info": {"name": "Wag & Wash"}})
    saturday = HoursOfOperation.from_dict({"day": "Saturday", "isOpen": False, "openTime": "10:00", "closeTime": "16:00"})

    save_business_settings(store, timezone="America/Halifax", hours_of_operation=[saturday])

    doc = store.get("business-info")
    assert doc["name"] == "Wag & Wash"
    assert doc["timezone"] == "America/Halifax"
    assert doc["hoursOfOperation"] == [{"day": "Saturday", "isOpen": False, "openTime": "10:00", "closeTime": "16:00"}]

    with pytest.raises(ValidationError):
        save_business_settings(store, timezone="Atlantis/Capital")


@pytest.mark.parametrize(
    "key, doc",
    [
        ("unknown-key", {}),
        ("business-info", []),
        ("business-info", {"timezone": "Nowhere/Special"}),
        ("business-info", {"hoursOfOperation": {"day": "Monday"}}),
        ("business-info", {"hoursOfOperation": [{"day": "Moonday", "isOpen": True, "openTime": "09:00", "closeTime": "17:00"}]}),
        ("business-info", {"hoursOfOperation": [{"day": "Monday", "isOpen": True, "openTime": "9am", "closeTime": "17:00"}]}),
        ("business-info", {"hoursOfOperation": [{"day": "Monday", "isOpen": True, "openTime": "17:00", "closeTime": "09:00"}]}),
        ("payroll-settings", {"payPeriod": None}),
        ("payroll-settings", {"payPeriod": {"type": "fortnightly", "anchorStartDate": "2025-01-01", "anchorEndDate": "2025-01-14", "anchorPayDate": "2025-01-17"}}),
    ],
)
def test_validate_snapshot_rejects_bad_writes(key, doc):
    with pytest.raises(ValidationError):
        validate_snapshot(key, doc)


def test_validate_snapshot_accepts_closed_day_with_any_order():
    doc = {"hoursOfOperation": [{"day": "Sunday", "isOpen": False, "openTime": "17:00", "closeTime": "09:00"}]}

    assert validate_snapshot("business-settings", doc) is doc


def test_seed_defaults_only_fills_gaps():
    store = InMemorySettingsStore({"business-info": {"timezone": "UTC", "hoursOfOperation": []}})

    seed_default_settings(store)

    assert store.get("business-info")["hoursOfOperation"] == []
    assert load_pay_period_settings(store) == DEFAULT_PAY_PERIOD_SETTINGS
    assert store.get("payroll-settings")["payPeriod"]["type"] == "bi-weekly"

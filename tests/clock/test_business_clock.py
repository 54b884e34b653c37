from datetime import date, datetime, timezone

import pytest

from src.salon_calendar.salon_calendar.clock.provider import (
    FixedTimezoneProvider,
    SettingsTimezoneProvider,
    host_timezone_name,
)
from src.salon_calendar.salon_calendar.clock.service import BusinessClock
from src.salon_calendar.salon_calendar.core.exceptions import SettingsError, ValidationError
from src.salon_calendar.salon_calendar.settings.loader import is_valid_timezone
from src.salon_calendar.salon_calendar.settings.store import InMemorySettingsStore


def _clock(zone: str, now: datetime | None = None) -> BusinessClock:
    if now is None:
        return BusinessClock(FixedTimezoneProvider(zone))
    return BusinessClock(FixedTimezoneProvider(zone), now=lambda: now)


def test_today_is_zoned_not_utc_truncated():
    # 02:00 UTC on Jan 1 is still New Year's Eve in Chicago.
    now = datetime(2025, 1, 1, 2, 0, tzinfo=timezone.utc)

    assert _clock("America/Chicago", now).today_string() == "2024-12-31"
    assert _clock("UTC", now).today_string() == "2025-01-01"
    assert _clock("Asia/Tokyo", now).today() == date(2025, 1, 1)


def test_now_carries_business_zone():
    now = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
    local = _clock("Europe/Paris", now).now()

    assert local.hour == 14
    assert str(local.tzinfo) == "Europe/Paris"


def test_business_date_string_near_midnight():
    clock = _clock("America/Los_Angeles")

    assert clock.to_business_date_string("2025-03-01T03:30:00Z") == "2025-02-28"
    assert clock.to_business_date_string(datetime(2025, 3, 1, 9, 0, tzinfo=timezone.utc)) == "2025-03-01"


def test_naive_datetime_is_taken_as_utc():
    clock = _clock("America/Los_Angeles")

    assert clock.to_business_date_string(datetime(2025, 3, 1, 3, 30)) == "2025-02-28"


def test_same_calendar_day_depends_on_zone():
    a = "2025-03-01T03:30:00Z"
    b = "2025-02-28T20:00:00Z"

    assert _clock("America/Los_Angeles").is_same_calendar_day(a, b) is True
    assert _clock("UTC").is_same_calendar_day(a, b) is False


def test_settings_provider_prefers_business_info():
    store = InMemorySettingsStore(
        {
            "business-info": {"timezone": "America/Denver"},
            "business-settings": {"timezone": "America/New_York"},
        }
    )

    assert SettingsTimezoneProvider(store, host_zone=lambda: "UTC").timezone() == "America/Denver"


def test_settings_provider_skips_corrupt_and_unknown_zones():
    store = InMemorySettingsStore({"business-settings": {"timezone": "America/New_York"}})
    store.put_raw("business-info", "{not json")

    assert SettingsTimezoneProvider(store, host_zone=lambda: "UTC").timezone() == "America/New_York"

    store.set("business-info", {"timezone": "Mars/Olympus_Mons"})
    assert SettingsTimezoneProvider(store, host_zone=lambda: "UTC").timezone() == "America/New_York"


def test_settings_provider_falls_back_to_host():
    store = InMemorySettingsStore({"business-info": {"timezone": ""}, "business-settings": ["wrong", "shape"]})

    assert SettingsTimezoneProvider(store, host_zone=lambda: "Europe/Berlin").timezone() == "Europe/Berlin"


class UnreachableStore(InMemorySettingsStore):
    def __init__(self, initial=None, readable=()):
        self.readable = set(readable) | set(initial or {})
        super().__init__(initial)
        self.readable = set(readable)

    def get(self, key, default=None):
        if key not in self.readable:
            raise SettingsError("database down")
        return super().get(key, default)


def test_settings_provider_treats_unreadable_store_as_absent():
    provider = SettingsTimezoneProvider(UnreachableStore(), host_zone=lambda: "Europe/Berlin")

    assert provider.timezone() == "Europe/Berlin"
    assert BusinessClock(provider, now=lambda: datetime(2025, 1, 1, 23, 30, tzinfo=timezone.utc)).today_string() == "2025-01-02"


def test_settings_provider_moves_past_unreadable_source():
    store = UnreachableStore(
        {"business-info": {"timezone": "Asia/Tokyo"}, "business-settings": {"timezone": "America/Chicago"}},
        readable={"business-settings"},
    )

    assert SettingsTimezoneProvider(store, host_zone=lambda: "UTC").timezone() == "America/Chicago"


def test_settings_provider_reads_fresh_each_call():
    store = InMemorySettingsStore()
    provider = SettingsTimezoneProvider(store, host_zone=lambda: "UTC")

    assert provider.timezone() == "UTC"
    store.set("business-info", {"timezone": "Australia/Sydney"})
    assert provider.timezone() == "Australia/Sydney"


def test_host_timezone_honours_valid_override():
    assert host_timezone_name("Asia/Tokyo") == "Asia/Tokyo"
    assert is_valid_timezone(host_timezone_name("Not/A_Zone"))
    assert is_valid_timezone(host_timezone_name())


def test_format_uses_business_wall_time():
    clock = _clock("Asia/Kolkata")

    assert clock.format("2025-03-01T20:00:00Z", "%Y-%m-%d %H:%M") == "2025-03-02 01:30"


def test_display_date_format():
    from src.salon_calendar.salon_calendar.common.datetime_utils import format_date_for_display

    assert format_date_for_display("2025-01-05") == "01-05-2025"
    assert format_date_for_display("") == ""


def test_wall_time_to_instant():
    clock = _clock("America/Toronto")

    assert clock.from_business_datetime("2025-02-03", "2:00 PM") == datetime(2025, 2, 3, 19, 0, tzinfo=timezone.utc)
    assert clock.from_business_datetime(date(2025, 7, 1), "09:30") == datetime(2025, 7, 1, 13, 30, tzinfo=timezone.utc)


def test_wall_time_in_spring_forward_gap_lands_after_it():
    clock = _clock("America/New_York")

    instant = clock.from_business_datetime("2025-03-09", "02:30")

    assert instant == datetime(2025, 3, 9, 7, 30, tzinfo=timezone.utc)
    assert clock.format(instant, "%H:%M") == "03:30"


def test_ambiguous_wall_time_takes_first_occurrence():
    clock = _clock("America/New_York")

    assert clock.from_business_datetime("2025-11-02", "1:30 AM") == datetime(2025, 11, 2, 5, 30, tzinfo=timezone.utc)


def test_wall_time_rejects_unparseable_time():
    with pytest.raises(ValidationError):
        _clock("UTC").from_business_datetime("2025-02-03", "half past two")

from __future__ import annotations

import pytest

from src.salon_calendar.salon_calendar.container import build_container
from src.salon_calendar.salon_calendar.main import create_app
from src.salon_calendar.salon_calendar.settings.store import InMemorySettingsStore


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    store = InMemorySettingsStore({"business-info": {"timezone": "America/Toronto"}})
    app = create_app(build_container(settings_store=store, default_timezone="UTC"))
    return app.test_client()


def test_timezone_comes_from_business_info(client):
    assert client.get("/api/calendar/timezone").get_json() == {"timezone": "America/Toronto"}


def test_today_is_iso_date(client):
    data = client.get("/api/calendar/today").get_json()

    assert len(data["today"]) == 10
    assert data["now"].startswith(data["today"])


def test_slots_for_monday(client):
    data = client.get("/api/calendar/slots?date=2025-02-03").get_json()

    assert data["interval"] == 60
    assert data["slots"][0] == "9:00 AM"
    assert data["slots"][-1] == "4:00 PM"
    assert len(data["slots"]) == 8


def test_slots_reject_bad_input(client):
    assert client.get("/api/calendar/slots?date=02/03/2025").status_code == 400
    assert client.get("/api/calendar/slots").status_code == 400

    resp = client.get("/api/calendar/slots?date=2025-02-03&interval=0")
    assert resp.status_code == 400
    assert "interval" in resp.get_json()["error"]


def test_within_hours(client):
    inside = client.get("/api/calendar/within-hours", query_string={"date": "2025-02-03", "time": "4:30 PM"}).get_json()
    closing = client.get("/api/calendar/within-hours", query_string={"date": "2025-02-03", "time": "17:00"}).get_json()

    assert inside["withinHours"] is True
    assert closing["withinHours"] is False


def test_update_hours_then_read_slots(client):
    resp = client.put(
        "/api/calendar/hours",
        json={"hoursOfOperation": [{"day": "Monday", "isOpen": True, "openTime": "8:00 AM", "closeTime": "10:00 AM"}]},
    )
    assert resp.status_code == 200

    assert client.get("/api/calendar/slots?date=2025-02-03&interval=30").get_json()["slots"] == [
        "8:00 AM",
        "8:30 AM",
        "9:00 AM",
        "9:30 AM",
    ]
    assert client.get("/api/calendar/hours?date=2025-02-04").get_json()["hours"] is None
    assert client.get("/api/calendar/timezone").get_json()["timezone"] == "America/Toronto"


def test_update_hours_rejects_inverted_window(client):
    resp = client.put(
        "/api/calendar/hours",
        json={"hoursOfOperation": [{"day": "Monday", "isOpen": True, "openTime": "17:00", "closeTime": "09:00"}]},
    )

    assert resp.status_code == 400


def test_pay_periods_with_default_settings(client):
    current = client.get("/api/payroll/periods/current?date=2025-01-20").get_json()
    following = client.get("/api/payroll/periods/next?date=2025-01-20").get_json()
    earlier = client.get("/api/payroll/periods/previous?date=2025-01-20").get_json()
    later = client.get("/api/payroll/periods/upcoming?date=2025-01-20&ahead=2").get_json()

    assert current == {"startDate": "2025-01-13", "endDate": "2025-01-26", "payDate": "2025-01-31", "label": "Jan 13 - 26"}
    assert following["startDate"] == "2025-01-27"
    assert earlier["endDate"] == "2025-01-12"
    assert later["startDate"] == "2025-02-10"
    assert client.get("/api/payroll/periods/someday").status_code == 404


def test_update_payroll_settings(client):
    resp = client.put(
        "/api/payroll/settings",
        json={
            "payPeriod": {
                "type": "semi-monthly",
                "anchorStartDate": "2025-01-01",
                "anchorEndDate": "2025-01-15",
                "anchorPayDate": "2025-01-20",
            }
        },
    )
    data = resp.get_json()

    assert resp.status_code == 200
    assert data["label"] == "Semi-Monthly"
    assert data["payLagDays"] == 5
    assert client.get("/api/payroll/periods/current?date=2025-03-15").get_json()["endDate"] == "2025-03-15"


def test_update_payroll_settings_rejects_unknown_cadence(client):
    resp = client.put(
        "/api/payroll/settings",
        json={"payPeriod": {"type": "daily", "anchorStartDate": "2025-01-01", "anchorEndDate": "2025-01-01", "anchorPayDate": "2025-01-02"}},
    )

    assert resp.status_code == 400


def test_staff_pay(client):
    resp = client.post(
        "/api/payroll/staff-pay",
        json={
            "plan": {"type": "guaranteed-vs-commission", "guaranteedAmount": 400, "commissionRate": 50, "useHigherAmount": True},
            "hoursWorked": 0,
            "commissionableAmount": 1000,
        },
    )

    assert resp.get_json() == {"amount": 500}


def test_staff_pay_requires_plan(client):
    assert client.post("/api/payroll/staff-pay", json={"hoursWorked": 10}).status_code == 400
    assert client.post("/api/payroll/staff-pay", data="not json").status_code == 400


def test_statement(client):
    resp = client.post(
        "/api/payroll/statement",
        json={"plan": {"type": "hourly", "hourlyRate": 20}, "hoursWorked": 45, "date": "2025-01-20"},
    )
    data = resp.get_json()

    assert data["grossPay"] == 900
    assert data["overtime"]["totalPay"] == 950
    assert data["periodLabel"] == "Jan 13 - 26"


def test_settings_get_and_put(client):
    assert client.get("/api/settings/payroll-settings").get_json() == {"key": "payroll-settings", "value": None}
    assert client.get("/api/settings/secrets").status_code == 404

    resp = client.put("/api/settings/business-settings", json={"timezone": "Europe/Dublin"})
    assert resp.status_code == 200
    assert resp.get_json()["value"] == {"timezone": "Europe/Dublin"}

    assert client.put("/api/settings/business-settings", json={"timezone": "Europe/Atlantis"}).status_code == 400


def test_unavailable_settings_store_returns_503(monkeypatch):
    from src.salon_calendar.salon_calendar.core.exceptions import SettingsError

    class FlakyStore(InMemorySettingsStore):
        down = False

        def get(self, key, default=None):
            if self.down:
                raise SettingsError("database down")
            return super().get(key, default)

    monkeypatch.setenv("APP_ENV", "testing")
    store = FlakyStore()
    app = create_app(build_container(settings_store=store, default_timezone="UTC"))
    store.down = True

    resp = app.test_client().get("/api/calendar/slots?date=2025-02-03")

    assert resp.status_code == 503
    assert resp.get_json() == {"error": "settings unavailable"}


def test_timezone_falls_back_to_host_when_store_is_down(monkeypatch):
    from src.salon_calendar.salon_calendar.core.exceptions import SettingsError

    class FlakyStore(InMemorySettingsStore):
        down = False

        def get(self, key, default=None):
            if self.down:
                raise SettingsError("database down")
            return super().get(key, default)

    monkeypatch.setenv("APP_ENV", "testing")
    store = FlakyStore({"business-info": {"timezone": "America/Toronto"}})
    app = create_app(build_container(settings_store=store, default_timezone="UTC"))
    store.down = True

    resp = app.test_client().get("/api/calendar/timezone")

    assert resp.status_code == 200
    assert resp.get_json() == {"timezone": "UTC"}


def test_statement_rejects_non_string_date(client):
    resp = client.post(
        "/api/payroll/statement",
        json={"plan": {"type": "hourly", "hourlyRate": 20}, "hoursWorked": 10, "date": 20250120},
    )

    assert resp.status_code == 400
    assert "date" in resp.get_json()["error"]

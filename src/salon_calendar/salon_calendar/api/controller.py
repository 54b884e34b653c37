from __future__ import annotations

from datetime import date
from typing import Optional

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date
from ..common.validators import optional_number, require_int, require_iso_date, require_mapping, require_non_empty
from ..container import Container
from ..core.constants import SETTINGS_KEYS
from ..core.exceptions import SettingsError, ValidationError
from ..core.logging import get_logger
from ..hours.model import HoursOfOperation
from ..payroll.model import PayPeriodSettings, StaffCompensation
from ..payroll.periods import cadence_description, cadence_label, format_pay_period_range
from ..settings.loader import (
    load_hours_of_operation,
    save_business_settings,
    save_pay_period_settings,
    validate_snapshot,
)

logger = get_logger(__name__)


def register(app: Flask, container: Container) -> None:
    def _reference_date() -> date:
        value = request.args.get("date")
        if not value:
            return container.clock.today()
        return require_iso_date(value, "date")

    def _json_body() -> dict:
        return require_mapping(request.get_json(silent=True), "request body")

    def _period_payload(period) -> dict:
        data = period.to_dict()
        data["label"] = format_pay_period_range(period)
        return data

    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        logger.warning("request_rejected", path=request.path, error=str(e))
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(SettingsError)
    def _settings_error(e: SettingsError):
        logger.error("settings_unavailable", path=request.path, error=str(e))
        return jsonify({"error": "settings unavailable"}), 503

    @app.get("/api/calendar/timezone", endpoint="calendar_timezone")
    def calendar_timezone():
        return jsonify({"timezone": container.clock.timezone_name()})

    @app.get("/api/calendar/today", endpoint="calendar_today")
    def calendar_today():
        now = container.clock.now()
        return jsonify({"today": format_iso_date(now.date()), "now": now.isoformat()})

    @app.get("/api/calendar/hours", endpoint="calendar_hours")
    def calendar_hours():
        table = load_hours_of_operation(container.settings_store)
        day = request.args.get("date")
        if not day:
            return jsonify({"hoursOfOperation": [row.to_dict() for row in table]})

        hours = container.hours_service.hours_for_date(require_iso_date(day, "date"), table)
        return jsonify({"date": day, "hours": hours.to_dict() if hours else None})

    @app.put("/api/calendar/hours", endpoint="calendar_hours_update")
    def calendar_hours_update():
        body = _json_body()
        validate_snapshot("business-info", body)
        rows = body.get("hoursOfOperation")
        save_business_settings(
            container.settings_store,
            timezone=body.get("timezone"),
            hours_of_operation=[HoursOfOperation.from_dict(r) for r in rows] if rows is not None else None,
        )
        return jsonify({"hoursOfOperation": [r.to_dict() for r in load_hours_of_operation(container.settings_store)]})

    @app.get("/api/calendar/slots", endpoint="calendar_slots")
    def calendar_slots():
        day = require_iso_date(request.args.get("date"), "date")
        interval = require_int(request.args.get("interval", container.slot_interval_minutes), "interval", minimum=1)
        table = load_hours_of_operation(container.settings_store)
        slots = container.hours_service.slots_for_date(day, table, interval)
        return jsonify({"date": format_iso_date(day), "interval": interval, "slots": slots})

    @app.get("/api/calendar/within-hours", endpoint="calendar_within_hours")
    def calendar_within_hours():
        day = require_iso_date(request.args.get("date"), "date")
        time_text = require_non_empty(request.args.get("time"), "time")
        table = load_hours_of_operation(container.settings_store)
        return jsonify({"date": format_iso_date(day), "time": time_text, "withinHours": container.hours_service.is_within_hours(day, time_text, table)})

    @app.get("/api/payroll/settings", endpoint="payroll_settings")
    def payroll_settings():
        settings = container.payroll_service.pay_period_settings()
        return jsonify(
            {
                "payPeriod": settings.to_dict(),
                "label": cadence_label(settings.cadence),
                "description": cadence_description(settings.cadence),
                "payLagDays": settings.pay_lag_days,
            }
        )

    @app.put("/api/payroll/settings", endpoint="payroll_settings_update")
    def payroll_settings_update():
        body = _json_body()
        validate_snapshot("payroll-settings", body)
        save_pay_period_settings(container.settings_store, PayPeriodSettings.from_dict(body["payPeriod"]))
        return payroll_settings()

    @app.get("/api/payroll/periods/<which>", endpoint="payroll_period")
    def payroll_period(which: str):
        reference = _reference_date()
        service = container.payroll_service
        if which == "current":
            period = service.current_period(reference)
        elif which == "next":
            period = service.next_period(reference)
        elif which == "previous":
            period = service.previous_period(reference)
        elif which == "upcoming":
            ahead = require_int(request.args.get("ahead", 1), "ahead")
            period = service.upcoming_period(ahead, reference)
        else:
            return jsonify({"error": f"Unknown period: {which}"}), 404
        return jsonify(_period_payload(period))

    def _pay_inputs(body: dict) -> tuple[StaffCompensation, float, float, Optional[float]]:
        plan = StaffCompensation.from_dict(require_mapping(body.get("plan"), "plan"))
        override = body.get("overrideAmount")
        return (
            plan,
            optional_number(body.get("hoursWorked"), "hoursWorked"),
            optional_number(body.get("commissionableAmount"), "commissionableAmount"),
            optional_number(override, "overrideAmount") if override is not None else None,
        )

    @app.post("/api/payroll/staff-pay", endpoint="payroll_staff_pay")
    def payroll_staff_pay():
        plan, hours, commissionable, override = _pay_inputs(_json_body())
        amount = container.payroll_service.staff_pay(plan, hours, commissionable, override)
        return jsonify({"amount": round(amount, 2)})

    @app.post("/api/payroll/statement", endpoint="payroll_statement")
    def payroll_statement():
        body = _json_body()
        plan, hours, commissionable, override = _pay_inputs(body)
        reference = require_iso_date(body["date"], "date") if body.get("date") else None
        statement = container.payroll_service.statement(plan, hours, commissionable, override, reference=reference)
        return jsonify(statement.to_dict())

    @app.get("/api/settings/<key>", endpoint="settings_get")
    def settings_get(key: str):
        if key not in SETTINGS_KEYS:
            return jsonify({"error": f"Unknown settings key: {key}"}), 404
        return jsonify({"key": key, "value": container.settings_store.get(key, None)})

    @app.put("/api/settings/<key>", endpoint="settings_put")
    def settings_put(key: str):
        if key not in SETTINGS_KEYS:
            return jsonify({"error": f"Unknown settings key: {key}"}), 404
        doc = validate_snapshot(key, _json_body())
        container.settings_store.set(key, doc)
        logger.info("settings_saved", key=key)
        return jsonify({"key": key, "value": container.settings_store.get(key, None)})

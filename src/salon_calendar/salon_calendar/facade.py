"""Function-style entry points used by the booking and payroll screens.

Calendar functions take the timezone capability explicitly; without one they
use the host zone.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Any, Mapping, Optional, Union

from .clock.provider import FixedTimezoneProvider, TimezoneProvider, host_timezone_name
from .clock.service import BusinessClock, CalendarInput, Instant
from .core.constants import DEFAULT_SLOT_INTERVAL_MINUTES
from .hours.model import HoursTable
from .hours.service import BusinessHoursService
from .payroll.calculator.standard_calculator import StandardCompensationCalculator
from .payroll.model import PayPeriod, PayPeriodSettings, StaffCompensation
from .payroll.periods import PayPeriodCalculator

_periods = PayPeriodCalculator()
_calculator = StandardCompensationCalculator()


def _clock(provider: Optional[TimezoneProvider]) -> BusinessClock:
    return BusinessClock(provider or FixedTimezoneProvider(host_timezone_name()))


def resolve_business_timezone(provider: Optional[TimezoneProvider] = None) -> str:
    return _clock(provider).timezone_name()


def today_in_business_timezone(provider: Optional[TimezoneProvider] = None) -> str:
    return _clock(provider).today_string()


def now_in_business_timezone(provider: Optional[TimezoneProvider] = None) -> datetime:
    return _clock(provider).now()


def to_business_date_string(instant: Instant, provider: Optional[TimezoneProvider] = None) -> str:
    return _clock(provider).to_business_date_string(instant)


def is_same_calendar_day(a: Instant, b: Instant, provider: Optional[TimezoneProvider] = None) -> bool:
    return _clock(provider).is_same_calendar_day(a, b)


def format_in_business_timezone(instant: Instant, fmt: str, provider: Optional[TimezoneProvider] = None) -> str:
    return _clock(provider).format(instant, fmt)


def from_business_datetime(
    day: CalendarInput,
    time_text: str,
    provider: Optional[TimezoneProvider] = None,
) -> datetime:
    return _clock(provider).from_business_datetime(day, time_text)


def slots_for_date(
    day: CalendarInput,
    hours_table: HoursTable,
    interval_minutes: int = DEFAULT_SLOT_INTERVAL_MINUTES,
    *,
    provider: Optional[TimezoneProvider] = None,
) -> list[str]:
    return BusinessHoursService(_clock(provider)).slots_for_date(day, hours_table, interval_minutes)


def is_within_hours(
    day: CalendarInput,
    time_text: str,
    hours_table: HoursTable,
    *,
    provider: Optional[TimezoneProvider] = None,
) -> bool:
    return BusinessHoursService(_clock(provider)).is_within_hours(day, time_text, hours_table)


def get_current_pay_period(settings: PayPeriodSettings, reference_date: date) -> PayPeriod:
    return _periods.current(settings, reference_date)


def get_next_pay_period(settings: PayPeriodSettings, reference_date: date) -> PayPeriod:
    return _periods.next(settings, reference_date)


def get_previous_pay_period(settings: PayPeriodSettings, reference_date: date) -> PayPeriod:
    return _periods.previous(settings, reference_date)


def get_upcoming_pay_period(settings: PayPeriodSettings, periods_ahead: int, reference_date: date) -> PayPeriod:
    return _periods.upcoming(settings, periods_ahead, reference_date)


def calculate_staff_pay(
    plan: Union[StaffCompensation, Mapping[str, Any]],
    hours_worked: float,
    commissionable_amount: float,
    override_amount: Optional[float] = None,
) -> float:
    if not isinstance(plan, StaffCompensation):
        plan = StaffCompensation.from_dict(plan)
    return _calculator.pay(plan, hours_worked, commissionable_amount, override_amount)

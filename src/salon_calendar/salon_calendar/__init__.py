"""Salon calendar package.

Business-calendar and pay-period engine for the grooming salon: business
timezone, opening hours and booking slots, pay periods and staff pay. It is
organized by feature modules (clock, hours, payroll, settings, ...) with a thin
Flask controller layer on top.
"""

from .facade import (
    calculate_staff_pay,
    format_in_business_timezone,
    from_business_datetime,
    get_current_pay_period,
    get_next_pay_period,
    get_previous_pay_period,
    get_upcoming_pay_period,
    is_same_calendar_day,
    is_within_hours,
    now_in_business_timezone,
    resolve_business_timezone,
    slots_for_date,
    to_business_date_string,
    today_in_business_timezone,
)

__all__ = [
    "calculate_staff_pay",
    "format_in_business_timezone",
    "from_business_datetime",
    "get_current_pay_period",
    "get_next_pay_period",
    "get_previous_pay_period",
    "get_upcoming_pay_period",
    "is_same_calendar_day",
    "is_within_hours",
    "now_in_business_timezone",
    "resolve_business_timezone",
    "slots_for_date",
    "to_business_date_string",
    "today_in_business_timezone",
]

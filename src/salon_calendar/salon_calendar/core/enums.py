from __future__ import annotations

from enum import Enum


class Weekday(str, Enum):
    """Weekday names as stored in the hours-of-operation table."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @classmethod
    def from_index(cls, index: int) -> "Weekday":
        """Map ``date.weekday()`` (0=Mon .. 6=Sun) to a weekday name."""
        return list(cls)[index]


class PayPeriodCadence(str, Enum):
    """Payroll recurrence rule persisted under ``payroll-settings``."""

    WEEKLY = "weekly"
    BI_WEEKLY = "bi-weekly"
    SEMI_MONTHLY = "semi-monthly"
    MONTHLY = "monthly"


class CompensationType(str, Enum):
    HOURLY = "hourly"
    SALARY = "salary"
    COMMISSION = "commission"
    HOURLY_PLUS_COMMISSION = "hourly-plus-commission"
    SALARY_PLUS_COMMISSION = "salary-plus-commission"
    OVERRIDE = "override"
    GUARANTEED_VS_COMMISSION = "guaranteed-vs-commission"


class SettingsBackend(str, Enum):
    MEMORY = "memory"
    MYSQL = "mysql"

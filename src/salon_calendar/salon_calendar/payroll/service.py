from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..clock.service import BusinessClock
from ..core.enums import CompensationType
from ..settings.loader import load_pay_period_settings
from ..settings.store import SettingsStore
from .calculator.base import CompensationCalculator
from .calculator.standard_calculator import OvertimeBreakdown, StandardCompensationCalculator, calculate_overtime_pay
from .model import PayPeriod, PayPeriodSettings, StaffCompensation
from .periods import PayPeriodCalculator, format_pay_period_range


@dataclass(frozen=True)
class PayStatement:
    period: PayPeriod
    period_label: str
    gross_pay: float
    overtime: Optional[OvertimeBreakdown] = None

    def to_dict(self) -> dict:
        data = {
            "period": self.period.to_dict(),
            "periodLabel": self.period_label,
            "grossPay": round(self.gross_pay, 2),
        }
        if self.overtime is not None:
            data["overtime"] = {
                "regularHours": self.overtime.regular_hours,
                "overtimeHours": self.overtime.overtime_hours,
                "regularPay": round(self.overtime.regular_pay, 2),
                "overtimePay": round(self.overtime.overtime_pay, 2),
                "totalPay": round(self.overtime.total_pay, 2),
            }
        return data


class PayrollService:
    """Pay periods and staff pay, read against the stored payroll settings."""

    def __init__(
        self,
        settings: SettingsStore,
        clock: BusinessClock,
        *,
        periods: Optional[PayPeriodCalculator] = None,
        calculator: Optional[CompensationCalculator] = None,
    ):
        self._settings = settings
        self._clock = clock
        self._periods = periods or PayPeriodCalculator()
        self._calculator = calculator or StandardCompensationCalculator()

    def pay_period_settings(self) -> PayPeriodSettings:
        return load_pay_period_settings(self._settings)

    def _reference(self, reference: Optional[date]) -> date:
        return reference or self._clock.today()

    def current_period(self, reference: Optional[date] = None) -> PayPeriod:
        return self._periods.current(self.pay_period_settings(), self._reference(reference))

    def next_period(self, reference: Optional[date] = None) -> PayPeriod:
        return self._periods.next(self.pay_period_settings(), self._reference(reference))

    def previous_period(self, reference: Optional[date] = None) -> PayPeriod:
        return self._periods.previous(self.pay_period_settings(), self._reference(reference))

    def upcoming_period(self, periods_ahead: int, reference: Optional[date] = None) -> PayPeriod:
        return self._periods.upcoming(self.pay_period_settings(), periods_ahead, self._reference(reference))

    def staff_pay(
        self,
        plan: StaffCompensation,
        hours_worked: float,
        commissionable_amount: float,
        override_amount: Optional[float] = None,
    ) -> float:
        return self._calculator.pay(plan, hours_worked, commissionable_amount, override_amount)

    def statement(
        self,
        plan: StaffCompensation,
        hours_worked: float,
        commissionable_amount: float,
        override_amount: Optional[float] = None,
        *,
        reference: Optional[date] = None,
    ) -> PayStatement:
        """Gross pay for the period containing ``reference`` (today by default).

        Hourly plans also carry the overtime split for the payroll detail view.
        """
        period = self.current_period(reference)
        overtime = None
        if plan.type in (CompensationType.HOURLY.value, CompensationType.HOURLY_PLUS_COMMISSION.value):
            overtime = calculate_overtime_pay(plan.hourly_rate or 0, hours_worked)

        return PayStatement(
            period=period,
            period_label=format_pay_period_range(period),
            gross_pay=self.staff_pay(plan, hours_worked, commissionable_amount, override_amount),
            overtime=overtime,
        )

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...core.constants import DEFAULT_OVERTIME_THRESHOLD_HOURS, OVERTIME_MULTIPLIER
from ...core.enums import CompensationType
from ..model import StaffCompensation
from .base import CompensationCalculator


def _rate(value: Optional[float]) -> float:
    return float(value or 0)


def _commission(plan: StaffCompensation, commissionable_amount: float) -> float:
    return float(commissionable_amount or 0) * _rate(plan.commission_rate) / 100


class StandardCompensationCalculator(CompensationCalculator):
    """Pay for one period from a plan, hours worked and commissionable revenue.

    Missing rate fields contribute 0 and unknown plan types pay 0.
    """

    def pay(
        self,
        plan: StaffCompensation,
        hours_worked: float,
        commissionable_amount: float,
        override_amount: Optional[float] = None,
    ) -> float:
        hourly = float(hours_worked or 0) * _rate(plan.hourly_rate)
        salary = _rate(plan.salary_amount)
        commission = _commission(plan, commissionable_amount)

        if plan.type == CompensationType.HOURLY.value:
            return hourly
        if plan.type == CompensationType.SALARY.value:
            return salary
        if plan.type == CompensationType.COMMISSION.value:
            return commission
        if plan.type == CompensationType.HOURLY_PLUS_COMMISSION.value:
            return hourly + commission
        if plan.type == CompensationType.SALARY_PLUS_COMMISSION.value:
            return salary + commission
        if plan.type == CompensationType.OVERRIDE.value:
            return float(override_amount or 0) * _rate(plan.override_percentage) / 100
        if plan.type == CompensationType.GUARANTEED_VS_COMMISSION.value:
            guaranteed = _rate(plan.guaranteed_amount)
            if plan.use_higher_amount:
                return max(guaranteed, commission)
            return guaranteed + commission
        return 0.0


@dataclass(frozen=True)
class OvertimeBreakdown:
    regular_hours: float
    overtime_hours: float
    regular_pay: float
    overtime_pay: float

    @property
    def total_pay(self) -> float:
        return self.regular_pay + self.overtime_pay


def calculate_overtime_pay(
    hourly_rate: float,
    total_hours: float,
    threshold: float = DEFAULT_OVERTIME_THRESHOLD_HOURS,
) -> OvertimeBreakdown:
    """Split hours at ``threshold``; hours above it pay 1.5x."""
    rate = float(hourly_rate or 0)
    hours = max(float(total_hours or 0), 0.0)
    overtime_hours = max(hours - threshold, 0.0)
    regular_hours = min(hours, threshold)
    return OvertimeBreakdown(
        regular_hours=regular_hours,
        overtime_hours=overtime_hours,
        regular_pay=regular_hours * rate,
        overtime_pay=overtime_hours * rate * OVERTIME_MULTIPLIER,
    )

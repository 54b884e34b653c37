from __future__ import annotations

from datetime import date

from dateutil.relativedelta import relativedelta

from ...core.constants import SEMI_MONTHLY_FIRST_HALF_LAST_DAY
from ..model import PayPeriodSettings
from .base import CadenceStrategy


def _month_start(reference: date, months: int) -> date:
    return reference.replace(day=1) + relativedelta(months=months)


def _month_end(month_start: date) -> date:
    return month_start + relativedelta(day=31)


class MonthlyStrategy(CadenceStrategy):
    """First to last day of each calendar month."""

    def bounds(self, settings: PayPeriodSettings, reference: date, offset: int) -> tuple[date, date]:
        start = _month_start(reference, offset)
        return start, _month_end(start)


class SemiMonthlyStrategy(CadenceStrategy):
    """1st-15th and 16th-end of month.

    The 15th always belongs to the first half, whichever direction we step.
    """

    def bounds(self, settings: PayPeriodSettings, reference: date, offset: int) -> tuple[date, date]:
        half = 0 if reference.day <= SEMI_MONTHLY_FIRST_HALF_LAST_DAY else 1
        months, half = divmod(half + offset, 2)
        month_start = _month_start(reference, months)
        if half == 0:
            return month_start, month_start.replace(day=SEMI_MONTHLY_FIRST_HALF_LAST_DAY)
        return month_start.replace(day=SEMI_MONTHLY_FIRST_HALF_LAST_DAY + 1), _month_end(month_start)

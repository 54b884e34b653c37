from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, timedelta

from ..model import PayPeriod, PayPeriodSettings


class CadenceStrategy(ABC):
    """Strategy Pattern: how one payroll cadence lays periods on the calendar."""

    @abstractmethod
    def bounds(self, settings: PayPeriodSettings, reference: date, offset: int) -> tuple[date, date]:
        """Start/end of the period ``offset`` steps away from the one containing ``reference``."""
        raise NotImplementedError

    def period(self, settings: PayPeriodSettings, reference: date, offset: int = 0) -> PayPeriod:
        start, end = self.bounds(settings, reference, offset)
        return PayPeriod(start_date=start, end_date=end, pay_date=end + timedelta(days=settings.pay_lag_days))


class SingleDayStrategy(CadenceStrategy):
    """Fallback for unsupported cadences: the reference day is start, end and pay date."""

    def bounds(self, settings: PayPeriodSettings, reference: date, offset: int) -> tuple[date, date]:
        return reference, reference

    def period(self, settings: PayPeriodSettings, reference: date, offset: int = 0) -> PayPeriod:
        return PayPeriod(start_date=reference, end_date=reference, pay_date=reference)

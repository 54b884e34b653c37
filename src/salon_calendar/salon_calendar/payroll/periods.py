from __future__ import annotations

from datetime import date
from typing import Iterator, Optional

from ..core.enums import PayPeriodCadence
from .cadence.factory import CadenceStrategyFactory
from .model import PayPeriod, PayPeriodSettings

_CADENCE_LABELS = {
    PayPeriodCadence.WEEKLY: "Weekly",
    PayPeriodCadence.BI_WEEKLY: "Bi-Weekly",
    PayPeriodCadence.SEMI_MONTHLY: "Semi-Monthly",
    PayPeriodCadence.MONTHLY: "Monthly",
}

_CADENCE_DESCRIPTIONS = {
    PayPeriodCadence.WEEKLY: "Weekly pay schedule (every week)",
    PayPeriodCadence.BI_WEEKLY: "Bi-weekly pay schedule (every 2 weeks)",
    PayPeriodCadence.SEMI_MONTHLY: "Semi-monthly pay schedule (1st-15th and 16th-End of month)",
    PayPeriodCadence.MONTHLY: "Monthly pay schedule (1st-End of month)",
}


class PayPeriodCalculator:
    """Derive pay periods from anchor settings.

    Nothing is stored: each call works from the settings snapshot and the
    reference date it is given, so editing the anchor shifts every period.
    """

    def __init__(self, *, factory: Optional[CadenceStrategyFactory] = None):
        self._factory = factory or CadenceStrategyFactory()

    def upcoming(self, settings: PayPeriodSettings, periods_ahead: int, reference: date) -> PayPeriod:
        """Period ``periods_ahead`` steps from the one containing ``reference`` (negative goes back)."""
        strategy = self._factory.for_cadence(settings.cadence)
        return strategy.period(settings, reference, int(periods_ahead))

    def current(self, settings: PayPeriodSettings, reference: date) -> PayPeriod:
        return self.upcoming(settings, 0, reference)

    def next(self, settings: PayPeriodSettings, reference: date) -> PayPeriod:
        return self.upcoming(settings, 1, reference)

    def previous(self, settings: PayPeriodSettings, reference: date) -> PayPeriod:
        return self.upcoming(settings, -1, reference)

    def iter_periods(self, settings: PayPeriodSettings, reference: date, count: int) -> Iterator[PayPeriod]:
        """``count`` consecutive periods starting with the one containing ``reference``."""
        step = 1 if count >= 0 else -1
        for offset in range(0, count, step):
            yield self.upcoming(settings, offset, reference)


def cadence_label(cadence: Optional[PayPeriodCadence]) -> str:
    return _CADENCE_LABELS.get(cadence, "Custom")


def cadence_description(cadence: Optional[PayPeriodCadence]) -> str:
    return _CADENCE_DESCRIPTIONS.get(cadence, "Custom pay schedule")


def format_pay_period_range(period: PayPeriod) -> str:
    """``"Jan 13 - 26"`` within one month, ``"Jan 27 - Feb 9"`` across months."""
    start, end = period.start_date, period.end_date
    start_month, end_month = start.strftime("%b"), end.strftime("%b")
    if start_month == end_month:
        return f"{start_month} {start.day} - {end.day}"
    return f"{start_month} {start.day} - {end_month} {end.day}"

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...core.enums import PayPeriodCadence
from .base import CadenceStrategy, SingleDayStrategy
from .calendar_month import MonthlyStrategy, SemiMonthlyStrategy
from .fixed_stride import FixedStrideStrategy


@dataclass
class CadenceStrategyFactory:
    """Factory Pattern: choose the period layout for a cadence."""

    def for_cadence(self, cadence: Optional[PayPeriodCadence]) -> CadenceStrategy:
        if cadence == PayPeriodCadence.WEEKLY:
            return FixedStrideStrategy(7)
        if cadence == PayPeriodCadence.BI_WEEKLY:
            return FixedStrideStrategy(14)
        if cadence == PayPeriodCadence.SEMI_MONTHLY:
            return SemiMonthlyStrategy()
        if cadence == PayPeriodCadence.MONTHLY:
            return MonthlyStrategy()
        return SingleDayStrategy()

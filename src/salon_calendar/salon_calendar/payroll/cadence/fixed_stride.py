from __future__ import annotations

from datetime import date, timedelta

from ...common.datetime_utils import days_between
from ..model import PayPeriodSettings
from .base import CadenceStrategy


class FixedStrideStrategy(CadenceStrategy):
    """Weekly / bi-weekly: back-to-back blocks of ``stride_days`` counted from the anchor start."""

    def __init__(self, stride_days: int):
        self.stride_days = int(stride_days)

    def bounds(self, settings: PayPeriodSettings, reference: date, offset: int) -> tuple[date, date]:
        # Floor division keeps dates before the anchor in the right block.
        elapsed = days_between(settings.anchor_start_date, reference) // self.stride_days
        start = settings.anchor_start_date + timedelta(days=(elapsed + offset) * self.stride_days)
        return start, start + timedelta(days=self.stride_days - 1)

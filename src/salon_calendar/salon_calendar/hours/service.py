from __future__ import annotations

from typing import Optional

from ..clock.service import BusinessClock, CalendarInput
from ..core.constants import DEFAULT_SLOT_INTERVAL_MINUTES
from ..core.enums import Weekday
from .clock_time import format_minutes, parse_clock_time
from .model import HoursOfOperation, HoursTable


class BusinessHoursService:
    """Opening hours lookups and bookable start times for one calendar day."""

    def __init__(self, clock: BusinessClock):
        self._clock = clock

    def hours_for_date(self, day: CalendarInput, table: HoursTable) -> Optional[HoursOfOperation]:
        weekday = Weekday.from_index(self._clock.to_business_date(day).weekday())
        for entry in table:
            if entry.day == weekday:
                return entry
        return None

    def slots_for_date(
        self,
        day: CalendarInput,
        table: HoursTable,
        interval_minutes: int = DEFAULT_SLOT_INTERVAL_MINUTES,
    ) -> list[str]:
        """Start times in ``[open, close)`` every ``interval_minutes``.

        Closed or missing days, inverted windows and non-positive intervals
        give an empty list.
        """
        step = int(interval_minutes)
        hours = self.hours_for_date(day, table)
        window = hours.window if hours else None
        if window is None or step <= 0:
            return []

        open_minutes, close_minutes = window
        return [format_minutes(m) for m in range(open_minutes, close_minutes, step)]

    def is_within_hours(self, day: CalendarInput, time_text: str, table: HoursTable) -> bool:
        hours = self.hours_for_date(day, table)
        window = hours.window if hours else None
        parsed = parse_clock_time(time_text)
        if window is None or parsed is None:
            return False

        open_minutes, close_minutes = window
        return open_minutes <= parsed.minutes < close_minutes

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Callable, Union
from zoneinfo import ZoneInfo

from ..common.datetime_utils import as_date, format_iso_date, parse_instant, utc_now
from ..core.exceptions import ValidationError
from ..core.logging import get_logger
from ..hours.clock_time import ClockTime, parse_clock_time
from .provider import TimezoneProvider

Instant = Union[datetime, str]
CalendarInput = Union[date, datetime, str]

logger = get_logger(__name__)


class BusinessClock:
    """Answers "what day/time is it" in the salon's timezone.

    Every conversion goes through the resolved zone; an instant is never
    truncated as UTC, which would put late-evening times in zones behind UTC
    on the following day.
    """

    def __init__(self, provider: TimezoneProvider, *, now: Callable[[], datetime] = utc_now):
        self._provider = provider
        self._now = now

    def timezone_name(self) -> str:
        return self._provider.timezone()

    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name())

    def to_business_datetime(self, instant: Instant) -> datetime:
        return parse_instant(instant).astimezone(self.zone())

    def now(self) -> datetime:
        return self.to_business_datetime(self._now())

    def today(self) -> date:
        return self.now().date()

    def today_string(self) -> str:
        return format_iso_date(self.today())

    def to_business_date(self, value: CalendarInput) -> date:
        """Calendar date in the business zone.

        Datetimes are instants and get converted; plain dates and YYYY-MM-DD
        strings already name a business calendar day.
        """
        if isinstance(value, datetime):
            return self.to_business_datetime(value).date()
        if isinstance(value, str) and len(value.strip()) > 10:
            return self.to_business_datetime(value).date()
        return as_date(value)

    def to_business_date_string(self, instant: Instant) -> str:
        return format_iso_date(self.to_business_datetime(instant).date())

    def is_same_calendar_day(self, a: Instant, b: Instant) -> bool:
        return self.to_business_datetime(a).date() == self.to_business_datetime(b).date()

    def format(self, instant: Instant, fmt: str) -> str:
        return self.to_business_datetime(instant).strftime(fmt)

    def from_business_datetime(self, day: CalendarInput, clock_time: Union[ClockTime, str]) -> datetime:
        """UTC instant for a wall-clock time on a business calendar day.

        An ambiguous time (clocks turned back) resolves to its first
        occurrence. A time skipped by a spring-forward gap is read with the
        pre-transition offset, which lands it after the gap (02:30 becomes
        03:30 on the New York change day).
        """
        if isinstance(clock_time, str):
            parsed = parse_clock_time(clock_time)
            if parsed is None:
                raise ValidationError(f"Unrecognised time of day: {clock_time!r}")
            clock_time = parsed

        zone = self.zone()
        wall = datetime.combine(self.to_business_date(day), time(clock_time.hour, clock_time.minute))
        instant = wall.replace(tzinfo=zone, fold=0).astimezone(timezone.utc)
        if instant.astimezone(zone).replace(tzinfo=None) != wall:
            logger.debug("nonexistent_wall_time", wall=wall.isoformat(), timezone=str(zone))
        return instant

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from ..core.constants import MINUTES_PER_DAY

_TWELVE_HOUR = re.compile(r"^([0-9]{1,2}):([0-9]{2})\s*([AaPp][Mm])$")
_TWENTY_FOUR_HOUR = re.compile(r"^([0-9]{1,2}):([0-9]{2})$")


@dataclass(frozen=True, order=True)
class ClockTime:
    """Time of day as minutes since midnight, always in ``[0, 1440)``.

    Build it with ``parse_clock_time`` (text from settings or forms) or
    ``ClockTime.from_minutes`` (arithmetic results, wrapped around midnight).
    """

    minutes: int

    def __post_init__(self) -> None:
        if not 0 <= self.minutes < MINUTES_PER_DAY:
            raise ValueError(f"ClockTime out of range: {self.minutes!r}")

    @classmethod
    def from_minutes(cls, minutes: int) -> "ClockTime":
        return cls(normalize_minutes(minutes))

    @property
    def hour(self) -> int:
        return self.minutes // 60

    @property
    def minute(self) -> int:
        return self.minutes % 60

    def to_24h(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    def label(self) -> str:
        return format_minutes(self.minutes)

    def __str__(self) -> str:
        return self.label()


def normalize_minutes(minutes: int) -> int:
    return ((int(minutes) % MINUTES_PER_DAY) + MINUTES_PER_DAY) % MINUTES_PER_DAY


def parse_clock_time(text: Optional[str]) -> Optional[ClockTime]:
    """Parse ``"HH:MM"`` or ``"H:MM AM/PM"``; anything else gives ``None``.

    Hours outside 0-23 (24-hour form) or 1-12 (12-hour form) and minutes
    above 59 are rejected rather than wrapped.
    """

    if not text or not isinstance(text, str):
        return None
    trimmed = text.strip()

    match = _TWELVE_HOUR.match(trimmed)
    if match:
        hours, minutes = int(match.group(1)), int(match.group(2))
        if not 1 <= hours <= 12 or minutes > 59:
            return None
        period = match.group(3).upper()
        if period == "PM" and hours < 12:
            hours += 12
        if period == "AM" and hours == 12:
            hours = 0
        return ClockTime(hours * 60 + minutes)

    match = _TWENTY_FOUR_HOUR.match(trimmed)
    if match:
        hours, minutes = int(match.group(1)), int(match.group(2))
        if hours > 23 or minutes > 59:
            return None
        return ClockTime(hours * 60 + minutes)

    return None


def format_minutes(minutes: int) -> str:
    """Render minutes since midnight as ``"H:MM AM/PM"``, wrapping out-of-range input."""
    total = normalize_minutes(minutes)
    hours24, mins = divmod(total, 60)
    period = "PM" if hours24 >= 12 else "AM"
    hour12 = hours24 % 12 or 12
    return f"{hour12}:{mins:02d} {period}"


def format_time_label(text: str) -> str:
    """12-hour label for a stored time string; unparseable text is returned as-is."""
    parsed = parse_clock_time(text)
    if parsed is None:
        return text
    return parsed.label()

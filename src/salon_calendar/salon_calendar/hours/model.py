from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..core.enums import Weekday
from ..core.exceptions import ValidationError
from .clock_time import ClockTime, parse_clock_time


@dataclass(frozen=True)
class HoursOfOperation:
    """One weekday row of the salon's weekly hours table.

    ``open_time``/``close_time`` are ``None`` when the stored text could not be
    parsed; such a row is never bookable.
    """

    day: Weekday
    is_open: bool
    open_time: Optional[ClockTime]
    close_time: Optional[ClockTime]

    @property
    def window(self) -> Optional[tuple[int, int]]:
        """``(open, close)`` minutes for an open, well-formed row, else ``None``."""
        if not self.is_open or self.open_time is None or self.close_time is None:
            return None
        if self.open_time >= self.close_time:
            return None
        return self.open_time.minutes, self.close_time.minutes

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "HoursOfOperation":
        try:
            day = Weekday(raw.get("day"))
        except ValueError:
            raise ValidationError(f"Unknown weekday: {raw.get('day')!r}") from None

        return cls(
            day=day,
            is_open=bool(raw.get("isOpen", False)),
            open_time=parse_clock_time(raw.get("openTime")),
            close_time=parse_clock_time(raw.get("closeTime")),
        )

    def to_dict(self) -> dict:
        return {
            "day": self.day.value,
            "isOpen": self.is_open,
            "openTime": self.open_time.to_24h() if self.open_time else "",
            "closeTime": self.close_time.to_24h() if self.close_time else "",
        }


HoursTable = Sequence[HoursOfOperation]


def _row(day: Weekday, is_open: bool, open_text: str, close_text: str) -> HoursOfOperation:
    return HoursOfOperation(day, is_open, parse_clock_time(open_text), parse_clock_time(close_text))


DEFAULT_HOURS_OF_OPERATION: tuple[HoursOfOperation, ...] = (
    _row(Weekday.MONDAY, True, "09:00", "17:00"),
    _row(Weekday.TUESDAY, True, "09:00", "17:00"),
    _row(Weekday.WEDNESDAY, True, "09:00", "17:00"),
    _row(Weekday.THURSDAY, True, "09:00", "17:00"),
    _row(Weekday.FRIDAY, True, "09:00", "17:00"),
    _row(Weekday.SATURDAY, True, "10:00", "16:00"),
    _row(Weekday.SUNDAY, False, "09:00", "17:00"),
)


def hours_table_from_dicts(rows: Iterable[Mapping[str, Any]]) -> tuple[HoursOfOperation, ...]:
    """Build a table from persisted rows; rows naming an unknown day are dropped.

    The first row for a weekday wins. A dropped or absent weekday reads as closed.
    """

    table: list[HoursOfOperation] = []
    seen: set[Weekday] = set()
    for raw in rows:
        if not isinstance(raw, Mapping):
            continue
        try:
            entry = HoursOfOperation.from_dict(raw)
        except ValidationError:
            continue
        if entry.day in seen:
            continue
        seen.add(entry.day)
        table.append(entry)
    return tuple(table)

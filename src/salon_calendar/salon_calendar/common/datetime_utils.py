from __future__ import annotations

from datetime import date, datetime, timezone

from ..core.constants import DISPLAY_DATE_FORMAT, ISO_DATE_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def as_date(value: date | str) -> date:
    """Accept a ``date`` (or ``datetime``, keeping its wall date) or a YYYY-MM-DD string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(value)


def parse_instant(value: datetime | str) -> datetime:
    """Return an aware datetime for an absolute instant.

    Naive datetimes (and ISO strings without an offset) are taken as UTC.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def days_between(start: date, end: date) -> int:
    return (end - start).days


def format_date_for_display(value: str) -> str:
    """Format YYYY-MM-DD as the MM-DD-YYYY display format ('' stays '')."""
    if not value:
        return ""
    return parse_iso_date(value).strftime(DISPLAY_DATE_FORMAT)


def utc_now() -> datetime:
    """Current UTC instant.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)

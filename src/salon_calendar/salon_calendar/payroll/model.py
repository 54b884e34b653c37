from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..core.constants import DEFAULT_ANCHOR_END_DATE, DEFAULT_ANCHOR_PAY_DATE, DEFAULT_ANCHOR_START_DATE
from ..core.enums import PayPeriodCadence
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class PayPeriodSettings:
    """Anchor period every later (and earlier) period is derived from.

    ``cadence`` is ``None`` when the stored type is not one we support; the
    calculator then returns a single-day period.
    """

    cadence: Optional[PayPeriodCadence]
    anchor_start_date: date
    anchor_end_date: date
    anchor_pay_date: date

    @property
    def pay_lag_days(self) -> int:
        return (self.anchor_pay_date - self.anchor_end_date).days

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "PayPeriodSettings":
        try:
            start = parse_iso_date(str(raw["anchorStartDate"]))
            end = parse_iso_date(str(raw["anchorEndDate"]))
            pay = parse_iso_date(str(raw["anchorPayDate"]))
        except (KeyError, ValueError) as e:
            raise ValidationError(f"Invalid pay period anchor: {e}") from None

        if not start <= end < pay:
            raise ValidationError("Pay period anchors must satisfy start <= end < pay")

        try:
            cadence: Optional[PayPeriodCadence] = PayPeriodCadence(raw.get("type"))
        except ValueError:
            cadence = None

        return cls(cadence=cadence, anchor_start_date=start, anchor_end_date=end, anchor_pay_date=pay)

    def to_dict(self) -> dict:
        return {
            "type": self.cadence.value if self.cadence else None,
            "anchorStartDate": format_iso_date(self.anchor_start_date),
            "anchorEndDate": format_iso_date(self.anchor_end_date),
            "anchorPayDate": format_iso_date(self.anchor_pay_date),
        }


DEFAULT_PAY_PERIOD_SETTINGS = PayPeriodSettings(
    cadence=PayPeriodCadence.BI_WEEKLY,
    anchor_start_date=parse_iso_date(DEFAULT_ANCHOR_START_DATE),
    anchor_end_date=parse_iso_date(DEFAULT_ANCHOR_END_DATE),
    anchor_pay_date=parse_iso_date(DEFAULT_ANCHOR_PAY_DATE),
)


@dataclass(frozen=True)
class PayPeriod:
    start_date: date
    end_date: date
    pay_date: date

    def contains(self, day: date) -> bool:
        return self.start_date <= day <= self.end_date

    def to_dict(self) -> dict:
        return {
            "startDate": format_iso_date(self.start_date),
            "endDate": format_iso_date(self.end_date),
            "payDate": format_iso_date(self.pay_date),
        }


@dataclass(frozen=True)
class StaffCompensation:
    """Compensation plan; only the rate fields its type needs are meaningful.

    ``type`` stays a plain string so unrecognised plans read from storage pay 0
    instead of failing to load.
    """

    type: str
    hourly_rate: Optional[float] = None
    salary_amount: Optional[float] = None
    commission_rate: Optional[float] = None
    override_staff_id: Optional[str] = None
    override_percentage: Optional[float] = None
    guaranteed_amount: Optional[float] = None
    use_higher_amount: bool = False

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "StaffCompensation":
        return cls(
            type=str(raw.get("type") or ""),
            hourly_rate=_number(raw.get("hourlyRate")),
            salary_amount=_number(raw.get("salaryAmount")),
            commission_rate=_number(raw.get("commissionRate")),
            override_staff_id=raw.get("overrideStaffId"),
            override_percentage=_number(raw.get("overridePercentage")),
            guaranteed_amount=_number(raw.get("guaranteedAmount")),
            use_higher_amount=bool(raw.get("useHigherAmount", False)),
        )


def _number(value: Any) -> Optional[float]:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None

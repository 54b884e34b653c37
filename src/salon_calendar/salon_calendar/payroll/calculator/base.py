from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..model import StaffCompensation


class CompensationCalculator(ABC):
    """Calculator interface (Strategy Pattern for staff pay)."""

    @abstractmethod
    def pay(
        self,
        plan: StaffCompensation,
        hours_worked: float,
        commissionable_amount: float,
        override_amount: Optional[float] = None,
    ) -> float:
        raise NotImplementedError

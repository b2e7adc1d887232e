from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...attendance.model import AttendanceDay
from ...core.enums import AttendanceStatus


@dataclass(frozen=True)
class ViolationCharge:
    full_days: float = 0.0
    fine_days: float = 0.0

    @property
    def total(self) -> float:
        return self.full_days + self.fine_days


class DeductionCalculator(ABC):
    """Calculator interface (Strategy Pattern for salary deductions)."""

    @abstractmethod
    def violation_charge(self, violation_number: int, violation_minutes: int) -> ViolationCharge:
        """Charge for the `violation_number`-th (1-based) violation of the month."""
        raise NotImplementedError

    @abstractmethod
    def missing_punch_days(self, day: AttendanceDay) -> float:
        raise NotImplementedError

    @abstractmethod
    def status_days(self, status: Optional[AttendanceStatus]) -> float:
        raise NotImplementedError

    @abstractmethod
    def per_day_rate(self, monthly_salary: float, days_in_month: int) -> float:
        raise NotImplementedError

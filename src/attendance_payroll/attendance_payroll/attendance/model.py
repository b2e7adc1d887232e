from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import AttendanceStatus, DayCategory, Tone


@dataclass(frozen=True)
class AttendanceEntry:
    """Stored row: punches and HR annotations for one employee on one date.

    `status` is kept raw (may be an abbreviation or empty); `late_excused` and
    `early_excused` are None when the row predates the split excusal flags.
    """

    emp_code: str
    work_date: str
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    status: Optional[str] = None
    shift: Optional[str] = None
    reason: Optional[str] = None
    excused: bool = False
    late_excused: Optional[bool] = None
    early_excused: Optional[bool] = None


@dataclass(frozen=True)
class AttendanceDay:
    """Domain value: one evaluated attendance day of an employee-month."""

    date: str
    status: Optional[AttendanceStatus]
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    late: bool = False
    early_leave: bool = False
    excused: bool = False
    late_excused: Optional[bool] = None
    early_excused: Optional[bool] = None
    reason: str = ""
    shift: str = ""
    late_minutes: int = 0
    early_minutes: int = 0
    weekend_off: bool = False
    is_future: bool = False

    @property
    def punch_count(self) -> int:
        return int(self.check_in is not None) + int(self.check_out is not None)

    @property
    def has_both_punches(self) -> bool:
        return self.punch_count == 2

    @property
    def is_partial_punch(self) -> bool:
        return self.punch_count == 1

    @property
    def violation_minutes(self) -> int:
        return self.late_minutes + self.early_minutes


@dataclass(frozen=True)
class ResolvedExcusal:
    """Effective excusal of the late and early conditions of one day."""

    late: bool
    early: bool

    @property
    def any(self) -> bool:
        return self.late or self.early


@dataclass(frozen=True)
class Classification:
    category: DayCategory
    tone: Tone
    leave_kind: Optional[AttendanceStatus] = None

    @property
    def has_late_violation(self) -> bool:
        return self.category in (DayCategory.LATE_ONLY, DayCategory.LATE_AND_EARLY)

    @property
    def has_early_violation(self) -> bool:
        return self.category in (DayCategory.EARLY_ONLY, DayCategory.LATE_AND_EARLY)

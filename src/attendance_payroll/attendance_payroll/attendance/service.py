from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from ..common.datetime_utils import parse_hhmm, parse_iso_date
from ..common.validators import require_non_empty
from ..core.constants import NIGHT_CHECKOUT_ROLLOVER_HOUR
from ..core.enums import AttendanceStatus, SaturdayPolicy
from ..core.exceptions import NotFoundError, ValidationError
from ..core.logging import get_logger
from ..employees.repository import EmployeeRepository
from ..leaves.service import PaidLeaveService
from ..shifts.model import Shift
from ..shifts.repository import ShiftRepository
from ..shifts.service import ShiftCatalog
from .model import AttendanceEntry
from .repository import AttendanceRepository
from .rules import compute_late_early
from .status import normalize_status
from .weekend import is_weekend_off

logger = get_logger(__name__)


@dataclass(frozen=True)
class DayCorrection:
    """One HR edit of an employee-day, as received from the monthly sheet."""

    emp_code: str
    date: str
    status: Optional[str] = None
    reason: Optional[str] = None
    check_in_time: Optional[str] = None
    check_out_time: Optional[str] = None
    late_excused: Optional[bool] = None
    early_excused: Optional[bool] = None
    violation_excused: Optional[bool] = None


def _punch(work_date: date, hhmm: Optional[str], *, next_day: bool = False) -> Optional[datetime]:
    if not hhmm or not str(hhmm).strip():
        return None
    t = parse_hhmm(str(hhmm))
    d = work_date + timedelta(days=1) if next_day else work_date
    return datetime.combine(d, t)


def _resolve_flag(explicit: Optional[bool], legacy: Optional[bool], violation: bool) -> bool:
    if explicit is not None:
        return bool(explicit)
    if legacy is not None:
        return bool(legacy) and violation
    return False


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        *,
        leaves: Optional[PaidLeaveService] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._shifts = shifts
        self._leaves = leaves

    def update_day(self, correction: DayCorrection) -> AttendanceEntry:
        """Replace the stored record of one employee-day with an HR correction.

        Punch times are HH:MM in company-local time. On a shift crossing midnight,
        a check-out before 08:00 belongs to the following calendar day.
        """
        emp_code = require_non_empty(correction.emp_code, "empCode")
        work_date_str = require_non_empty(correction.date, "date")
        work_date = parse_iso_date(work_date_str)

        employee = self._employees.get_by_code(emp_code)
        if not employee:
            raise NotFoundError(f"Employee {emp_code} not found")

        catalog = ShiftCatalog.load(self._shifts)
        shift, shift_code = catalog.resolve(shift_id=employee.shift_id, employee_shift=employee.shift_code)

        check_in = _punch(work_date, correction.check_in_time)
        check_out = _punch(work_date, correction.check_out_time)
        if check_out is not None and _rolls_over(shift, check_out):
            check_out = check_out + timedelta(days=1)

        flags = compute_late_early(shift, check_in, check_out)
        partial = (check_in is None) != (check_out is None)
        early_condition = flags.early_leave or partial

        late_excused = _resolve_flag(correction.late_excused, correction.violation_excused, flags.late)
        early_excused = _resolve_flag(correction.early_excused, correction.violation_excused, early_condition)

        has_punch = check_in is not None or check_out is not None
        raw_status = (correction.status or "").strip() or ("Present" if has_punch else "Absent")
        policies = self._employees.department_policies()
        weekend_off = is_weekend_off(
            work_date,
            group=employee.saturday_group,
            policy=policies.get((employee.department or "").strip().lower(), SaturdayPolicy.ALTERNATE),
        )
        status = normalize_status(raw_status, weekend_off=weekend_off)
        if status is None:
            raise ValidationError(f"Unknown attendance status {raw_status!r}")

        if status == AttendanceStatus.PAID_LEAVE and self._leaves is not None:
            existing = self._attendance.get_for_employee_and_date(emp_code, work_date_str)
            if existing is None or normalize_status(existing.status) != AttendanceStatus.PAID_LEAVE:
                self._leaves.ensure_available(emp_code, work_date_str)

        entry = AttendanceEntry(
            emp_code=emp_code,
            work_date=work_date_str,
            check_in=check_in,
            check_out=check_out,
            status=status.value,
            shift=shift_code,
            reason=(correction.reason or "").strip(),
            excused=late_excused or early_excused,
            late_excused=late_excused,
            early_excused=early_excused,
        )
        self._attendance.replace_entry(entry)

        logger.info(
            "Attendance updated emp=%s date=%s status=%s late=%s early=%s",
            emp_code,
            work_date_str,
            status.value,
            flags.late,
            early_condition,
        )
        return entry


def _rolls_over(shift: Optional[Shift], check_out: datetime) -> bool:
    return bool(shift and shift.crosses_midnight and check_out.hour < NIGHT_CHECKOUT_ROLLOVER_HOUR)

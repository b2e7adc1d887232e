from __future__ import annotations

from collections import defaultdict
from typing import Iterable, Optional

from ..attendance.model import AttendanceEntry
from ..attendance.repository import AttendanceRepository
from ..attendance.status import normalize_status
from ..core.constants import LEAVES_PER_QUARTER
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..core.logging import get_logger
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import PaidLeaveQuarterRecord, PaidLeaveYear
from .quarters import QUARTERS, carry_source, quarter_label, quarter_of
from .repository import LeaveAllocationRepository

logger = get_logger(__name__)


def _paid_leave_dates(entries: Iterable[AttendanceEntry]) -> dict[str, list[str]]:
    by_emp: dict[str, list[str]] = defaultdict(list)
    for e in entries:
        if normalize_status(e.status) == AttendanceStatus.PAID_LEAVE:
            by_emp[e.emp_code].append(e.work_date)
    return by_emp


class PaidLeaveService:
    """Quarterly paid leave balances, derived from Paid Leave attendance days."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        allocations: LeaveAllocationRepository,
        employees: EmployeeRepository,
        *,
        leaves_per_quarter: int = LEAVES_PER_QUARTER,
    ):
        self._attendance = attendance
        self._allocations = allocations
        self._employees = employees
        self._per_quarter = int(leaves_per_quarter)

    def _build_year(self, emp_code: str, year: int, dates: Iterable[str], employee: Optional[Employee] = None) -> PaidLeaveYear:
        by_quarter: dict[int, list[str]] = defaultdict(list)
        for d in sorted(set(dates)):
            y, q = quarter_of(d)
            if y == year:
                by_quarter[q].append(d)

        overrides = self._allocations.base_allocations(emp_code, year)
        records: dict[int, PaidLeaveQuarterRecord] = {}
        for q in QUARTERS:
            allocated = int(overrides.get(q, self._per_quarter))
            source = carry_source(q)
            if source is not None:
                allocated += records[source].remaining
            records[q] = PaidLeaveQuarterRecord(quarter=q, allocated=allocated, dates=tuple(by_quarter.get(q, ())))

        return PaidLeaveYear(
            emp_code=emp_code,
            year=year,
            quarters=tuple(records[q] for q in QUARTERS),
            employee_name=employee.name if employee else "",
            department=employee.department if employee else "",
            designation=employee.designation if employee else "",
            leaves_per_quarter=self._per_quarter,
        )

    def year_summary(self, emp_code: str, year: int) -> PaidLeaveYear:
        employee = self._employees.get_by_code(emp_code)
        entries = self._attendance.list_between(
            start_date=f"{year:04d}-01-01",
            end_date=f"{year:04d}-12-31",
            emp_code=emp_code,
        )
        dates = _paid_leave_dates(entries).get(emp_code, [])
        return self._build_year(emp_code, year, dates, employee)

    def list_year(self, year: int, *, emp_code: Optional[str] = None) -> list[PaidLeaveYear]:
        if emp_code:
            if not self._employees.get_by_code(emp_code):
                raise NotFoundError(f"Employee {emp_code} not found")
            return [self.year_summary(emp_code, year)]

        entries = self._attendance.list_between(start_date=f"{year:04d}-01-01", end_date=f"{year:04d}-12-31")
        by_emp = _paid_leave_dates(entries)
        employees = sorted(self._employees.list_all(), key=lambda e: e.emp_code)
        return [self._build_year(e.emp_code, year, by_emp.get(e.emp_code, []), e) for e in employees]

    def ensure_available(self, emp_code: str, work_date: str) -> None:
        """Raise ValidationError when the quarter of `work_date` has no paid leave left."""
        year, quarter = quarter_of(work_date)
        record = self.year_summary(emp_code, year).quarter(quarter)
        if record.remaining <= 0:
            logger.info("Paid leave refused for %s on %s: quota of %d used", emp_code, work_date, record.allocated)
            raise ValidationError(
                f"No paid leave remaining for {quarter_label(year, quarter)} "
                f"({record.taken}/{record.allocated} used)"
            )

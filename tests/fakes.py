from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Mapping, Optional, Sequence

from src.attendance_payroll.attendance_payroll.attendance.model import AttendanceEntry
from src.attendance_payroll.attendance_payroll.core.enums import SaturdayPolicy
from src.attendance_payroll.attendance_payroll.employees.model import Employee
from src.attendance_payroll.attendance_payroll.payroll.policy import ViolationRules
from src.attendance_payroll.attendance_payroll.shifts.model import Shift

DAY_SHIFT = Shift(shift_id=1, code="D1", name="Day", start_time=time(9, 0), end_time=time(18, 0), grace_minutes=15)
NIGHT_SHIFT = Shift(
    shift_id=2,
    code="S2",
    name="Night",
    start_time=time(21, 0),
    end_time=time(6, 0),
    grace_minutes=15,
    crosses_midnight=True,
)


@dataclass
class InMemoryEmployees:
    employees: dict[str, Employee]
    policies: dict[str, SaturdayPolicy] = field(default_factory=dict)

    def list_all(self) -> Sequence[Employee]:
        return list(self.employees.values())

    def get_by_code(self, emp_code: str) -> Optional[Employee]:
        return self.employees.get(emp_code)

    def department_policies(self) -> Mapping[str, SaturdayPolicy]:
        return dict(self.policies)


@dataclass
class InMemoryShifts:
    shifts: list[Shift] = field(default_factory=lambda: [DAY_SHIFT, NIGHT_SHIFT])

    def list_active(self) -> Sequence[Shift]:
        return [s for s in self.shifts if s.is_active]


class InMemoryAttendance:
    def __init__(self, entries: Sequence[AttendanceEntry] = ()):
        self._by_key: dict[tuple[str, str], AttendanceEntry] = {}
        for e in entries:
            self._by_key[(e.emp_code, e.work_date)] = e

    def list_between(self, *, start_date: str, end_date: str, emp_code: Optional[str] = None):
        items = [
            e
            for e in self._by_key.values()
            if start_date <= e.work_date <= end_date and (emp_code is None or e.emp_code == emp_code)
        ]
        return sorted(items, key=lambda e: (e.emp_code, e.work_date))

    def get_for_employee_and_date(self, emp_code: str, work_date: str) -> Optional[AttendanceEntry]:
        return self._by_key.get((emp_code, work_date))

    def replace_entry(self, entry: AttendanceEntry) -> None:
        self._by_key[(entry.emp_code, entry.work_date)] = entry


@dataclass
class InMemoryRules:
    rules: Optional[ViolationRules] = None

    def get_active(self) -> Optional[ViolationRules]:
        return self.rules


@dataclass
class InMemoryAllocations:
    overrides: dict[tuple[str, int], dict[int, int]] = field(default_factory=dict)

    def base_allocations(self, emp_code: str, year: int) -> Mapping[int, int]:
        return self.overrides.get((emp_code, year), {})


def entry(emp_code: str, work_date: str, check_in: Optional[str] = None, check_out: Optional[str] = None, **kw) -> AttendanceEntry:
    """Build a stored row; punch times are 'HH:MM' on `work_date` or full 'YYYY-MM-DD HH:MM'."""

    def _dt(value: Optional[str]) -> Optional[datetime]:
        if value is None:
            return None
        if len(value) == 5:
            value = f"{work_date} {value}"
        return datetime.strptime(value, "%Y-%m-%d %H:%M")

    return AttendanceEntry(emp_code=emp_code, work_date=work_date, check_in=_dt(check_in), check_out=_dt(check_out), **kw)

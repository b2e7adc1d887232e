from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import replace
from datetime import date, datetime, time, timedelta
from typing import Mapping, Optional

from ..attendance.builder import build_day
from ..attendance.gate import is_upcoming_day
from ..attendance.model import AttendanceEntry
from ..attendance.repository import AttendanceRepository
from ..attendance.weekend import is_weekend_off
from ..common.datetime_utils import days_in_month, month_dates, parse_month
from ..core.constants import DAY_CUTOFF, SUSPICIOUS_DEDUCTION_DAYS
from ..core.enums import SaturdayPolicy
from ..core.exceptions import NotFoundError
from ..core.logging import get_logger
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..shifts.repository import ShiftRepository
from ..shifts.service import ShiftCatalog
from .aggregator import MonthlyAggregator
from .calculator.base import DeductionCalculator
from .calculator.standard_calculator import StandardDeductionCalculator
from .model import MonthlyEmployeeRecord, MonthlyReport
from .rules_repository import ViolationRulesRepository

logger = get_logger(__name__)

_DIGITS_RE = re.compile(r"(\d+)")


def _natural_key(value: str) -> tuple:
    return tuple((0, int(p), "") if p.isdigit() else (1, 0, p.lower()) for p in _DIGITS_RE.split(value or "") if p)


def _sort_key(record: MonthlyEmployeeRecord) -> tuple:
    return ((record.department or "").lower(), _natural_key(record.emp_code))


class MonthlyAttendanceService:
    """Builds the HR monthly attendance sheet with per-employee salary deductions."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        shifts: ShiftRepository,
        rules: Optional[ViolationRulesRepository] = None,
        *,
        calculator: Optional[DeductionCalculator] = None,
        cutoff: time = DAY_CUTOFF,
    ):
        self._attendance = attendance
        self._employees = employees
        self._shifts = shifts
        self._rules = rules
        self._calculator = calculator
        self._cutoff = cutoff

    def _aggregator(self) -> MonthlyAggregator:
        calculator = self._calculator
        if calculator is None:
            active = self._rules.get_active() if self._rules else None
            calculator = StandardDeductionCalculator(active)
        return MonthlyAggregator(calculator, cutoff=self._cutoff)

    def build_month(self, month: str, *, now: datetime, emp_code: Optional[str] = None) -> MonthlyReport:
        year, mon = parse_month(month)
        dates = month_dates(year, mon)

        if emp_code:
            employee = self._employees.get_by_code(emp_code)
            if not employee:
                raise NotFoundError(f"Employee {emp_code} not found")
            employees = [employee]
        else:
            employees = list(self._employees.list_all())

        # One extra day so a night shift on the last day can find its check-out.
        next_day = (date(year, mon, len(dates)) + timedelta(days=1)).strftime("%Y-%m-%d")
        entries = self._attendance.list_between(start_date=dates[0], end_date=next_day, emp_code=emp_code)
        by_emp: dict[str, dict[str, AttendanceEntry]] = defaultdict(dict)
        for e in entries:
            by_emp[e.emp_code][e.work_date] = e

        catalog = ShiftCatalog.load(self._shifts)
        policies = self._employees.department_policies()
        aggregator = self._aggregator()

        records = [
            self._build_employee(
                emp,
                month=month,
                dates=dates,
                next_day=next_day,
                entries=by_emp.get(emp.emp_code, {}),
                catalog=catalog,
                policies=policies,
                aggregator=aggregator,
                now=now,
            )
            for emp in employees
        ]
        records.sort(key=_sort_key)

        logger.debug("Built monthly attendance for %s: %d employees", month, len(records))
        return MonthlyReport(month=month, days_in_month=days_in_month(year, mon), employees=records)

    def _build_employee(
        self,
        emp: Employee,
        *,
        month: str,
        dates: list[str],
        next_day: str,
        entries: Mapping[str, AttendanceEntry],
        catalog: ShiftCatalog,
        policies: Mapping[str, SaturdayPolicy],
        aggregator: MonthlyAggregator,
        now: datetime,
    ) -> MonthlyEmployeeRecord:
        policy = policies.get((emp.department or "").strip().lower(), SaturdayPolicy.ALTERNATE)
        all_dates = dates + [next_day]

        days = []
        borrowed_from: set[str] = set()
        for i, work_date in enumerate(dates):
            entry = entries.get(work_date)
            if work_date in borrowed_from and entry is not None:
                entry = replace(entry, check_out=None)

            next_entry = entries.get(all_dates[i + 1])
            shift, shift_code = catalog.resolve(
                shift_id=emp.shift_id,
                employee_shift=emp.shift_code,
                record_shift=entry.shift if entry else None,
            )
            d = date.fromisoformat(work_date)
            day = build_day(
                entry,
                work_date=work_date,
                shift=shift,
                shift_code=shift_code,
                weekend_off=is_weekend_off(d, group=emp.saturday_group, policy=policy),
                next_entry=next_entry,
                is_future=is_upcoming_day(work_date, month, now=now, cutoff=self._cutoff),
            )
            if (
                entry is not None
                and entry.check_out is None
                and day.check_out is not None
                and next_entry is not None
                and next_entry.check_in is None
            ):
                # The next row only held this night's check-out.
                borrowed_from.add(all_dates[i + 1])
            days.append(day)

        totals = aggregator.aggregate(
            days,
            month=month,
            monthly_salary=emp.monthly_salary,
            now=now,
            days_in_month=len(dates),
        )
        if totals.salary_deduct_days > SUSPICIOUS_DEDUCTION_DAYS:
            logger.warning(
                "Employee %s has %.3f deduction days in %s", emp.emp_code, totals.salary_deduct_days, month
            )

        first_shift = next((d.shift for d in days if d.shift), "")
        return MonthlyEmployeeRecord(
            emp_code=emp.emp_code,
            name=emp.name,
            department=emp.department,
            designation=emp.designation,
            shift=first_shift or emp.shift_code,
            shift_id=emp.shift_id,
            monthly_salary=emp.monthly_salary,
            totals=totals,
            days=days,
        )

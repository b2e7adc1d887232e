from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from functools import partial
from typing import Callable, Optional

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .common.datetime_utils import now_local, parse_offset
from .core.constants import DAY_CUTOFF, DEFAULT_GRACE_MINUTES, DEFAULT_TIMEZONE_OFFSET, LEAVES_PER_QUARTER
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .leaves.mysql_leave_allocation_repository import MySQLLeaveAllocationRepository
from .leaves.repository import LeaveAllocationRepository
from .leaves.service import PaidLeaveService
from .payroll.rules_repository import MySQLViolationRulesRepository, ViolationRulesRepository
from .payroll.service import MonthlyAttendanceService
from .shifts.mysql_shift_repository import MySQLShiftRepository
from .shifts.repository import ShiftRepository


@dataclass(frozen=True)
class Container:
    employees_repo: EmployeeRepository
    shifts_repo: ShiftRepository
    attendance_repo: AttendanceRepository
    rules_repo: ViolationRulesRepository
    allocations_repo: LeaveAllocationRepository

    attendance_service: AttendanceService
    monthly_attendance_service: MonthlyAttendanceService
    paid_leave_service: PaidLeaveService

    # Current company-local wall-clock time (naive).
    clock: Callable[[], datetime]
    conn: Optional[DatabaseConnection] = None


def build_services(
    *,
    employees_repo: EmployeeRepository,
    shifts_repo: ShiftRepository,
    attendance_repo: AttendanceRepository,
    rules_repo: ViolationRulesRepository,
    allocations_repo: LeaveAllocationRepository,
    clock: Callable[[], datetime],
    day_cutoff: time = DAY_CUTOFF,
    leaves_per_quarter: int = LEAVES_PER_QUARTER,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    paid_leave_service = PaidLeaveService(
        attendance_repo,
        allocations_repo,
        employees_repo,
        leaves_per_quarter=leaves_per_quarter,
    )
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        shifts_repo,
        leaves=paid_leave_service,
    )
    monthly_attendance_service = MonthlyAttendanceService(
        attendance_repo,
        employees_repo,
        shifts_repo,
        rules_repo,
        cutoff=day_cutoff,
    )

    return Container(
        employees_repo=employees_repo,
        shifts_repo=shifts_repo,
        attendance_repo=attendance_repo,
        rules_repo=rules_repo,
        allocations_repo=allocations_repo,
        attendance_service=attendance_service,
        monthly_attendance_service=monthly_attendance_service,
        paid_leave_service=paid_leave_service,
        clock=clock,
        conn=conn,
    )


def build_container(
    *,
    db_config: dict,
    timezone_offset: str = DEFAULT_TIMEZONE_OFFSET,
    day_cutoff: time = DAY_CUTOFF,
    leaves_per_quarter: int = LEAVES_PER_QUARTER,
    default_grace_minutes: int = DEFAULT_GRACE_MINUTES,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        shifts_repo=MySQLShiftRepository(conn, default_grace=default_grace_minutes),
        attendance_repo=MySQLAttendanceRepository(conn),
        rules_repo=MySQLViolationRulesRepository(conn),
        allocations_repo=MySQLLeaveAllocationRepository(conn),
        clock=partial(now_local, parse_offset(timezone_offset)),
        day_cutoff=day_cutoff,
        leaves_per_quarter=leaves_per_quarter,
        conn=conn,
    )

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date, nullable_flag
from .model import AttendanceEntry
from .repository import AttendanceRepository

_COLUMNS = (
    "emp_code, work_date, shift_code, check_in, check_out, attendance_status, "
    "reason, excused, late_excused, early_excused"
)


def _to_entry(r: Dict[str, Any]) -> AttendanceEntry:
    return AttendanceEntry(
        emp_code=str(r["emp_code"]),
        work_date=normalize_mysql_date(r["work_date"]),
        check_in=r.get("check_in"),
        check_out=r.get("check_out"),
        status=r.get("attendance_status"),
        shift=r.get("shift_code"),
        reason=r.get("reason"),
        excused=bool(r.get("excused")),
        late_excused=nullable_flag(r.get("late_excused")),
        early_excused=nullable_flag(r.get("early_excused")),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(
        self,
        *,
        start_date: str,
        end_date: str,
        emp_code: Optional[str] = None,
    ) -> Sequence[AttendanceEntry]:
        clauses = ["work_date BETWEEN %s AND %s"]
        params: list[object] = [start_date, end_date]
        if emp_code is not None:
            clauses.append("emp_code=%s")
            params.append(emp_code)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_days
                WHERE {where}
                ORDER BY emp_code, work_date
                """,
                tuple(params),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def get_for_employee_and_date(self, emp_code: str, work_date: str) -> Optional[AttendanceEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM attendance_days WHERE emp_code=%s AND work_date=%s",
                (emp_code, work_date),
            )
            r = fetchone(cur)
            return _to_entry(r) if r else None

    def replace_entry(self, entry: AttendanceEntry) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_days
                    (emp_code, work_date, shift_code, check_in, check_out, attendance_status,
                     reason, excused, late_excused, early_excused)
                VALUES (%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    shift_code=VALUES(shift_code),
                    check_in=VALUES(check_in),
                    check_out=VALUES(check_out),
                    attendance_status=VALUES(attendance_status),
                    reason=VALUES(reason),
                    excused=VALUES(excused),
                    late_excused=VALUES(late_excused),
                    early_excused=VALUES(early_excused)
                """,
                (
                    entry.emp_code,
                    entry.work_date,
                    entry.shift,
                    entry.check_in,
                    entry.check_out,
                    entry.status,
                    entry.reason,
                    int(bool(entry.excused)),
                    None if entry.late_excused is None else int(entry.late_excused),
                    None if entry.early_excused is None else int(entry.early_excused),
                ),
            )

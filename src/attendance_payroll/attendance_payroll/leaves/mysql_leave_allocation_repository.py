from __future__ import annotations

from typing import Mapping

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import LeaveAllocationRepository


class MySQLLeaveAllocationRepository(LeaveAllocationRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def base_allocations(self, emp_code: str, year: int) -> Mapping[int, int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT quarter, leaves_allocated
                FROM paid_leave_quarters
                WHERE emp_code=%s AND year=%s
                """,
                (emp_code, int(year)),
            )
            rows = fetchall(cur)
        return {int(r["quarter"]): max(int(r["leaves_allocated"]), 0) for r in rows}

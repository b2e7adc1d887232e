from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Sequence

from ..core.enums import SaturdayGroup, SaturdayPolicy
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = "emp_code, name, department, designation, shift_code, shift_id, monthly_salary, saturday_group"


def _to_employee(r: Dict[str, Any]) -> Employee:
    group = (r.get("saturday_group") or "A").upper()
    return Employee(
        emp_code=str(r["emp_code"]),
        name=r.get("name") or "",
        department=r.get("department") or "",
        designation=r.get("designation") or "",
        shift_code=r.get("shift_code") or "",
        shift_id=int(r["shift_id"]) if r.get("shift_id") is not None else None,
        monthly_salary=float(r.get("monthly_salary") or 0),
        saturday_group=SaturdayGroup.B if group == "B" else SaturdayGroup.A,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees")
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_code(self, emp_code: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE emp_code=%s", (emp_code,))
            r = fetchone(cur)
            return _to_employee(r) if r else None

    def department_policies(self) -> Mapping[str, SaturdayPolicy]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT dept_name, saturday_policy FROM departments")
            rows = fetchall(cur)
        policies: dict[str, SaturdayPolicy] = {}
        for r in rows:
            raw = (r.get("saturday_policy") or "").strip().lower()
            policy = SaturdayPolicy.ALL_OFF if raw == SaturdayPolicy.ALL_OFF.value else SaturdayPolicy.ALTERNATE
            policies[str(r["dept_name"]).strip().lower()] = policy
        return policies

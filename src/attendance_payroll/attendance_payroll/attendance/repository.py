from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AttendanceEntry


class AttendanceRepository(Protocol):
    def list_between(
        self,
        *,
        start_date: str,
        end_date: str,
        emp_code: Optional[str] = None,
    ) -> Sequence[AttendanceEntry]:
        raise NotImplementedError

    def get_for_employee_and_date(self, emp_code: str, work_date: str) -> Optional[AttendanceEntry]:
        raise NotImplementedError

    def replace_entry(self, entry: AttendanceEntry) -> None:
        """Insert or overwrite the single row for (emp_code, work_date)."""

        raise NotImplementedError

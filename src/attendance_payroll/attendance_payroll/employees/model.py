from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import SaturdayGroup


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee as seen by attendance and payroll."""

    emp_code: str
    name: str
    department: str = ""
    designation: str = ""
    shift_code: str = ""
    shift_id: Optional[int] = None
    monthly_salary: float = 0.0
    saturday_group: SaturdayGroup = SaturdayGroup.A

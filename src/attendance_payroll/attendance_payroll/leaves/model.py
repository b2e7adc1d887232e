from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PaidLeaveQuarterRecord:
    """Paid leave usage of one employee in one quarter."""

    quarter: int
    allocated: int
    dates: tuple[str, ...] = ()

    @property
    def taken(self) -> int:
        return len(self.dates)

    @property
    def remaining(self) -> int:
        return max(0, self.allocated - self.taken)

    def to_dict(self) -> dict:
        return {
            "taken": self.taken,
            "allocated": self.allocated,
            "remaining": self.remaining,
            "dates": list(self.dates),
        }


@dataclass(frozen=True)
class PaidLeaveYear:
    emp_code: str
    year: int
    quarters: tuple[PaidLeaveQuarterRecord, ...]
    employee_name: str = ""
    department: str = ""
    designation: str = ""
    leaves_per_quarter: int = 6

    def quarter(self, quarter: int) -> PaidLeaveQuarterRecord:
        return self.quarters[quarter - 1]

    def to_dict(self) -> dict:
        out = {
            "empCode": self.emp_code,
            "employeeName": self.employee_name,
            "department": self.department,
            "designation": self.designation,
            "year": self.year,
            "leavesPerQuarter": self.leaves_per_quarter,
        }
        for rec in self.quarters:
            out[f"q{rec.quarter}"] = rec.to_dict()
        out["totalTaken"] = sum(r.taken for r in self.quarters)
        return out

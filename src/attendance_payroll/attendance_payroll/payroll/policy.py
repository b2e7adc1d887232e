"""Deduction policy: how many salary days each violation, absence and leave costs.

One active rule set lives in the `violation_rules` table; the defaults below
apply when none exists.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ViolationConfig:
    free_violations: int = 2
    # Every Nth violation (3rd, 6th, ...) costs one full day.
    milestone_interval: int = 3
    per_minute_rate: float = 0.007
    max_per_minute_fine: float = 1.0


@dataclass(frozen=True)
class AbsentConfig:
    both_missing_days: float = 1.0
    partial_punch_days: float = 1.0
    leave_without_inform_days: float = 1.5


@dataclass(frozen=True)
class LeaveConfig:
    unpaid_leave_days: float = 1.0
    sick_leave_days: float = 1.0
    half_day_days: float = 0.5
    paid_leave_days: float = 0.0


@dataclass(frozen=True)
class SalaryConfig:
    # None: divide by the actual number of days in the month.
    days_per_month: Optional[int] = None


@dataclass(frozen=True)
class ViolationRules:
    violation: ViolationConfig = field(default_factory=ViolationConfig)
    absent: AbsentConfig = field(default_factory=AbsentConfig)
    leave: LeaveConfig = field(default_factory=LeaveConfig)
    salary: SalaryConfig = field(default_factory=SalaryConfig)

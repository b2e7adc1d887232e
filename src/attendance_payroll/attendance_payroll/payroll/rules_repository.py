from __future__ import annotations

from typing import Optional, Protocol

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .policy import AbsentConfig, LeaveConfig, SalaryConfig, ViolationConfig, ViolationRules


class ViolationRulesRepository(Protocol):
    def get_active(self) -> Optional[ViolationRules]:
        raise NotImplementedError


class MySQLViolationRulesRepository(ViolationRulesRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_active(self) -> Optional[ViolationRules]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT free_violations, milestone_interval, per_minute_rate, max_per_minute_fine,
                       both_missing_days, partial_punch_days, leave_without_inform_days,
                       unpaid_leave_days, sick_leave_days, half_day_days, paid_leave_days,
                       days_per_month
                FROM violation_rules
                WHERE is_active=1
                ORDER BY rule_id DESC
                LIMIT 1
                """
            )
            r = fetchone(cur)
        if not r:
            return None

        return ViolationRules(
            violation=ViolationConfig(
                free_violations=int(r["free_violations"]),
                milestone_interval=max(int(r["milestone_interval"]), 1),
                per_minute_rate=float(r["per_minute_rate"]),
                max_per_minute_fine=float(r["max_per_minute_fine"]),
            ),
            absent=AbsentConfig(
                both_missing_days=float(r["both_missing_days"]),
                partial_punch_days=float(r["partial_punch_days"]),
                leave_without_inform_days=float(r["leave_without_inform_days"]),
            ),
            leave=LeaveConfig(
                unpaid_leave_days=float(r["unpaid_leave_days"]),
                sick_leave_days=float(r["sick_leave_days"]),
                half_day_days=float(r["half_day_days"]),
                paid_leave_days=float(r["paid_leave_days"]),
            ),
            salary=SalaryConfig(
                days_per_month=int(r["days_per_month"]) if r.get("days_per_month") is not None else None,
            ),
        )

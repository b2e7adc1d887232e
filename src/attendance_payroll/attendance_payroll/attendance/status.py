"""Attendance status normalization and status families.

Statuses arrive from HR edits and punch-machine imports in many spellings
("P", "present", "UPL", "leave without info", ...). Everything downstream
works on `AttendanceStatus`, so normalize at the edge.
"""

from __future__ import annotations

from typing import Optional

from ..core.enums import AttendanceStatus

_ALIASES: dict[str, AttendanceStatus] = {
    "present": AttendanceStatus.PRESENT,
    "p": AttendanceStatus.PRESENT,
    "holiday": AttendanceStatus.HOLIDAY,
    "h": AttendanceStatus.HOLIDAY,
    "off": AttendanceStatus.HOLIDAY,
    "absent": AttendanceStatus.ABSENT,
    "a": AttendanceStatus.ABSENT,
    "no punch": AttendanceStatus.ABSENT,
    "sick leave": AttendanceStatus.SICK_LEAVE,
    "sl": AttendanceStatus.SICK_LEAVE,
    "paid leave": AttendanceStatus.PAID_LEAVE,
    "pl": AttendanceStatus.PAID_LEAVE,
    "un paid leave": AttendanceStatus.UNPAID_LEAVE,
    "unpaid leave": AttendanceStatus.UNPAID_LEAVE,
    "upl": AttendanceStatus.UNPAID_LEAVE,
    "leave without inform": AttendanceStatus.LEAVE_WITHOUT_INFORM,
    "leave without info": AttendanceStatus.LEAVE_WITHOUT_INFORM,
    "lwi": AttendanceStatus.LEAVE_WITHOUT_INFORM,
    "work from home": AttendanceStatus.WORK_FROM_HOME,
    "wfh": AttendanceStatus.WORK_FROM_HOME,
    "half day": AttendanceStatus.HALF_DAY,
    "half": AttendanceStatus.HALF_DAY,
    "new induction": AttendanceStatus.NEW_INDUCTION,
    "ni": AttendanceStatus.NEW_INDUCTION,
}

_SHORT_CODES = {
    AttendanceStatus.PRESENT: "P",
    AttendanceStatus.HOLIDAY: "H",
    AttendanceStatus.ABSENT: "A",
    AttendanceStatus.SICK_LEAVE: "SL",
    AttendanceStatus.PAID_LEAVE: "PL",
    AttendanceStatus.UNPAID_LEAVE: "UPL",
    AttendanceStatus.LEAVE_WITHOUT_INFORM: "LWI",
    AttendanceStatus.WORK_FROM_HOME: "WFH",
    AttendanceStatus.HALF_DAY: "Half",
    AttendanceStatus.NEW_INDUCTION: "NI",
}

LEAVE_STATUSES = frozenset(
    {
        AttendanceStatus.SICK_LEAVE,
        AttendanceStatus.PAID_LEAVE,
        AttendanceStatus.UNPAID_LEAVE,
        AttendanceStatus.LEAVE_WITHOUT_INFORM,
    }
)

SALARY_AFFECTING_STATUSES = frozenset(
    {
        AttendanceStatus.ABSENT,
        AttendanceStatus.UNPAID_LEAVE,
        AttendanceStatus.LEAVE_WITHOUT_INFORM,
        AttendanceStatus.HALF_DAY,
    }
)

# Statuses on which punches are not judged for lateness or missing punches.
EXEMPT_FROM_PUNCH_RULES = frozenset(
    {
        AttendanceStatus.HOLIDAY,
        AttendanceStatus.PAID_LEAVE,
        AttendanceStatus.UNPAID_LEAVE,
        AttendanceStatus.SICK_LEAVE,
        AttendanceStatus.WORK_FROM_HOME,
    }
)


def normalize_status(raw: Optional[str], *, weekend_off: bool = False) -> Optional[AttendanceStatus]:
    """Map a raw status string to `AttendanceStatus`.

    Empty input means "nothing recorded": Holiday on a weekend day off,
    otherwise Absent. Unknown spellings return None.
    """
    if isinstance(raw, AttendanceStatus):
        return raw

    s = (raw or "").strip()
    if not s:
        return AttendanceStatus.HOLIDAY if weekend_off else AttendanceStatus.ABSENT
    return _ALIASES.get(s.lower())


def status_short_code(status: Optional[AttendanceStatus]) -> str:
    if status is None:
        return "-"
    return _SHORT_CODES.get(status, status.value)


def is_leave_status(status: Optional[AttendanceStatus]) -> bool:
    return status in LEAVE_STATUSES


def affects_salary(status: Optional[AttendanceStatus]) -> bool:
    return status in SALARY_AFFECTING_STATUSES

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.enums import Tone
from .classifier import classify_day
from .excusal import resolve_excusal
from .model import AttendanceDay
from .status import affects_salary, is_leave_status, status_short_code

_CSS_BY_TONE = {
    Tone.SUCCESS: "bg-success",
    Tone.WARNING: "bg-warning text-dark",
    Tone.DANGER: "bg-danger",
    Tone.INFO: "bg-info text-dark",
    Tone.PRIMARY: "bg-primary",
    Tone.SECONDARY: "bg-secondary",
    Tone.DARK: "bg-dark",
    Tone.NEUTRAL: "bg-light text-dark",
}


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat(timespec="seconds") if value else None


def _hhmm(value: Optional[datetime]) -> str:
    return value.strftime("%H:%M") if value else "-"


def css_class_for(tone: Tone) -> str:
    return _CSS_BY_TONE.get(tone, "bg-secondary")


def day_to_dict(day: AttendanceDay) -> dict:
    """JSON shape of one day as consumed by the monthly grid and the Excel export."""
    if day.is_future:
        return {
            "date": day.date,
            "shift": day.shift,
            "status": "",
            "statusShortCode": "-",
            "isLeave": False,
            "affectsSalary": False,
            "reason": "",
            "checkIn": None,
            "checkOut": None,
            "punchText": "-",
            "late": False,
            "earlyLeave": False,
            "lateMinutes": 0,
            "earlyMinutes": 0,
            "excused": False,
            "lateExcused": False,
            "earlyExcused": False,
            "isFuture": True,
            "category": None,
            "tone": Tone.NEUTRAL.value,
            "cssClass": css_class_for(Tone.NEUTRAL),
        }

    excusal = resolve_excusal(day)
    classification = classify_day(day)
    return {
        "date": day.date,
        "shift": day.shift,
        "status": day.status.value if day.status else "",
        "statusShortCode": status_short_code(day.status),
        "isLeave": is_leave_status(day.status),
        "affectsSalary": affects_salary(day.status),
        "reason": day.reason,
        "checkIn": _iso(day.check_in),
        "checkOut": _iso(day.check_out),
        "punchText": f"{_hhmm(day.check_in)} / {_hhmm(day.check_out)}",
        "late": day.late,
        "earlyLeave": day.early_leave,
        "lateMinutes": day.late_minutes,
        "earlyMinutes": day.early_minutes,
        "excused": excusal.any,
        "lateExcused": excusal.late,
        "earlyExcused": excusal.early,
        "isFuture": False,
        "category": classification.category.value,
        "tone": classification.tone.value,
        "cssClass": css_class_for(classification.tone),
    }

from __future__ import annotations

from ...core.enums import AttendanceStatus, DayCategory, Tone
from ..model import AttendanceDay, Classification, ResolvedExcusal
from .base import ClassificationStrategy

_LEAVE_TONES = {
    AttendanceStatus.PAID_LEAVE: Tone.INFO,
    AttendanceStatus.SICK_LEAVE: Tone.INFO,
    AttendanceStatus.UNPAID_LEAVE: Tone.DARK,
}


class NoPunchStrategy(ClassificationStrategy):
    """Neither check-in nor check-out: the status alone decides."""

    def classify(self, day: AttendanceDay, excusal: ResolvedExcusal) -> Classification:
        status = day.status

        if status == AttendanceStatus.WORK_FROM_HOME:
            return Classification(DayCategory.WORK_FROM_HOME, Tone.PRIMARY)
        if status == AttendanceStatus.HOLIDAY:
            return Classification(DayCategory.HOLIDAY, Tone.SECONDARY)
        if status in _LEAVE_TONES:
            return Classification(DayCategory.LEAVE, _LEAVE_TONES[status], leave_kind=status)
        if status == AttendanceStatus.ABSENT:
            return Classification(DayCategory.ABSENT, Tone.DANGER)
        if status == AttendanceStatus.LEAVE_WITHOUT_INFORM:
            return Classification(DayCategory.LEAVE_WITHOUT_INFORM, Tone.DANGER)
        return Classification(DayCategory.UNCLASSIFIED, Tone.NEUTRAL)

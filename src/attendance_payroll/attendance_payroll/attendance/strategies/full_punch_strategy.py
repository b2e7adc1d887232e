from __future__ import annotations

from ...core.enums import DayCategory, Tone
from ..model import AttendanceDay, Classification, ResolvedExcusal
from .base import ClassificationStrategy


class FullPunchStrategy(ClassificationStrategy):
    """Both punches present: only unexcused violations surface."""

    def classify(self, day: AttendanceDay, excusal: ResolvedExcusal) -> Classification:
        has_late = day.late and not excusal.late
        has_early = day.early_leave and not excusal.early

        if has_late and has_early:
            return Classification(DayCategory.LATE_AND_EARLY, Tone.DANGER)
        if has_late:
            return Classification(DayCategory.LATE_ONLY, Tone.WARNING)
        if has_early:
            return Classification(DayCategory.EARLY_ONLY, Tone.WARNING)
        # Fully excused violations read as on time.
        return Classification(DayCategory.ON_TIME, Tone.SUCCESS)

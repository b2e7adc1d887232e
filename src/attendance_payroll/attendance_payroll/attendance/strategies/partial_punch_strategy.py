from __future__ import annotations

from ...core.enums import DayCategory, Tone
from ..model import AttendanceDay, Classification, ResolvedExcusal
from .base import ClassificationStrategy


class PartialPunchStrategy(ClassificationStrategy):
    """Only one punch recorded; treated like an early leave unless excused."""

    def classify(self, day: AttendanceDay, excusal: ResolvedExcusal) -> Classification:
        if excusal.early:
            return Classification(DayCategory.EXCUSED_VIOLATION, Tone.INFO)
        return Classification(DayCategory.PARTIAL_PUNCH, Tone.DANGER)

from __future__ import annotations

from dataclasses import dataclass, field

from .model import AttendanceDay
from .strategies.base import ClassificationStrategy
from .strategies.full_punch_strategy import FullPunchStrategy
from .strategies.no_punch_strategy import NoPunchStrategy
from .strategies.partial_punch_strategy import PartialPunchStrategy


@dataclass
class ClassificationStrategyFactory:
    """Factory Pattern: choose the strategy from the shape of the day's punches."""

    no_punch: ClassificationStrategy = field(default_factory=NoPunchStrategy)
    partial_punch: ClassificationStrategy = field(default_factory=PartialPunchStrategy)
    full_punch: ClassificationStrategy = field(default_factory=FullPunchStrategy)

    def for_day(self, day: AttendanceDay) -> ClassificationStrategy:
        if day.punch_count == 0:
            return self.no_punch
        if day.punch_count == 1:
            return self.partial_punch
        return self.full_punch

from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import AttendanceDay, Classification, ResolvedExcusal


class ClassificationStrategy(ABC):
    """Strategy Pattern: encapsulate how a day is categorized for one punch shape."""

    @abstractmethod
    def classify(self, day: AttendanceDay, excusal: ResolvedExcusal) -> Classification:
        raise NotImplementedError

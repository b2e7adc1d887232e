from __future__ import annotations

from typing import Optional

from .excusal import resolve_excusal
from .factory import ClassificationStrategyFactory
from .model import AttendanceDay, Classification

_default_factory = ClassificationStrategyFactory()


def classify_day(day: AttendanceDay, *, factory: Optional[ClassificationStrategyFactory] = None) -> Classification:
    """Categorize one day: absence/leave first, then punch completeness, then violation severity."""
    strategy = (factory or _default_factory).for_day(day)
    return strategy.classify(day, resolve_excusal(day))

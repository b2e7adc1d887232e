from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from ..core.constants import DEFAULT_GRACE_MINUTES


@dataclass(frozen=True)
class Shift:
    """Domain entity: work shift (e.g. D1 09:00-18:00, S2 21:00-06:00)."""

    shift_id: int
    code: str
    name: str
    start_time: time
    end_time: time
    grace_minutes: int = DEFAULT_GRACE_MINUTES
    crosses_midnight: bool = False
    is_active: bool = True

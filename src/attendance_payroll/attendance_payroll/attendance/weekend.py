from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import SaturdayGroup, SaturdayPolicy

_SUNDAY = 6
_SATURDAY = 5


def saturday_index(day: date) -> Optional[int]:
    """Which Saturday of its month `day` is (1..5), or None for other weekdays."""
    if day.weekday() != _SATURDAY:
        return None
    return (day.day - 1) // 7 + 1


def is_saturday_off(index: int, *, group: SaturdayGroup, policy: SaturdayPolicy) -> bool:
    """Group A is off on the 2nd and 4th Saturday, group B on the 1st and 3rd.

    The 5th Saturday is a working day for both groups.
    """
    if policy == SaturdayPolicy.ALL_OFF:
        return True
    if group == SaturdayGroup.B:
        return index in (1, 3)
    return index in (2, 4)


def is_weekend_off(
    day: date,
    *,
    group: SaturdayGroup = SaturdayGroup.A,
    policy: SaturdayPolicy = SaturdayPolicy.ALTERNATE,
) -> bool:
    if day.weekday() == _SUNDAY:
        return True
    index = saturday_index(day)
    if index is None:
        return False
    return is_saturday_off(index, group=group, policy=policy)

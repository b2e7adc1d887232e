from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import minutes_of_day
from ..core.constants import NIGHT_CHECKIN_ROLLOVER_HOUR, NIGHT_CHECKOUT_ROLLOVER_HOUR
from ..shifts.model import Shift

_DAY_MINUTES = 24 * 60
_SAME_PUNCH = timedelta(minutes=1)


@dataclass(frozen=True)
class LateEarly:
    late: bool = False
    early_leave: bool = False
    # Minutes beyond the grace period.
    late_minutes: int = 0
    early_minutes: int = 0


NO_VIOLATION = LateEarly()


def is_same_punch(check_in: Optional[datetime], check_out: Optional[datetime]) -> bool:
    """Two punches less than a minute apart are one machine event recorded twice."""
    if check_in is None or check_out is None:
        return False
    return abs(check_out - check_in) < _SAME_PUNCH


def compute_late_early(shift: Optional[Shift], check_in: Optional[datetime], check_out: Optional[datetime]) -> LateEarly:
    """Late/early flags for a day with both punches, judged against `shift`.

    Arriving before the start or leaving after the end is never a violation;
    within the grace period it is on time.
    """
    if shift is None or check_in is None or check_out is None:
        return NO_VIOLATION
    if is_same_punch(check_in, check_out):
        return NO_VIOLATION

    in_min = minutes_of_day(check_in)
    out_min = minutes_of_day(check_out)
    start_min = minutes_of_day(shift.start_time)
    end_min = minutes_of_day(shift.end_time)

    if shift.crosses_midnight:
        if end_min < start_min:
            end_min += _DAY_MINUTES
        # Early-morning punches belong to the shift that started the evening before.
        if in_min < NIGHT_CHECKIN_ROLLOVER_HOUR * 60:
            in_min += _DAY_MINUTES
        if out_min < NIGHT_CHECKOUT_ROLLOVER_HOUR * 60:
            out_min += _DAY_MINUTES

    late_total = max(in_min - start_min, 0)
    early_total = max(end_min - out_min, 0)
    grace = max(int(shift.grace_minutes), 0)

    late = late_total > grace
    early_leave = early_total > grace
    return LateEarly(
        late=late,
        early_leave=early_leave,
        late_minutes=late_total - grace if late else 0,
        early_minutes=early_total - grace if early_leave else 0,
    )

from __future__ import annotations

from datetime import datetime, time

from ..core.constants import DAY_CUTOFF


def is_upcoming_day(date_str: str, month_str: str, *, now: datetime, cutoff: time = DAY_CUTOFF) -> bool:
    """Whether a day is not yet closed for attendance purposes.

    `month_str` is the YYYY-MM the records were fetched for; `now` is the
    current local wall-clock time. Today counts as upcoming only before `cutoff`.
    """
    today_str = now.strftime("%Y-%m-%d")
    current_month_str = today_str[:7]

    if month_str > current_month_str:
        return True
    if month_str < current_month_str:
        return False

    if date_str > today_str:
        return True
    if date_str < today_str:
        return False

    return now.time() < cutoff

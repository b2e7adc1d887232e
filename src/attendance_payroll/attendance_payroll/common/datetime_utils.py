from __future__ import annotations

import calendar
import re
from datetime import date, datetime, time, timedelta, timezone

from ..core.exceptions import ValidationError

_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")
_OFFSET_RE = re.compile(r"^([+-])?(\d{1,2})(?::?(\d{2}))?$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def parse_month(value: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month)."""
    m = _MONTH_RE.match(value or "")
    if not m:
        raise ValidationError('Invalid "month" format. Use YYYY-MM.')
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        raise ValidationError('Invalid "month" format. Use YYYY-MM.')
    return year, month


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def month_dates(year: int, month: int) -> list[str]:
    return [f"{year:04d}-{month:02d}-{day:02d}" for day in range(1, days_in_month(year, month) + 1)]


def parse_hhmm(value: str) -> time:
    """Parse HH:MM (seconds optional) into time."""
    parts = (value or "").strip().split(":")
    try:
        if len(parts) < 2:
            raise ValueError
        return time(hour=int(parts[0]), minute=int(parts[1]), second=int(parts[2]) if len(parts) > 2 else 0)
    except ValueError:
        raise ValidationError(f"Invalid time {value!r}, expected HH:MM") from None


def minutes_of_day(value: datetime | time) -> int:
    return value.hour * 60 + value.minute


def parse_offset(value: str | None) -> timezone:
    """Parse a UTC offset such as '+05:00', '-0330' or '5' (defaults to +05:00)."""
    m = _OFFSET_RE.match((value or "").strip())
    if not m:
        return timezone(timedelta(hours=5))
    sign = -1 if m.group(1) == "-" else 1
    minutes = int(m.group(2)) * 60 + int(m.group(3) or 0)
    return timezone(sign * timedelta(minutes=minutes))


def now_local(tz: timezone | None = None) -> datetime:
    """Current wall-clock time in the company timezone, returned naive.

    Wrapped so tests can patch it.
    """
    if tz is None:
        return datetime.now()
    return datetime.now(tz).replace(tzinfo=None)

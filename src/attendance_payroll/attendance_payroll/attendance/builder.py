"""Turn stored attendance rows into evaluated `AttendanceDay` values."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..core.constants import NIGHT_CHECKOUT_ROLLOVER_HOUR
from ..core.enums import AttendanceStatus
from ..shifts.model import Shift
from .model import AttendanceDay, AttendanceEntry
from .rules import NO_VIOLATION, compute_late_early
from .status import normalize_status


def borrow_night_checkout(
    entry: Optional[AttendanceEntry],
    next_entry: Optional[AttendanceEntry],
    shift: Optional[Shift],
) -> Optional[datetime]:
    """Check-out of a night shift that was recorded on the following day's row.

    Only taken when the next row's check-out is in the early morning, or when
    the next row has no check-in of its own.
    """
    if entry is None or entry.check_in is None or entry.check_out is not None:
        return None
    if shift is None or not shift.crosses_midnight:
        return None
    if next_entry is None or next_entry.check_out is None:
        return None

    if next_entry.check_out.hour < NIGHT_CHECKOUT_ROLLOVER_HOUR or next_entry.check_in is None:
        return next_entry.check_out
    return None


def derive_status(entry: Optional[AttendanceEntry], *, has_punch: bool, weekend_off: bool) -> Optional[AttendanceStatus]:
    if entry is None:
        return AttendanceStatus.HOLIDAY if weekend_off else AttendanceStatus.ABSENT
    if entry.status and entry.status.strip():
        return normalize_status(entry.status, weekend_off=weekend_off)
    if has_punch:
        return AttendanceStatus.PRESENT
    return AttendanceStatus.HOLIDAY if weekend_off else AttendanceStatus.ABSENT


def build_day(
    entry: Optional[AttendanceEntry],
    *,
    work_date: str,
    shift: Optional[Shift],
    shift_code: str = "",
    weekend_off: bool = False,
    next_entry: Optional[AttendanceEntry] = None,
    is_future: bool = False,
) -> AttendanceDay:
    """Evaluate one employee-day.

    Late/early flags are always recomputed from the punches and the shift; the
    values stored on the row are not trusted. A single punch counts as an
    early-leave-like condition so that the legacy `excused` flag covers it.
    """
    if is_future:
        return AttendanceDay(date=work_date, status=None, shift=shift_code, weekend_off=weekend_off, is_future=True)

    check_in = entry.check_in if entry else None
    check_out = entry.check_out if entry else None
    if check_out is None:
        check_out = borrow_night_checkout(entry, next_entry, shift)

    has_punch = check_in is not None or check_out is not None
    status = derive_status(entry, has_punch=has_punch, weekend_off=weekend_off)

    flags = NO_VIOLATION
    if check_in is not None and check_out is not None and status != AttendanceStatus.HOLIDAY:
        flags = compute_late_early(shift, check_in, check_out)

    partial = (check_in is None) != (check_out is None)

    return AttendanceDay(
        date=work_date,
        status=status,
        check_in=check_in,
        check_out=check_out,
        late=flags.late,
        early_leave=flags.early_leave or partial,
        excused=bool(entry.excused) if entry else False,
        late_excused=entry.late_excused if entry else None,
        early_excused=entry.early_excused if entry else None,
        reason=(entry.reason or "") if entry else "",
        shift=shift_code or ((entry.shift or "") if entry else ""),
        late_minutes=flags.late_minutes,
        early_minutes=flags.early_minutes,
        weekend_off=weekend_off,
    )

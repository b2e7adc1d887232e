from __future__ import annotations

from .model import AttendanceDay, ResolvedExcusal


def resolve_excusal(day: AttendanceDay) -> ResolvedExcusal:
    """Reconcile the split excusal flags with the legacy single `excused` flag.

    A split flag that is present wins, including an explicit False. Only when it
    is None does the legacy flag apply, and then only to a violation that
    actually occurred.
    """
    if day.late_excused is not None:
        late = bool(day.late_excused)
    else:
        late = bool(day.excused and day.late)

    if day.early_excused is not None:
        early = bool(day.early_excused)
    else:
        early = bool(day.excused and day.early_leave)

    return ResolvedExcusal(late=late, early=early)

from __future__ import annotations

from typing import Any, Dict, Sequence

from ..core.constants import DEFAULT_GRACE_MINUTES
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_time
from .model import Shift
from .repository import ShiftRepository

_COLUMNS = "shift_id, code, name, start_time, end_time, grace_minutes, crosses_midnight, is_active"


def _to_shift(r: Dict[str, Any], *, default_grace: int = DEFAULT_GRACE_MINUTES) -> Shift:
    grace = r.get("grace_minutes")
    return Shift(
        shift_id=int(r["shift_id"]),
        code=str(r["code"]).upper(),
        name=r["name"],
        start_time=normalize_mysql_time(r["start_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        grace_minutes=int(grace) if grace is not None else default_grace,
        crosses_midnight=bool(r.get("crosses_midnight")),
        is_active=bool(r.get("is_active", 1)),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection, *, default_grace: int = DEFAULT_GRACE_MINUTES):
        self._conn_factory = conn_factory
        self._default_grace = int(default_grace)

    def list_active(self) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts WHERE is_active=1 ORDER BY code")
            return [_to_shift(r, default_grace=self._default_grace) for r in fetchall(cur)]

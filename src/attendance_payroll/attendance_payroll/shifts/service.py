from __future__ import annotations

import re
from typing import Iterable, Optional

from ..core.logging import get_logger
from .model import Shift
from .repository import ShiftRepository

logger = get_logger(__name__)

_SIMPLE_CODE_RE = re.compile(r"^[A-Z]\d+$")
_EMBEDDED_CODE_RE = re.compile(r"(?:–\s*)?([A-Z]\d+)(?:\s*\([^)]+\))?")


def extract_shift_code(value: Optional[str]) -> str:
    """Extract a shift code from a stored label.

    "D1" -> "D1", "– S2 (21:00–06:00)" -> "S2"; anything else is returned trimmed.
    """
    if not value or not isinstance(value, str):
        return ""
    value = value.strip()
    if _SIMPLE_CODE_RE.match(value):
        return value
    m = _EMBEDDED_CODE_RE.search(value)
    if m:
        return m.group(1)
    return value


class ShiftCatalog:
    """In-memory lookup of active shifts by id and by code."""

    def __init__(self, shifts: Iterable[Shift]):
        self._by_id: dict[int, Shift] = {}
        self._by_code: dict[str, Shift] = {}
        for s in shifts:
            self._by_id[s.shift_id] = s
            self._by_code[s.code] = s

    @classmethod
    def load(cls, repo: ShiftRepository) -> "ShiftCatalog":
        return cls(repo.list_active())

    def __len__(self) -> int:
        return len(self._by_id)

    def by_id(self, shift_id: Optional[int]) -> Optional[Shift]:
        if shift_id is None:
            return None
        return self._by_id.get(int(shift_id))

    def by_code(self, value: Optional[str]) -> Optional[Shift]:
        code = extract_shift_code(value)
        return self._by_code.get(code) if code else None

    def resolve(
        self,
        *,
        shift_id: Optional[int] = None,
        employee_shift: Optional[str] = None,
        record_shift: Optional[str] = None,
    ) -> tuple[Optional[Shift], str]:
        """Effective shift for a day: employee shift id, then employee code, then the record's code.

        Returns the shift (if known) and the code to display.
        """
        shift = self.by_id(shift_id) or self.by_code(employee_shift) or self.by_code(record_shift)
        if shift:
            return shift, shift.code

        code = extract_shift_code(employee_shift) or extract_shift_code(record_shift)
        if code and self._by_code:
            logger.warning("Shift %r not found among active shifts", code)
        return None, code

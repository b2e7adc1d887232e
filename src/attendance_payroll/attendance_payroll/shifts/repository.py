from __future__ import annotations

from typing import Protocol, Sequence

from .model import Shift


class ShiftRepository(Protocol):
    def list_active(self) -> Sequence[Shift]:
        raise NotImplementedError

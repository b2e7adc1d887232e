from __future__ import annotations

from typing import Mapping, Protocol


class LeaveAllocationRepository(Protocol):
    def base_allocations(self, emp_code: str, year: int) -> Mapping[int, int]:
        """Per-quarter base allocation overrides; quarters without a row use the default quota."""

        raise NotImplementedError

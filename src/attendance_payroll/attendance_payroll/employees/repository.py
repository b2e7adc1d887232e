from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from ..core.enums import SaturdayPolicy
from .model import Employee


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_by_code(self, emp_code: str) -> Optional[Employee]:
        raise NotImplementedError

    def department_policies(self) -> Mapping[str, SaturdayPolicy]:
        """Saturday policy keyed by lower-cased department name."""

        raise NotImplementedError

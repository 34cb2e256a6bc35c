from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional


@dataclass(frozen=True)
class EmployeeDetails:
    """Flattened read view: Employee left-joined to Department and Developers.

    ``department`` and ``language`` are ``None`` when the employee has no
    matching row in the corresponding table.
    """

    emp_id: int
    emp_name: Optional[str]
    department: Optional[str]
    language: Optional[str]

    def to_dict(self) -> dict:
        return asdict(self)

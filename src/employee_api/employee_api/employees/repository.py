from __future__ import annotations

from typing import Protocol, Sequence

from .model import EmployeeDetails


class EmployeeRepository(Protocol):
    """Repository over the Employee, Department and Developers tables.

    Every method is a single store operation against a single table, except
    ``list_details`` which reads all three. Implementations raise
    ``StoreError`` with a step prefix when the store fails.
    """

    def list_details(self) -> Sequence[EmployeeDetails]:
        raise NotImplementedError

    def last_employee_id(self) -> int:
        raise NotImplementedError

    def insert_employee(self, *, emp_id: int, emp_name: str) -> None:
        raise NotImplementedError

    def insert_department(self, *, emp_id: int, department_name: str) -> None:
        raise NotImplementedError

    def insert_developer(self, *, emp_id: int, language: str) -> None:
        raise NotImplementedError

    def update_employee_name(self, *, emp_id: int, emp_name: str) -> int:
        raise NotImplementedError

    def upsert_department(self, *, emp_id: int, department_name: str) -> None:
        raise NotImplementedError

    def upsert_developer(self, *, emp_id: int, language: str) -> None:
        raise NotImplementedError

    def delete_employee(self, *, emp_id: int) -> int:
        raise NotImplementedError

    def delete_departments(self, *, emp_id: int) -> int:
        raise NotImplementedError

    def delete_developers(self, *, emp_id: int) -> int:
        raise NotImplementedError

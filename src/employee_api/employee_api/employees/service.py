from __future__ import annotations

from typing import Optional, Sequence

from .id_allocator import EmployeeIdAllocator
from .model import EmployeeDetails
from .repository import EmployeeRepository


class EmployeeQueryService:
    """Use case: read the joined employee view."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[EmployeeDetails]:
        return self._employees.list_details()

    def last_employee_id(self) -> int:
        return self._employees.last_employee_id()


class EmployeeWriteService:
    """Use case: create, update and delete employees across the three tables.

    Each table is written by its own store call. The first failing call is
    raised as ``StoreError``; rows written before it stay in place.
    """

    def __init__(self, employees: EmployeeRepository, ids: EmployeeIdAllocator):
        self._employees = employees
        self._ids = ids

    def create(
        self,
        *,
        emp_name: str,
        department: str,
        language: str,
        emp_id: Optional[int] = None,
    ) -> int:
        if not emp_id:
            emp_id = self._ids.next()

        self._employees.insert_employee(emp_id=emp_id, emp_name=emp_name)
        self._employees.insert_department(emp_id=emp_id, department_name=department)
        self._employees.insert_developer(emp_id=emp_id, language=language)
        return emp_id

    def update(
        self,
        emp_id: int,
        *,
        emp_name: Optional[str] = None,
        department: Optional[str] = None,
        language: Optional[str] = None,
    ) -> None:
        # Updating the name of a missing employee matches nothing and is not an error.
        if emp_name is not None:
            self._employees.update_employee_name(emp_id=emp_id, emp_name=emp_name)
        if department is not None:
            self._employees.upsert_department(emp_id=emp_id, department_name=department)
        if language is not None:
            self._employees.upsert_developer(emp_id=emp_id, language=language)

    def delete(self, emp_id: int) -> int:
        """Delete the employee and every Department/Developers row for it.

        Returns how many Employee rows were removed (0 or 1).
        """

        deleted = self._employees.delete_employee(emp_id=emp_id)
        self._employees.delete_departments(emp_id=emp_id)
        self._employees.delete_developers(emp_id=emp_id)
        return deleted

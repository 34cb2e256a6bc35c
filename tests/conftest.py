from __future__ import annotations

import os
from typing import Optional

import pytest

os.environ.setdefault("APP_ENV", "testing")

from src.employee_api.employee_api.container import build_services
from src.employee_api.employee_api.core.exceptions import StoreError
from src.employee_api.employee_api.employees.model import EmployeeDetails
from src.employee_api.employee_api.main import create_app


class InMemoryEmployees:
    """Three lists standing in for the Employee, Department and Developers tables.

    Steps named in ``failing`` raise ``StoreError`` the way the MySQL repository does.
    """

    def __init__(self, failing: Optional[set[str]] = None):
        self.employees: list[dict] = []
        self.departments: list[dict] = []
        self.developers: list[dict] = []
        self.failing = set(failing or ())
        self.calls: list[str] = []

    def _step(self, step: str) -> None:
        self.calls.append(step)
        if step in self.failing:
            raise StoreError(step, RuntimeError("connection refused"))

    @staticmethod
    def _first(rows: list[dict], emp_id: int) -> Optional[dict]:
        return next((r for r in rows if r["emp_id"] == emp_id), None)

    def list_details(self):
        self._step("aggregate")
        out = []
        for e in self.employees:
            dept = self._first(self.departments, e["emp_id"])
            dev = self._first(self.developers, e["emp_id"])
            out.append(
                EmployeeDetails(
                    emp_id=e["emp_id"],
                    emp_name=e["emp_name"],
                    department=dept["department_name"] if dept else None,
                    language=dev["language"] if dev else None,
                )
            )
        return out

    def last_employee_id(self) -> int:
        self._step("last id")
        return max((e["emp_id"] for e in self.employees), default=0)

    def insert_employee(self, *, emp_id, emp_name):
        self._step("insert employee")
        self.employees.append({"emp_id": emp_id, "emp_name": emp_name})

    def insert_department(self, *, emp_id, department_name):
        self._step("insert department")
        self.departments.append({"emp_id": emp_id, "department_name": department_name})

    def insert_developer(self, *, emp_id, language):
        self._step("insert developers")
        self.developers.append({"emp_id": emp_id, "language": language})

    def update_employee_name(self, *, emp_id, emp_name):
        self._step("update employee")
        row = self._first(self.employees, emp_id)
        if not row:
            return 0
        row["emp_name"] = emp_name
        return 1

    def upsert_department(self, *, emp_id, department_name):
        self._step("update department")
        row = self._first(self.departments, emp_id)
        if row:
            row["department_name"] = department_name
        else:
            self.departments.append({"emp_id": emp_id, "department_name": department_name})

    def upsert_developer(self, *, emp_id, language):
        self._step("update developers")
        row = self._first(self.developers, emp_id)
        if row:
            row["language"] = language
        else:
            self.developers.append({"emp_id": emp_id, "language": language})

    def delete_employee(self, *, emp_id):
        self._step("delete employee")
        row = self._first(self.employees, emp_id)
        if not row:
            return 0
        self.employees.remove(row)
        return 1

    def delete_departments(self, *, emp_id):
        self._step("delete department")
        before = len(self.departments)
        self.departments = [r for r in self.departments if r["emp_id"] != emp_id]
        return before - len(self.departments)

    def delete_developers(self, *, emp_id):
        self._step("delete developers")
        before = len(self.developers)
        self.developers = [r for r in self.developers if r["emp_id"] != emp_id]
        return before - len(self.developers)


@pytest.fixture
def repo():
    return InMemoryEmployees()


@pytest.fixture
def container(repo):
    c = build_services(repo)
    c.id_allocator.initialize(repo)
    return c


@pytest.fixture
def app(repo):
    return create_app(container=build_services(repo))


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_repo():
    """Factory for repositories whose named steps fail, e.g. ``make_repo({"insert department"})``."""
    return InMemoryEmployees

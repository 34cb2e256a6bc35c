from __future__ import annotations

from typing import Sequence

from ..core.constants import DEPARTMENT_TABLE, DEVELOPERS_TABLE, EMPLOYEE_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_emp_id, store_step
from .model import EmployeeDetails
from .repository import EmployeeRepository


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_details(self) -> Sequence[EmployeeDetails]:
        # Correlated subqueries keep one output row per Employee row even when
        # Department/Developers hold duplicates; the first match wins.
        with store_step("aggregate"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT e.emp_id, e.emp_name,
                       (SELECT d.department_name FROM `{DEPARTMENT_TABLE}` d
                        WHERE d.emp_id = e.emp_id LIMIT 1) AS department,
                       (SELECT v.language FROM `{DEVELOPERS_TABLE}` v
                        WHERE v.emp_id = e.emp_id LIMIT 1) AS language
                FROM `{EMPLOYEE_TABLE}` e
                """
            )
            rows = fetchall(cur)
            return [
                EmployeeDetails(
                    emp_id=normalize_emp_id(r["emp_id"]),
                    emp_name=r.get("emp_name"),
                    department=r.get("department"),
                    language=r.get("language"),
                )
                for r in rows
            ]

    def last_employee_id(self) -> int:
        with store_step("last id"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT emp_id FROM `{EMPLOYEE_TABLE}` ORDER BY emp_id DESC LIMIT 1")
            row = fetchone(cur)
            if not row or row.get("emp_id") is None:
                return 0
            return normalize_emp_id(row["emp_id"])

    def insert_employee(self, *, emp_id: int, emp_name: str) -> None:
        with store_step("insert employee"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO `{EMPLOYEE_TABLE}`(emp_id, emp_name) VALUES(%s,%s)",
                (int(emp_id), emp_name),
            )

    def insert_department(self, *, emp_id: int, department_name: str) -> None:
        with store_step("insert department"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO `{DEPARTMENT_TABLE}`(emp_id, department_name) VALUES(%s,%s)",
                (int(emp_id), department_name),
            )

    def insert_developer(self, *, emp_id: int, language: str) -> None:
        with store_step("insert developers"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO `{DEVELOPERS_TABLE}`(emp_id, language) VALUES(%s,%s)",
                (int(emp_id), language),
            )

    def update_employee_name(self, *, emp_id: int, emp_name: str) -> int:
        with store_step("update employee"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"UPDATE `{EMPLOYEE_TABLE}` SET emp_name=%s WHERE emp_id=%s LIMIT 1",
                (emp_name, int(emp_id)),
            )
            return int(cur.rowcount)

    def upsert_department(self, *, emp_id: int, department_name: str) -> None:
        with store_step("update department"), db_cursor(self._conn_factory) as (_, cur):
            self._upsert(cur, DEPARTMENT_TABLE, "department_name", emp_id, department_name)

    def upsert_developer(self, *, emp_id: int, language: str) -> None:
        with store_step("update developers"), db_cursor(self._conn_factory) as (_, cur):
            self._upsert(cur, DEVELOPERS_TABLE, "language", emp_id, language)

    def delete_employee(self, *, emp_id: int) -> int:
        with store_step("delete employee"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM `{EMPLOYEE_TABLE}` WHERE emp_id=%s LIMIT 1", (int(emp_id),))
            return int(cur.rowcount)

    def delete_departments(self, *, emp_id: int) -> int:
        with store_step("delete department"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM `{DEPARTMENT_TABLE}` WHERE emp_id=%s", (int(emp_id),))
            return int(cur.rowcount)

    def delete_developers(self, *, emp_id: int) -> int:
        with store_step("delete developers"), db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM `{DEVELOPERS_TABLE}` WHERE emp_id=%s", (int(emp_id),))
            return int(cur.rowcount)

    @staticmethod
    def _upsert(cur, table: str, column: str, emp_id: int, value: str) -> None:
        # No unique key on emp_id, so ON DUPLICATE KEY is not an option; only the
        # first matching row is touched, like the joined read.
        cur.execute(f"SELECT emp_id FROM `{table}` WHERE emp_id=%s LIMIT 1", (int(emp_id),))
        if fetchone(cur):
            cur.execute(f"UPDATE `{table}` SET {column}=%s WHERE emp_id=%s LIMIT 1", (value, int(emp_id)))
        else:
            cur.execute(f"INSERT INTO `{table}`(emp_id, {column}) VALUES(%s,%s)", (int(emp_id), value))

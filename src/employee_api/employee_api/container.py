from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import STORE_TIMEOUT_SECONDS
from .database.connection import DBConfig, DatabaseConnection
from .employees.id_allocator import EmployeeIdAllocator
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeQueryService, EmployeeWriteService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    id_allocator: EmployeeIdAllocator

    query_service: EmployeeQueryService
    write_service: EmployeeWriteService


def build_services(
    employees_repo: EmployeeRepository,
    *,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    id_allocator = EmployeeIdAllocator()
    query_service = EmployeeQueryService(employees_repo)
    write_service = EmployeeWriteService(employees_repo, id_allocator)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        id_allocator=id_allocator,
        query_service=query_service,
        write_service=write_service,
    )


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        timeout=int(db_config.get("timeout", STORE_TIMEOUT_SECONDS)),
    )
    conn = DatabaseConnection.get_instance(config)

    return build_services(MySQLEmployeeRepository(conn), conn=conn)

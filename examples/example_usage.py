"""Example: drive the service layer directly, without Flask.

Creates one employee, prints the joined view, then removes it again.
"""

import importlib

from dotenv import load_dotenv

from config import get_settings_module

from src.employee_api.employee_api.container import build_container


def main():
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    container.id_allocator.initialize(container.employees_repo)

    emp_id = container.write_service.create(emp_name="Bob", department="QA", language="Python")
    for row in container.query_service.list_employees():
        print(row.to_dict())
    print("deleted:", container.write_service.delete(emp_id))


if __name__ == "__main__":
    main()

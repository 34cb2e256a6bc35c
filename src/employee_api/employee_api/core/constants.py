"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORE_TIMEOUT_SECONDS = 10
FIRST_EMPLOYEE_ID = 1

EMPLOYEE_TABLE = "Employee"
DEPARTMENT_TABLE = "Department"
DEVELOPERS_TABLE = "Developers"

from __future__ import annotations

import logging
import threading

from ..core.constants import FIRST_EMPLOYEE_ID
from ..core.exceptions import StoreError
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeIdAllocator:
    """Hands out sequential ``emp_id`` values for creates that do not bring one.

    Note: The counter lives in this process only. It is not coordinated with
    other processes, nor with ids that callers pass explicitly.
    """

    def __init__(self, start: int = FIRST_EMPLOYEE_ID):
        self._next = int(start)
        self._lock = threading.Lock()

    def initialize(self, employees: EmployeeRepository) -> int:
        """Seed the counter from the highest stored ``emp_id``.

        A store failure is logged and leaves the counter at its current value.
        """

        try:
            last_id = employees.last_employee_id()
        except StoreError as e:
            logger.error("Could not read last employee id, IDs start from %d: %s", self.peek(), e)
            return self.peek()

        with self._lock:
            self._next = last_id + 1
            if last_id == 0:
                logger.info("No employees found. Starting IDs from %d.", self._next)
            else:
                logger.info("Initialized ID counter. Starting from %d", self._next)
            return self._next

    def next(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        with self._lock:
            return self._next

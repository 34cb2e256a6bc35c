from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError

_INT_RE = re.compile(r"[+-]?[0-9]+")

# emp_id columns are BIGINT.
MIN_EMP_ID = -(2**63)
MAX_EMP_ID = 2**63 - 1


def parse_emp_id(value: str) -> int:
    """Parse a path segment into an ``emp_id``; only optionally signed digits are accepted."""
    if value is None or not _INT_RE.fullmatch(value):
        raise ValidationError("invalid id")
    emp_id = int(value)
    if not MIN_EMP_ID <= emp_id <= MAX_EMP_ID:
        raise ValidationError("invalid id")
    return emp_id


def require_json_object(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise ValidationError("invalid input: expected a JSON object")
    return payload


def optional_int(payload: dict, field_name: str) -> Optional[int]:
    value = payload.get(field_name)
    if value is None:
        return None
    # bool is a subclass of int but never a valid id.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"invalid input: {field_name} must be an integer")
    if not MIN_EMP_ID <= value <= MAX_EMP_ID:
        raise ValidationError(f"invalid input: {field_name} is out of range")
    return value


def optional_str(payload: dict, field_name: str) -> Optional[str]:
    value = payload.get(field_name)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"invalid input: {field_name} must be a string")
    return value

class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid (bad JSON, bad id, wrong field types)."""


class StoreError(DomainError):
    """Raised when a store operation fails.

    The message is prefixed with the step that failed, e.g. ``insert department: ...``.
    """

    def __init__(self, step: str, cause: Exception):
        super().__init__(f"{step}: {cause}")
        self.step = step
        self.cause = cause

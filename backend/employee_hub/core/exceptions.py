"""Error taxonomy shared by the data access layer, the store and the routes."""

from __future__ import annotations

from enum import Enum


class EmployeeHubError(Exception):
    pass


class EmployeeApiError(EmployeeHubError):
    """Base class for failures reported by the remote employee collection."""


class TransportError(EmployeeApiError):
    """Network failure, timeout or non-success status from the remote collection.

    ``status`` is ``None`` when no HTTP response was received.
    """

    def __init__(self, message: str, status: int | None = None, body: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class EmployeeApiUnavailable(EmployeeApiError):
    """The remote collection is not configured (no base URL)."""


class NotFoundError(EmployeeApiError):
    def __init__(self, employee_id: int) -> None:
        super().__init__(f"Employee {employee_id} not found")
        self.employee_id = employee_id


class MutationOperation(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class MutationFailed(EmployeeHubError):
    """A create/update/delete was rejected; the cached list was left as it was."""

    def __init__(self, operation: MutationOperation, cause: EmployeeApiError) -> None:
        super().__init__(f"Employee {operation.value} failed: {cause}")
        self.operation = operation
        self.cause = cause


class InvalidCredentials(EmployeeHubError):
    pass

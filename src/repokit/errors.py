"""Error kinds surfaced by repokit operations."""

from enum import Enum


class ErrorKind(str, Enum):
    # A required argument is missing or has an invalid value.
    VALIDATION = "validation"
    # A helper CLI is missing or the directory is not a working tree.
    ENVIRONMENT = "environment"
    # The hosted-service CLI is not logged in.
    AUTHENTICATION = "authentication"
    # The owner/name pair could not be read from the remote URL.
    IDENTITY = "identity"
    # An external command exited non-zero without a more specific signal.
    STEP_FAILED = "step_failed"
    # The target user or repository does not exist.
    NOT_FOUND = "not_found"
    # The target already exists or the request conflicts with current state.
    CONFLICT = "conflict"
    # The authenticated user may not perform the action.
    PERMISSION_DENIED = "permission_denied"
    # The user declined a confirmation prompt.
    CANCELLED = "cancelled"

    @property
    def exit_code(self) -> int:
        return _EXIT_CODES[self]


_EXIT_CODES: dict[ErrorKind, int] = {
    ErrorKind.STEP_FAILED: 1,
    ErrorKind.VALIDATION: 2,
    ErrorKind.ENVIRONMENT: 3,
    ErrorKind.AUTHENTICATION: 4,
    ErrorKind.IDENTITY: 5,
    ErrorKind.NOT_FOUND: 6,
    ErrorKind.CONFLICT: 7,
    ErrorKind.PERMISSION_DENIED: 8,
    ErrorKind.CANCELLED: 9,
}


class OperationError(Exception):
    """An operation stopped before completing.

    Raised at the point of failure and turned into a log line and an exit
    code by the CLI layer.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __str__(self) -> str:
        return self.message


def require_argument(value: str | None, description: str) -> str:
    """Return the stripped value or raise a validation error if it is blank."""
    if value is None or not value.strip():
        raise OperationError(ErrorKind.VALIDATION, f"A {description} is required.")
    return value.strip()

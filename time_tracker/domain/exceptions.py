"""Domain exceptions for the time tracker.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class TimeTrackerException(Exception):
    """Base exception for all time tracker errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the API."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TimeTrackerException):
    """Raised when input validation fails (e.g. malformed passport number)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidUUIDException(TimeTrackerException):
    """Raised when an identifier is not a syntactically valid UUID."""

    def __init__(self, value: str, field: str = "id") -> None:
        super().__init__(
            f"Invalid UUID format for {field}",
            "INVALID_UUID",
            {"field": field, "value": value},
        )


class InvalidDateException(TimeTrackerException):
    """Raised when a date string is not a valid RFC3339 timestamp."""

    def __init__(self, value: str, field: str) -> None:
        super().__init__(
            f"Invalid RFC3339 date for {field}",
            "INVALID_DATE",
            {"field": field, "value": value},
        )


class InvalidDateRangeException(TimeTrackerException):
    """Raised when a range query starts after it ends."""

    def __init__(self, start: str, end: str) -> None:
        super().__init__(
            "Invalid date range: start date is after end date",
            "INVALID_DATE_RANGE",
            {"start_date": start, "end_date": end},
        )


class EmptyPatchException(TimeTrackerException):
    """Raised when a user update carries no field to change."""

    def __init__(self) -> None:
        super().__init__(
            "Update contains no fields to change",
            "EMPTY_PATCH",
        )


class InvalidTransitionException(TimeTrackerException):
    """Raised when a task lifecycle transition is not allowed from its current state."""

    def __init__(self, task_id: str, current_state: str, action: str) -> None:
        """Initialize with task, its current state and the rejected action.

        Args:
            task_id: Task the transition was attempted on.
            current_state: State name (e.g. 'finished').
            action: Attempted action ('start' or 'finish').
        """
        super().__init__(
            f"Cannot {action} task in state '{current_state}'",
            "INVALID_TRANSITION",
            {"task_id": task_id, "state": current_state, "action": action},
        )


class ResourceNotFoundException(TimeTrackerException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'task', 'user').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class TaskNotFoundException(ResourceNotFoundException):
    """Raised when a task does not exist."""

    def __init__(self, task_id: str) -> None:
        super().__init__("task", task_id)


class UserNotFoundException(ResourceNotFoundException):
    """Raised when a user does not exist."""

    def __init__(self, user_id: str) -> None:
        super().__init__("user", user_id)


class UserAlreadyExistsException(TimeTrackerException):
    """Raised when creating a user whose passport series and number already exist."""

    def __init__(self, passport_serie: int, passport_number: int) -> None:
        super().__init__(
            "User with this passport already exists",
            "USER_ALREADY_EXISTS",
            {"passport_serie": passport_serie, "passport_number": passport_number},
        )


class ExternalServiceException(TimeTrackerException):
    """Raised when the external identity lookup fails (upstream error or bad response)."""

    def __init__(
        self,
        message: str = "External identity service error",
        error_code: str = "EXTERNAL_SERVICE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, error_code, details)


class ExternalServiceBadRequestException(ExternalServiceException):
    """Raised when the external identity service rejects the lookup request (HTTP 400)."""

    def __init__(self, passport_serie: int, passport_number: int) -> None:
        super().__init__(
            "External identity service rejected the passport lookup",
            "EXTERNAL_SERVICE_BAD_REQUEST",
            {"passport_serie": passport_serie, "passport_number": passport_number},
        )


class StorageException(TimeTrackerException):
    """Raised when the persistence layer fails for a reason other than not-found/duplicate."""

    def __init__(self, operation: str, reason: str) -> None:
        """Initialize with the failing repository operation and a short reason.

        Args:
            operation: Repository operation name (e.g. 'task.finish').
            reason: Exception class or short description from the driver.
        """
        super().__init__(
            f"Storage operation failed: {operation}",
            "STORAGE_ERROR",
            {"operation": operation, "reason": reason},
        )


class SqlNotConfiguredException(TimeTrackerException):
    """Raised when an operation requires the database but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )

"""Domain layer: entities, value objects, enums, and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from time_tracker.domain.entities import TaskEntity, TaskState
from time_tracker.domain.enums import TaskStatus, UserField
from time_tracker.domain.exceptions import (
    EmptyPatchException,
    ExternalServiceBadRequestException,
    ExternalServiceException,
    InvalidDateException,
    InvalidDateRangeException,
    InvalidTransitionException,
    InvalidUUIDException,
    ResourceNotFoundException,
    StorageException,
    TaskNotFoundException,
    TimeTrackerException,
    UserAlreadyExistsException,
    UserNotFoundException,
    ValidationException,
)
from time_tracker.domain.value_objects import DateRange, Passport

__all__ = [
    # Entities
    "TaskEntity",
    "TaskState",
    # Enums
    "TaskStatus",
    "UserField",
    # Exceptions
    "EmptyPatchException",
    "ExternalServiceBadRequestException",
    "ExternalServiceException",
    "InvalidDateException",
    "InvalidDateRangeException",
    "InvalidTransitionException",
    "InvalidUUIDException",
    "ResourceNotFoundException",
    "StorageException",
    "TaskNotFoundException",
    "TimeTrackerException",
    "UserAlreadyExistsException",
    "UserNotFoundException",
    "ValidationException",
    # Value objects
    "DateRange",
    "Passport",
]

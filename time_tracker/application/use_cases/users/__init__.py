"""User use cases."""

from time_tracker.application.use_cases.users.user_operations import UserService

__all__ = ["UserService"]

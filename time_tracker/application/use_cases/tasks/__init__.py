"""Task use cases."""

from time_tracker.application.use_cases.tasks.task_operations import TaskService

__all__ = ["TaskService"]

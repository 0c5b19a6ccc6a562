"""Domain value objects."""

from time_tracker.domain.value_objects.core import DateRange, Passport

__all__ = ["DateRange", "Passport"]

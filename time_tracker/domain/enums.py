"""Domain enumerations for the time tracker.

Enums represent fixed sets of domain values (task lifecycle, updatable user columns).
"""

from enum import Enum


class TaskStatus(str, Enum):
    """Task lifecycle status.

    NOT_STARTED → RUNNING → FINISHED. No other transitions exist.
    """

    NOT_STARTED = "not_started"
    RUNNING = "running"
    FINISHED = "finished"


class UserField(str, Enum):
    """User columns that may be changed by a partial update.

    Declaration order is the order assignments are emitted in.
    Passport series/number and id are not updatable.
    """

    NAME = "name"
    SURNAME = "surname"
    PATRONYMIC = "patronymic"
    ADDRESS = "address"

"""Domain value objects for the time tracker.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass
from datetime import datetime

_PASSPORT_RE = re.compile(r"^\s*(\d+)\s+(\d+)\s*$")

# Series and number are stored in 32-bit integer columns.
PASSPORT_PART_MAX = 2**31 - 1


@dataclass(frozen=True)
class Passport:
    """Passport series and number (together unique per user).

    Accepts the "SSSS NNNNNN" form: two whitespace-separated runs of digits.
    """

    serie: int
    number: int

    def __post_init__(self) -> None:
        if not (0 <= self.serie <= PASSPORT_PART_MAX and 0 <= self.number <= PASSPORT_PART_MAX):
            raise ValueError(
                f"Passport series and number must be between 0 and {PASSPORT_PART_MAX}"
            )

    @classmethod
    def parse(cls, value: str) -> "Passport":
        """Parse "1234 567890" into Passport(1234, 567890).

        Raises:
            ValueError: If value is not two whitespace-separated digit groups.
        """
        match = _PASSPORT_RE.match(value or "")
        if not match:
            raise ValueError(
                "Passport number must be '<series> <number>', e.g. '1234 567890'"
            )
        return cls(serie=int(match.group(1)), number=int(match.group(2)))

    def __str__(self) -> str:
        return f"{self.serie} {self.number}"


@dataclass(frozen=True)
class DateRange:
    """Closed timestamp interval [start, end] with start <= end."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError("start must not be after end")

    def contains(self, moment: datetime) -> bool:
        """Return True if moment lies within the closed interval."""
        return self.start <= moment <= self.end

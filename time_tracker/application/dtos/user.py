"""DTOs for user use cases (no dependency on ORM)."""

from __future__ import annotations

from dataclasses import dataclass, field

from time_tracker.domain.enums import UserField


@dataclass(frozen=True)
class UserResult:
    """User read-model (result of get, create, update)."""

    id: str
    name: str
    surname: str
    patronymic: str
    address: str
    passport_serie: int
    passport_number: int


@dataclass(frozen=True)
class UserInfo:
    """Biographical fields resolved from the external people-info service."""

    name: str = ""
    surname: str = ""
    patronymic: str = ""
    address: str = ""


@dataclass(frozen=True)
class NewUser:
    """User to insert: passport plus resolved biography. Storage assigns the id."""

    passport_serie: int
    passport_number: int
    info: UserInfo = field(default_factory=UserInfo)


@dataclass(frozen=True)
class UserUpdate:
    """Sparse user changes as sent by the caller. None or "" means "not set"."""

    name: str | None = None
    surname: str | None = None
    patronymic: str | None = None
    address: str | None = None

    def value_for(self, user_field: UserField) -> str | None:
        return getattr(self, user_field.value)


@dataclass(frozen=True)
class UserPatch:
    """Ordered column assignments for one user; never empty.

    assignments follow UserField declaration order and contain exactly the
    fields the caller set. user_id is the lookup key, not an assignment.
    """

    user_id: str
    assignments: tuple[tuple[UserField, str], ...]

    @property
    def fields(self) -> list[UserField]:
        return [user_field for user_field, _ in self.assignments]

    def as_dict(self) -> dict[str, str]:
        """Column name → new value (for ORM update .values())."""
        return {user_field.value: value for user_field, value in self.assignments}

    def to_positional(self) -> tuple[list[str], list[str]]:
        """Render SQL SET fragments with gap-free $n placeholders.

        Returns:
            (fragments, values): fragments like ["surname = $1"]; values hold
            one entry per fragment followed by user_id, which binds to the
            last placeholder ($len(values)) in the WHERE clause.
        """
        fragments = [
            f"{user_field.value} = ${index}"
            for index, (user_field, _) in enumerate(self.assignments, start=1)
        ]
        values = [value for _, value in self.assignments]
        values.append(self.user_id)
        return fragments, values

"""Builds a sparse user patch from the fields a caller actually set."""

from time_tracker.application.dtos.user import UserPatch, UserUpdate
from time_tracker.domain.enums import UserField
from time_tracker.domain.exceptions import EmptyPatchException


def build_user_patch(user_id: str, update: UserUpdate) -> UserPatch:
    """Return assignments for every non-empty field, in UserField order.

    Unset fields are omitted so existing values are not overwritten.

    Raises:
        EmptyPatchException: If no field is set.
    """
    assignments = tuple(
        (user_field, value)
        for user_field in UserField
        if (value := update.value_for(user_field))
    )
    if not assignments:
        raise EmptyPatchException()
    return UserPatch(user_id=user_id, assignments=assignments)

"""People-info (passport lookup) client."""

from time_tracker.infrastructure.external.identity.people_info_client import (
    PeopleInfoClient,
)

__all__ = ["PeopleInfoClient"]

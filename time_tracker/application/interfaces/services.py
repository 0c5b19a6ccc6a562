"""Service interfaces (ports) for external collaborators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from time_tracker.application.dtos.user import UserInfo


class IIdentityProvider(Protocol):
    """Resolves a passport to a person's biographical fields."""

    async def get_user_info(
        self, passport_serie: int, passport_number: int
    ) -> UserInfo:
        """Return biography; raise ExternalServiceBadRequestException or ExternalServiceException."""

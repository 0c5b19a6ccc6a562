"""People-info API client: resolves a passport to name, surname, patronymic and address."""

from __future__ import annotations

from typing import Any

import httpx

from time_tracker.application.dtos.user import UserInfo
from time_tracker.domain.exceptions import (
    ExternalServiceBadRequestException,
    ExternalServiceException,
)
from time_tracker.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

_INFO_FIELDS = ("name", "surname", "patronymic", "address")


class PeopleInfoClient:
    """Implements IIdentityProvider over HTTP.

    GET {base_url}/info?passportSerie=<int>&passportNumber=<int>
    200 → JSON object with surname, name, patronymic, address.
    400 → ExternalServiceBadRequestException; any other status, transport
    error or malformed body → ExternalServiceException.

    When http_client is given (shared client from the app lifespan) it is
    reused and not closed here; otherwise a short-lived client is opened per call.
    """

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client
        self.timeout = timeout

    async def _get(self, params: dict[str, Any]) -> httpx.Response:
        url = f"{self.base_url}/info"
        if self.http_client is not None:
            return await self.http_client.get(url, params=params, timeout=self.timeout)
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            return await client.get(url, params=params)

    async def get_user_info(
        self, passport_serie: int, passport_number: int
    ) -> UserInfo:
        """Look up biography for the passport."""
        if not self.base_url:
            raise ExternalServiceException(
                "External identity service is not configured (EXTERNAL_API_URL is empty)"
            )
        params = {"passportSerie": passport_serie, "passportNumber": passport_number}
        try:
            response = await self._get(params)
        except httpx.HTTPError as e:
            logger.error("People-info request failed: %s", e.__class__.__name__)
            raise ExternalServiceException(
                details={"reason": e.__class__.__name__}
            ) from e

        if response.status_code == 400:
            logger.warning(
                "People-info rejected passport lookup: status=%d", response.status_code
            )
            raise ExternalServiceBadRequestException(passport_serie, passport_number)
        if response.status_code != 200:
            logger.error("People-info lookup failed: status=%d", response.status_code)
            raise ExternalServiceException(details={"status_code": response.status_code})

        try:
            data = response.json()
        except ValueError as e:
            raise ExternalServiceException(
                "External identity service returned invalid JSON"
            ) from e
        if not isinstance(data, dict):
            raise ExternalServiceException(
                "External identity service returned an unexpected payload"
            )
        values = {key: data.get(key) or "" for key in _INFO_FIELDS}
        if not all(isinstance(value, str) for value in values.values()):
            raise ExternalServiceException(
                "External identity service returned non-string fields"
            )
        return UserInfo(**values)

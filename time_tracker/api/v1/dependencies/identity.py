"""External identity provider dependency (composition root)."""

from __future__ import annotations

from fastapi import Request

from time_tracker.core.config import get_settings
from time_tracker.infrastructure.external.identity import PeopleInfoClient


def get_identity_provider(request: Request) -> PeopleInfoClient:
    """People-info client using the shared HTTP client from the lifespan (if started)."""
    settings = get_settings()
    return PeopleInfoClient(
        base_url=settings.external_api_url,
        http_client=getattr(request.app.state, "identity_http_client", None),
        timeout=settings.external_api_timeout_seconds,
    )

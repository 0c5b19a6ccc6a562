"""API v1."""

from time_tracker.api.v1.router import api_router

__all__ = ["api_router"]

"""Application ports (Protocols) implemented by infrastructure."""

from time_tracker.application.interfaces.repositories import (
    ITaskRepository,
    IUserRepository,
)
from time_tracker.application.interfaces.services import IIdentityProvider

__all__ = ["IIdentityProvider", "ITaskRepository", "IUserRepository"]

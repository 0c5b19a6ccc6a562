"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports. Central limit strings and decorators keep
rate limits DRY.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

# Each user creation triggers an external people-info lookup.
CREATE_USER_LIMIT = "5/minute"
WRITE_ENDPOINT_LIMIT = "120/minute"

limit_create_user = limiter.limit(CREATE_USER_LIMIT)
limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)

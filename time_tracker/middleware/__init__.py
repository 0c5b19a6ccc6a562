"""HTTP middleware: timeout, request ID.

Applied in main app; order matters (first added = outermost).
Import and use from time_tracker.main.
"""

from time_tracker.middleware.request_id import RequestIDMiddleware
from time_tracker.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "TimeoutMiddleware",
]

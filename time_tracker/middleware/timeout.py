"""Request timeout middleware.

Cancels a request that runs longer than REQUEST_TIMEOUT_SECONDS and answers 504,
unless the response has already started (then the connection is just closed).
Raw ASGI, no BaseHTTPMiddleware.
"""

import asyncio
import json
import logging
from typing import Callable

logger = logging.getLogger(__name__)


def _timeout_body(timeout_seconds: int, request_id: str | None) -> bytes:
    details: dict[str, object] = {"timeout_seconds": timeout_seconds}
    if request_id:
        details["request_id"] = request_id
    return json.dumps(
        {
            "error": "GATEWAY_TIMEOUT",
            "message": f"Request timed out after {timeout_seconds} seconds",
            "details": details,
        }
    ).encode()


def TimeoutMiddleware(app: Callable, timeout_seconds: int) -> Callable:
    """Wrap app so each HTTP request is bounded by timeout_seconds."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        response_started = False

        async def send_tracking(message: dict) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            async with asyncio.timeout(timeout_seconds):
                await app(scope, receive, send_tracking)
        except TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if response_started:
                return
            request_id = scope.get("state", {}).get("request_id")
            await send({
                "type": "http.response.start",
                "status": 504,
                "headers": [(b"content-type", b"application/json")],
            })
            await send({
                "type": "http.response.body",
                "body": _timeout_body(timeout_seconds, request_id),
                "more_body": False,
            })

    return asgi_app

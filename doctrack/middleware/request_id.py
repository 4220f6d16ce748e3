"""Correlation id for every HTTP request.

A client-supplied id is reused when it is short and made of URL-safe
characters; anything else is replaced by a fresh UUID4. The id is put on
``request.state.request_id`` (error envelopes read it from there) and
returned in the response header. One access log line is written per
request. Plain ASGI so streaming responses are not buffered.
"""

import logging
import re
import time
import uuid
from typing import Callable

logger = logging.getLogger(__name__)

MAX_REQUEST_ID_LENGTH = 64
_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9_-]+$")


def _header_value(scope: dict, header_name: str) -> str | None:
    wanted = header_name.lower().encode("latin-1")
    for key, value in scope.get("headers", []):
        if key.lower() == wanted:
            return value.decode("latin-1")
    return None


def _resolve_request_id(incoming: str | None) -> str:
    candidate = (incoming or "").strip()
    if (
        candidate
        and len(candidate) <= MAX_REQUEST_ID_LENGTH
        and _SAFE_REQUEST_ID.match(candidate)
    ):
        return candidate
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    encoded_name = header_name.encode("latin-1")

    async def middleware(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        request_id = _resolve_request_id(_header_value(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        started = time.perf_counter()
        status = 500

        async def send_with_id(message: dict) -> None:
            nonlocal status
            if message["type"] == "http.response.start":
                status = message["status"]
                message["headers"] = [
                    *message.get("headers", []),
                    (encoded_name, request_id.encode("latin-1")),
                ]
            await send(message)

        try:
            await app(scope, receive, send_with_id)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s -> %d in %.1fms [%s]",
                scope.get("method"),
                scope.get("path"),
                status,
                elapsed_ms,
                request_id,
            )

    return middleware

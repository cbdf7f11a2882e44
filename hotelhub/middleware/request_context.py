"""
HotelHub Backend: Request Context Middleware
=============================================

What:  Tags every request with a correlation ID and writes one access line
       per request, naming the resource it addressed.
How:   The ID comes from the client's X-Request-ID header or is generated,
       lives in `request_id_var` while the request runs, and is echoed on the
       response. After routing, the access line reports the matched route
       template and its slug parameters rather than the raw URL, e.g.

           PUT /hotel/{hotel_slug}/room/{room_slug} hotel_slug=grand-1 room_slug=101 -> 200 4.2ms [1f3a9c2e]

Error bodies carry no request ID, so the X-Request-ID header is how a caller
matches a failure with the server log.
"""

import logging
import time
import uuid
from contextvars import ContextVar
from typing import Iterable

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

REQUEST_ID_HEADER = "X-Request-ID"

request_id_var: ContextVar[str] = ContextVar("request_id", default="")

access_logger = logging.getLogger("hotelhub.access")


def describe_target(request: Request) -> str:
    """Route template plus slug parameters, or the raw path when nothing matched."""
    route = request.scope.get("route")
    template = getattr(route, "path", None) or request.url.path
    params = request.scope.get("path_params") or {}
    if not params:
        return template
    rendered = " ".join(f"{name}={value}" for name, value in sorted(params.items()))
    return f"{template} {rendered}"


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Request ID propagation and access logging for the hotel/room API."""

    def __init__(self, app: ASGIApp, quiet_paths: Iterable[str] = ("/health",)):
        super().__init__(app)
        self.quiet_paths = frozenset(quiet_paths)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        token = request_id_var.set(rid)
        started = time.perf_counter()

        try:
            response = await call_next(request)
        finally:
            request_id_var.reset(token)

        response.headers[REQUEST_ID_HEADER] = rid

        if request.url.path not in self.quiet_paths:
            access_logger.log(
                level_for_status(response.status_code),
                "%s %s -> %d %.1fms [%s]",
                request.method,
                describe_target(request),
                response.status_code,
                (time.perf_counter() - started) * 1000,
                rid,
            )

        return response

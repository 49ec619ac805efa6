from __future__ import annotations

import time
from uuid import uuid4

import structlog
from starlette.datastructures import Headers, MutableHeaders
from starlette.types import ASGIApp, Message, Receive, Scope, Send

REQUEST_ID_HEADER = "X-Request-ID"
QUIET_PATHS = frozenset({"/", "/health"})


def resolve_request_id(scope: Scope) -> str:
    return Headers(scope=scope).get(REQUEST_ID_HEADER.lower()) or uuid4().hex


def _route_fields(scope: Scope) -> dict[str, object]:
    # The router writes the matched route and its params back into the shared scope.
    route = scope.get("route")
    fields: dict[str, object] = {"route": getattr(route, "path", None)}
    path_params = scope.get("path_params")
    if path_params:
        fields["path_params"] = dict(path_params)
    return fields


class RequestContextMiddleware:
    """Attach a request id to every HTTP exchange and log one line per request.

    The id is taken from the incoming ``X-Request-ID`` header when the client
    sends one, otherwise generated. It is stored on ``request.state``, bound
    into the structlog context for the duration of the request and echoed
    back on the response. The access line names the matched route template
    and its params (``difficulty`` or ``grid_id`` for the maze routes), and
    requests to ``/`` and ``/health`` are logged at debug.
    """

    def __init__(self, app: ASGIApp) -> None:
        self.app = app
        self.logger = structlog.get_logger("mazegrid.access")

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request_id = resolve_request_id(scope)
        scope.setdefault("state", {})["request_id"] = request_id

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        started_at = time.perf_counter()
        status_code = 500

        async def send_with_request_id(message: Message) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = int(message["status"])
                MutableHeaders(scope=message)[REQUEST_ID_HEADER] = request_id
            await send(message)

        try:
            await self.app(scope, receive, send_with_request_id)
        finally:
            path = scope.get("path")
            log = self.logger.debug if path in QUIET_PATHS else self.logger.info
            log(
                "http_request",
                method=scope.get("method"),
                path=path,
                status_code=status_code,
                duration_ms=round((time.perf_counter() - started_at) * 1000, 2),
                **_route_fields(scope),
            )
            structlog.contextvars.clear_contextvars()

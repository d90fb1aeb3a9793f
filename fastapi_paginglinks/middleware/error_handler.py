"""Problem-detail error handling middleware."""

from typing import Any

import structlog
from starlette.requests import Request
from starlette.responses import JSONResponse

from fastapi_paginglinks.core.errors import ProblemDetailBuilder

logger = structlog.get_logger()


class ErrorHandlerMiddleware:
    """Convert uncaught exceptions into ``application/problem+json`` responses."""

    def __init__(self, app: Any, builder: ProblemDetailBuilder | None = None) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.builder = builder or ProblemDetailBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize problem-detail documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            if response_started:
                # Too late for a problem response
                raise
            request = Request(scope)
            logger.exception("unhandled_error", path=request.url.path, method=request.method)
            response = JSONResponse(
                self.builder.problem(request, exc, 500),
                status_code=500,
                media_type=self.builder.media_type,
            )
            await response(scope, receive, send)

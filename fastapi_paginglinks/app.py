"""Application factory and server entry point."""

from __future__ import annotations

from typing import Iterable

import structlog
import uvicorn
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse

from fastapi_paginglinks.config import Settings, get_settings
from fastapi_paginglinks.core.errors import PaginationError, ProblemDetailBuilder
from fastapi_paginglinks.middleware import ErrorHandlerMiddleware

logger = structlog.get_logger()


async def pagination_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Answer invalid pagination input with a 400 problem-detail response."""
    builder = ProblemDetailBuilder()
    return JSONResponse(
        builder.problem(request, exc, 400),
        status_code=400,
        media_type=builder.media_type,
    )


def create_app(
    settings: Settings | None = None,
    *,
    routers: Iterable[APIRouter] = (),
    **kwargs,
) -> FastAPI:
    """Build a FastAPI app with problem-detail error handling and the given routers."""
    settings = settings or get_settings()

    app = FastAPI(**kwargs)
    app.state.settings = settings
    app.add_middleware(ErrorHandlerMiddleware)
    app.add_exception_handler(PaginationError, pagination_error_handler)

    for router in routers:
        app.include_router(router)
    return app


def parse_address(address: str) -> tuple[str, int]:
    """Split ``"host:port"`` into host and port. An empty host listens on all interfaces."""
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"Invalid listen address: {address!r}")
    host = host.strip("[]") or "0.0.0.0"
    return host, int(port)


def serve(app: FastAPI, settings: Settings | None = None) -> None:
    """Run the app with uvicorn on the configured address."""
    settings = settings or app.state.settings
    host, port = parse_address(settings.address)
    logger.info("server_start", host=host, port=port)
    uvicorn.run(app, host=host, port=port)

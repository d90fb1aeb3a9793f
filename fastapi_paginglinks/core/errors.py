"""Pagination errors and RFC 7807 problem-detail bodies."""

from typing import Any

from starlette.requests import Request

from fastapi_paginglinks.schemas.problem import ProblemDetail


class PaginationError(ValueError):
    """Invalid pagination input.

    Reserved for strategies that validate their parameters strictly. The
    page-number and offset/limit strategies never raise it: they fall back to
    defaults instead.
    """

    def __init__(self, param: str, value: str, reason: str):
        self.param = param
        self.value = value
        self.reason = reason

        super().__init__(f'Invalid value "{value}" for query parameter "{param}": {reason}')


def request_instance(request: Request) -> str:
    """Return the request target (path + query) used as a problem ``instance``."""
    instance = request.url.path
    if request.url.query:
        instance = f"{instance}?{request.url.query}"
    return instance


class ProblemDetailBuilder:
    """Build RFC 7807 problem-detail objects."""

    media_type = "application/problem+json"

    def problem(self, request: Request, exc: BaseException, status: int) -> dict[str, Any]:
        """Return a problem object describing ``exc`` for ``request``."""
        return ProblemDetail(
            title=str(exc),
            status=status,
            detail=str(exc),
            instance=request_instance(request),
        ).model_dump()

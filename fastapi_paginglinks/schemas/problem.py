"""Pydantic schema for RFC 7807 problem details."""

from pydantic import BaseModel


class ProblemDetail(BaseModel):
    """Problem-detail object returned for failed requests."""

    type: str = "about:blank"
    title: str
    status: int
    detail: str
    instance: str

"""Pydantic schemas for paginated responses and errors."""

from .problem import ProblemDetail
from .links import PagingLinksSchema

__all__ = ["PagingLinksSchema", "ProblemDetail"]

"""Pagination links (first/prev/next) for FastAPI collection endpoints."""

from .core.errors import PaginationError
from .core.links import PagingLink, PagingLinks
from .pagination import (
    OffsetLimitPagination,
    OffsetLimitState,
    PageNumberPagination,
    PageNumberState,
    Pagination,
)
from .routers import PaginatedRouter, paging_links

__all__ = [
    "OffsetLimitPagination",
    "OffsetLimitState",
    "PageNumberPagination",
    "PageNumberState",
    "PaginatedRouter",
    "Pagination",
    "PaginationError",
    "PagingLink",
    "PagingLinks",
    "paging_links",
]

"""Routers for paginated endpoints."""

from .base import PaginatedRoute, PaginatedRouter, paging_links

__all__ = ["PaginatedRoute", "PaginatedRouter", "paging_links"]

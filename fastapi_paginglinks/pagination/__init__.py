"""Pagination link strategies."""

from .base import Pagination
from .offset_limit import OffsetLimitPagination, OffsetLimitState
from .page_number import PageNumberPagination, PageNumberState

__all__ = [
    "OffsetLimitPagination",
    "OffsetLimitState",
    "PageNumberPagination",
    "PageNumberState",
    "Pagination",
]

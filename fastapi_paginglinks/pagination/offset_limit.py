"""Offset/limit pagination: ``?offset=N&limit=M``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi_paginglinks.core.links import PagingLink, Relation
from fastapi_paginglinks.utils.query_params import get_int, query_params, replace_query_params

from .base import Pagination

DEFAULT_PAGE_SIZE = 50


@dataclass(frozen=True)
class OffsetLimitState:
    """Parsed offset/limit position."""

    offset: int = 0
    limit: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class OffsetLimitPagination(Pagination[OffsetLimitState]):
    """Links for ``?offset=N&limit=M`` pagination.

    Neighbour links step by ``page_size`` and always carry
    ``limit=page_size``, whatever limit the request asked for. This keeps
    "first", "prev" and "next" pointing at pages of one stable size.
    """

    offset_param: str = "offset"
    limit_param: str = "limit"
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")

    def parse(self, url: Any) -> OffsetLimitState:
        """Read offset and limit, falling back to 0 and page_size."""
        params = query_params(url)
        offset = get_int(params, self.offset_param, 0)
        limit = get_int(params, self.limit_param, self.page_size)
        return OffsetLimitState(
            offset=offset if offset >= 0 else 0,
            limit=limit if limit > 0 else self.page_size,
        )

    def _link(self, rel: Relation, url: Any, offset: int) -> PagingLink:
        values = {self.offset_param: offset, self.limit_param: self.page_size}
        return PagingLink(rel, replace_query_params(url, values))

    def first_link(self, url: Any, state: OffsetLimitState | None = None) -> PagingLink | None:
        """Return the link to offset 0."""
        return self._link("first", url, 0)

    def prev_link(self, url: Any, state: OffsetLimitState | None = None) -> PagingLink | None:
        """Return the link one page back, or None when less than a page from the start."""
        state = self._state(url, state)
        if state.offset < self.page_size:
            return None
        return self._link("prev", url, state.offset - self.page_size)

    def next_link(self, url: Any, state: OffsetLimitState | None = None) -> PagingLink | None:
        """Return the link one page forward."""
        state = self._state(url, state)
        return self._link("next", url, state.offset + self.page_size)

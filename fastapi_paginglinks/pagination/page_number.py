"""Page-number pagination: ``?page=N``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi_paginglinks.core.links import PagingLink, Relation
from fastapi_paginglinks.utils.query_params import get_int, query_params, replace_query_params

from .base import Pagination


@dataclass(frozen=True)
class PageNumberState:
    """Parsed page-number position."""

    page: int = 1


@dataclass(frozen=True)
class PageNumberPagination(Pagination[PageNumberState]):
    """Links for ``?page=N`` pagination. Pages start at 1."""

    page_param: str = "page"

    def parse(self, url: Any) -> PageNumberState:
        """Read the page number; missing, malformed or < 1 means page 1."""
        page = get_int(query_params(url), self.page_param, 1)
        return PageNumberState(page=page if page >= 1 else 1)

    def _link(self, rel: Relation, url: Any, page: int) -> PagingLink:
        return PagingLink(rel, replace_query_params(url, {self.page_param: page}))

    def first_link(self, url: Any, state: PageNumberState | None = None) -> PagingLink | None:
        """Return the link to page 1."""
        return self._link("first", url, 1)

    def prev_link(self, url: Any, state: PageNumberState | None = None) -> PagingLink | None:
        """Return the link to page - 1, or None on page 1."""
        state = self._state(url, state)
        if state.page < 2:
            return None
        return self._link("prev", url, state.page - 1)

    def next_link(self, url: Any, state: PageNumberState | None = None) -> PagingLink | None:
        """Return the link to page + 1."""
        state = self._state(url, state)
        return self._link("next", url, state.page + 1)

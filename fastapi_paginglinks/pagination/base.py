"""Pagination contract shared by every link strategy."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from fastapi_paginglinks.core.links import PagingLink, PagingLinks

StateT = TypeVar("StateT")


class Pagination(Generic[StateT]):
    """Define the pagination link API.

    A strategy is immutable configuration (parameter names, page size).
    ``parse()`` reads a URL into a new state value; link accessors take that
    state, or parse the URL themselves when it is omitted. A single instance
    can therefore be shared between concurrent requests.

    ``parse()`` may raise ``PaginationError`` in stricter strategies; the
    shipped ones fall back to defaults instead.
    """

    def parse(self, url: Any) -> StateT:
        """Read pagination parameters from the URL's query string."""
        raise NotImplementedError

    def first_link(self, url: Any, state: StateT | None = None) -> PagingLink | None:
        """Return the link to the first page."""
        raise NotImplementedError

    def prev_link(self, url: Any, state: StateT | None = None) -> PagingLink | None:
        """Return the link to the previous page, if there is one."""
        raise NotImplementedError

    def next_link(self, url: Any, state: StateT | None = None) -> PagingLink | None:
        """Return the link to the next page."""
        raise NotImplementedError

    def last_link(self, url: Any, state: StateT | None = None) -> PagingLink | None:
        """Return the link to the last page.

        Always ``None``: the total number of results is not known here.
        """
        return None

    def links(self, url: Any, state: StateT | None = None) -> PagingLinks:
        """Return first/prev/next/last links, omitting the ones that do not apply."""
        if state is None:
            state = self.parse(url)
        candidates = (
            self.first_link(url, state),
            self.prev_link(url, state),
            self.next_link(url, state),
            self.last_link(url, state),
        )
        return PagingLinks(link for link in candidates if link is not None)

    def _state(self, url: Any, state: StateT | None) -> StateT:
        return self.parse(url) if state is None else state

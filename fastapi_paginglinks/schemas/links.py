"""Pydantic schema for pagination links in a response body."""

from typing import Optional

from pydantic import BaseModel

from fastapi_paginglinks.core.links import PagingLinks


class PagingLinksSchema(BaseModel):
    """``links`` member of a paginated response. Absent relations are None."""

    first: Optional[str] = None
    prev: Optional[str] = None
    next: Optional[str] = None
    last: Optional[str] = None

    @classmethod
    def from_links(cls, links: PagingLinks) -> "PagingLinksSchema":
        """Build the schema from computed paging links."""
        return cls(**links.as_dict())

"""Example FastAPI app with paginated collections.

Run with:
    python -m examples.articles_app
"""
from __future__ import annotations

from fastapi import Request

from fastapi_paginglinks.app import create_app, serve
from fastapi_paginglinks.config import load_settings
from fastapi_paginglinks.core.document import CollectionDocumentBuilder
from fastapi_paginglinks.routers import PaginatedRouter

settings = load_settings()

ARTICLES = [{"id": n, "title": f"Article {n}"} for n in range(1, 501)]

router = PaginatedRouter()
page_numbers = settings.page_number_pagination()
offsets = settings.offset_limit_pagination()


async def list_articles(request: Request) -> dict:
    state = page_numbers.parse(request.url)
    start = (state.page - 1) * settings.page_size
    return CollectionDocumentBuilder().build_collection(
        ARTICLES[start : start + settings.page_size],
        links=request.state.paging_links,
    )


async def list_articles_by_offset(request: Request) -> dict:
    state = offsets.parse(request.url)
    return CollectionDocumentBuilder().build_collection(
        ARTICLES[state.offset : state.offset + state.limit],
        links=request.state.paging_links,
        meta={"offset": state.offset, "limit": state.limit},
    )


router.add_paginated_route("/articles", list_articles, pagination=page_numbers)
router.add_paginated_route("/feed", list_articles_by_offset, pagination=offsets)

app = create_app(settings, routers=[router], title="Articles")


if __name__ == "__main__":
    serve(app)

"""Router scaffolding for paginated collection endpoints."""

from typing import Any, Callable

from fastapi import APIRouter, Depends, Request, Response
from fastapi.routing import APIRoute

from fastapi_paginglinks.core.links import PagingLinks
from fastapi_paginglinks.pagination.base import Pagination

LINK_HEADER = "Link"


def paging_links(pagination: Pagination[Any]) -> Callable[[Request, Response], PagingLinks]:
    """Return a FastAPI dependency that computes paging links for the request.

    The dependency sets the ``Link`` response header, stores the links on
    ``request.state.paging_links`` and returns them.
    ``PaginationError`` propagates to the application's exception handler.
    """

    def dependency(request: Request, response: Response) -> PagingLinks:
        links = pagination.links(request.url)
        if links:
            response.headers[LINK_HEADER] = str(links)
        request.state.paging_links = links
        return links

    return dependency


class PaginatedRoute(APIRoute):
    """APIRoute that copies the paging links onto every response.

    Headers set through the injected ``Response`` only reach the client when
    the endpoint returns plain data. This route also covers endpoints that
    return their own ``Response``.
    """

    def get_route_handler(self) -> Callable[[Request], Any]:
        handler = super().get_route_handler()

        async def paginated_handler(request: Request) -> Response:
            response = await handler(request)
            links = getattr(request.state, "paging_links", None)
            if links and LINK_HEADER not in response.headers:
                response.headers[LINK_HEADER] = str(links)
            return response

        return paginated_handler


class PaginatedRouter(APIRouter):
    """APIRouter wrapper that attaches paging links to collection routes."""

    def add_paginated_route(
        self,
        path: str,
        endpoint: Callable[..., Any],
        *,
        pagination: Pagination[Any],
        name: str | None = None,
        dependencies: list[Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Register a GET route whose responses carry a ``Link`` header.

        Args:
            path: URL path for the route (e.g., "/articles")
            endpoint: View function. It can read the computed links from
                ``request.state.paging_links``. It may return plain data or
                its own ``Response``; either way the ``Link`` header is set
                unless the endpoint already set one.
            pagination: Strategy used to build the links. Strategies are
                immutable, so one instance serves every request.
            name: Route name for OpenAPI documentation
            dependencies: Additional FastAPI dependencies for the route

        Examples:
            router = PaginatedRouter()

            async def list_articles(request: Request) -> dict:
                links = request.state.paging_links
                return {"data": [], "links": links.as_dict()}

            router.add_paginated_route(
                "/articles",
                list_articles,
                pagination=PageNumberPagination(),
            )
        """
        route_dependencies = [Depends(paging_links(pagination))]
        if dependencies:
            route_dependencies.extend(dependencies)

        self.add_api_route(
            path,
            endpoint,
            methods=["GET"],
            name=name,
            dependencies=route_dependencies,
            route_class_override=PaginatedRoute,
            **kwargs,
        )

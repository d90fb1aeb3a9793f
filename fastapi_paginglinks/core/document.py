"""Collection response documents with pagination links."""

from typing import Any, Iterable, Mapping

from .links import PagingLinks


class CollectionDocumentBuilder:
    """Build ``{"data": [...], "links": {...}}`` collection documents."""

    def build_collection(
        self,
        items: Iterable[Any],
        *,
        links: PagingLinks | Mapping[str, str] | None = None,
        meta: Mapping[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a document for a page of items."""
        document: dict[str, Any] = {"data": list(items)}
        if isinstance(links, PagingLinks):
            links = links.as_dict()
        if links:
            document["links"] = dict(links)
        if meta:
            document["meta"] = dict(meta)
        return document

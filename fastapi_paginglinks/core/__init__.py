"""Link value types, response documents and error helpers."""

from .document import CollectionDocumentBuilder
from .errors import PaginationError, ProblemDetailBuilder
from .links import PagingLink, PagingLinks

__all__ = [
    "CollectionDocumentBuilder",
    "PagingLink",
    "PagingLinks",
    "PaginationError",
    "ProblemDetailBuilder",
]

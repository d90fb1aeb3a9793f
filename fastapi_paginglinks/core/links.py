"""Navigation link value types rendered in the Web Linking (RFC 8288) format."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Literal, overload

Relation = Literal["first", "prev", "next", "last"]


@dataclass(frozen=True)
class PagingLink:
    """A single navigation link: relation name + target URL."""

    rel: Relation
    url: str

    def __str__(self) -> str:
        return f'<{self.url}>; rel="{self.rel}"'


class PagingLinks:
    """Ordered, immutable collection of paging links.

    ``str()`` renders a value usable as an HTTP ``Link`` header.
    """

    __slots__ = ("_links",)

    def __init__(self, links: Iterable[PagingLink] = ()) -> None:
        self._links: tuple[PagingLink, ...] = tuple(links)

    def __str__(self) -> str:
        return ",".join(str(link) for link in self._links)

    def __repr__(self) -> str:
        return f"PagingLinks({list(self._links)!r})"

    def __iter__(self) -> Iterator[PagingLink]:
        return iter(self._links)

    def __len__(self) -> int:
        return len(self._links)

    def __bool__(self) -> bool:
        return bool(self._links)

    @overload
    def __getitem__(self, index: int) -> PagingLink: ...

    @overload
    def __getitem__(self, index: slice) -> PagingLinks: ...

    def __getitem__(self, index: int | slice) -> PagingLink | PagingLinks:
        if isinstance(index, slice):
            return PagingLinks(self._links[index])
        return self._links[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PagingLinks):
            return self._links == other._links
        if isinstance(other, (list, tuple)):
            return list(self._links) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._links)

    def get(self, rel: str) -> PagingLink | None:
        """Return the link with the given relation, if present."""
        for link in self._links:
            if link.rel == rel:
                return link
        return None

    def as_dict(self) -> dict[str, str]:
        """Return ``{rel: url}`` in link order, for a JSON body ``links`` member."""
        return {link.rel: link.url for link in self._links}

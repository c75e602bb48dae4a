"""Application pagination – PagedResult."""
from __future__ import annotations

import dataclasses
import math
from typing import Any, Callable, Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class PagedResult(Generic[T]):
    """Offset-based page of results with computed navigation properties.

    ``total_count`` is the size of the full (filtered, ordered) sequence the
    page was cut from, not the number of ``items``.
    """

    items: list[T]
    total_count: int
    current_page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0 or self.total_count <= 0:
            return 0
        return math.ceil(self.total_count / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):  # noqa: ANN204
        return iter(self.items)

    def map(self, fn: Callable[[T], Any]) -> "PagedResult[Any]":
        """Return a new :class:`PagedResult` with each item transformed by *fn*."""
        return PagedResult(
            items=[fn(item) for item in self.items],
            total_count=self.total_count,
            current_page=self.current_page,
            page_size=self.page_size,
        )

    def metadata(
        self,
        previous_page_link: str | None = None,
        next_page_link: str | None = None,
    ) -> dict[str, Any]:
        """Pagination metadata as sent in the ``X-Pagination`` header."""
        return {
            "totalCount": self.total_count,
            "pageSize": self.page_size,
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "previousPageLink": previous_page_link,
            "nextPageLink": next_page_link,
        }

    @classmethod
    def create(cls, source: Sequence[T], page_number: int, page_size: int) -> "PagedResult[T]":
        """Build a :class:`PagedResult` by slicing *source*.

        Page number and size are validated by the caller; a page past the end
        simply has no items.
        """
        total = len(source)
        start = (page_number - 1) * page_size
        return cls(
            items=list(source[start:start + page_size]),
            total_count=total,
            current_page=page_number,
            page_size=page_size,
        )


__all__ = ["PagedResult"]

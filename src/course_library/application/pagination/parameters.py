"""Application pagination – ResourceQueryParameters."""
from __future__ import annotations

import dataclasses

DEFAULT_ORDER_BY = "Name"
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 20


@dataclasses.dataclass(frozen=True)
class ResourceQueryParameters:
    """Filter, search, sort, shape and paging input for a collection request.

    Every field except ``page_number`` is carried unchanged into the
    previous/next page links.
    """

    order_by: str = DEFAULT_ORDER_BY
    page_number: int = 1
    page_size: int = DEFAULT_PAGE_SIZE
    main_category: str | None = None
    search_query: str | None = None
    fields: str | None = None

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError("page_number must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    @classmethod
    def from_request(
        cls,
        *,
        order_by: str | None = None,
        page_number: int = 1,
        page_size: int | None = None,
        main_category: str | None = None,
        search_query: str | None = None,
        fields: str | None = None,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> "ResourceQueryParameters":
        """Build from raw query-string values, capping ``page_size`` at *max_page_size*."""
        size = default_page_size if page_size is None else page_size
        return cls(
            order_by=DEFAULT_ORDER_BY if order_by is None else order_by,
            page_number=page_number,
            page_size=min(size, max_page_size),
            main_category=main_category,
            search_query=search_query,
            fields=fields,
        )

    def with_page(self, page_number: int) -> "ResourceQueryParameters":
        return dataclasses.replace(self, page_number=page_number)


__all__ = ["DEFAULT_ORDER_BY", "DEFAULT_PAGE_SIZE", "MAX_PAGE_SIZE", "ResourceQueryParameters"]

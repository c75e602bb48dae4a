"""Resource links – page-relative collection URIs built from query parameters."""
from __future__ import annotations

from enum import Enum
from typing import Any
from urllib.parse import urlencode

from course_library.application.pagination import PagedResult, ResourceQueryParameters


class ResourceUriType(str, Enum):
    PREVIOUS_PAGE = "previous"
    CURRENT = "current"
    NEXT_PAGE = "next"


# Query-string names in the order they are rendered.
_QUERY_KEYS: tuple[tuple[str, str], ...] = (
    ("fields", "fields"),
    ("order_by", "orderBy"),
    ("page_number", "pageNumber"),
    ("page_size", "pageSize"),
    ("main_category", "mainCategory"),
    ("search_query", "searchQuery"),
)


class ResourceLinkBuilder:
    """Render collection URIs rooted at *base_url*.

    The builder does not check whether a previous/next page exists; use
    :meth:`pagination_links`, which consults the page flags, for that.
    """

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url.rstrip("?")

    @property
    def base_url(self) -> str:
        return self._base_url

    def build(self, parameters: ResourceQueryParameters, uri_type: ResourceUriType = ResourceUriType.CURRENT) -> str:
        page_number = parameters.page_number
        if uri_type is ResourceUriType.PREVIOUS_PAGE:
            page_number -= 1
        elif uri_type is ResourceUriType.NEXT_PAGE:
            page_number += 1

        values: dict[str, Any] = {
            "fields": parameters.fields,
            "order_by": parameters.order_by,
            "page_number": page_number,
            "page_size": parameters.page_size,
            "main_category": parameters.main_category,
            "search_query": parameters.search_query,
        }
        query = [
            (name, str(values[attr]))
            for attr, name in _QUERY_KEYS
            if values[attr] is not None and str(values[attr]) != ""
        ]
        return f"{self._base_url}?{urlencode(query)}"

    def pagination_links(
        self,
        parameters: ResourceQueryParameters,
        page: PagedResult[Any],
    ) -> tuple[str | None, str | None]:
        """Return ``(previous, next)`` links, ``None`` where the page has none."""
        previous_link = self.build(parameters, ResourceUriType.PREVIOUS_PAGE) if page.has_previous else None
        next_link = self.build(parameters, ResourceUriType.NEXT_PAGE) if page.has_next else None
        return previous_link, next_link


__all__ = ["ResourceLinkBuilder", "ResourceUriType"]

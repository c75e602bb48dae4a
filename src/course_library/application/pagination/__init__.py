"""Application pagination – paged results and collection query parameters."""
from course_library.application.pagination.page import PagedResult
from course_library.application.pagination.parameters import (
    DEFAULT_ORDER_BY,
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ResourceQueryParameters,
)

__all__ = [
    "DEFAULT_ORDER_BY",
    "DEFAULT_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "PagedResult",
    "ResourceQueryParameters",
]

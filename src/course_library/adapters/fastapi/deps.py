"""FastAPI adapter – reusable dependency functions and OpenAPI helpers."""
from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Query, Request

from course_library.application.pagination import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    ResourceQueryParameters,
)


async def resource_parameters(
    request: Request,
    order_by: str | None = Query(default=None, alias="orderBy", description="e.g. name,-age"),
    page_number: int = Query(default=1, ge=1, alias="pageNumber", description="1-based page number"),
    page_size: int | None = Query(default=None, ge=1, alias="pageSize", description="Items per page"),
    main_category: str | None = Query(default=None, alias="mainCategory"),
    search_query: str | None = Query(default=None, alias="searchQuery"),
    fields: str | None = Query(default=None, description="Comma-separated fields to return"),
) -> ResourceQueryParameters:
    """Decode collection query parameters; ``pageSize`` is capped at the configured maximum."""
    settings = getattr(request.app.state, "settings", None)
    default_size = getattr(settings, "default_page_size", DEFAULT_PAGE_SIZE)
    max_size = getattr(settings, "max_page_size", MAX_PAGE_SIZE)
    return ResourceQueryParameters.from_request(
        order_by=order_by,
        page_number=page_number,
        page_size=page_size,
        main_category=main_category,
        search_query=search_query,
        fields=fields,
        default_page_size=default_size,
        max_page_size=max_size,
    )


ResourceParametersDep = Annotated[ResourceQueryParameters, Depends(resource_parameters)]


_ERROR_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "code": {"type": "string"},
        "message": {"type": "string"},
        "detail": {"type": "object"},
        "correlation_id": {"type": "string", "nullable": True},
    },
    "required": ["code", "message"],
}

_DEFAULT_STATUS_DESCRIPTIONS: dict[int, str] = {
    400: "Validation error",
    404: "Resource not found",
    422: "Business rule violated",
    500: "Internal server error",
}

_CODES_FOR_STATUS: dict[int, str] = {
    400: "validation_error",
    404: "not_found",
    422: "business_rule_violation",
    500: "internal_error",
}


def error_responses(*codes: int) -> dict[int | str, dict[str, object]]:
    """Build a ``responses=`` dict documenting the error bodies for *codes*.

    Usage::

        @router.get("/authors/{authorId}", responses=error_responses(404))
        async def get_author(...): ...
    """
    result: dict[int | str, dict[str, object]] = {}
    for code in codes:
        description = _DEFAULT_STATUS_DESCRIPTIONS.get(code, "Error")
        result[code] = {
            "description": description,
            "content": {
                "application/json": {
                    "schema": _ERROR_SCHEMA,
                    "example": {
                        "code": _CODES_FOR_STATUS.get(code, "error"),
                        "message": description,
                        "correlation_id": "00000000-0000-0000-0000-000000000000",
                    },
                }
            },
        }
    return result


__all__ = ["ResourceParametersDep", "error_responses", "resource_parameters"]

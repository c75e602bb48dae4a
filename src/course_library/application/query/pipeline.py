"""Collection query pipeline – validate, order and page a candidate sequence.

Validation runs before the candidates are fetched, so a bad ``orderBy`` or
``fields`` value rejects the request without touching storage::

    pipeline = CollectionQueryPipeline(mapping_service, AuthorDto, Author)
    page = await pipeline.run(parameters, lambda: repository.get_authors(...))
"""
from __future__ import annotations

import dataclasses
from typing import Awaitable, Callable, Generic, Sequence, TypeVar

from course_library.application.pagination import PagedResult, ResourceQueryParameters
from course_library.application.query.errors import InvalidSortExpressionError
from course_library.application.query.mapping import PropertyMappingService
from course_library.application.query.ordering import apply_sort
from course_library.application.query.shaping import PropertyChecker
from course_library.application.query.sorting import ResolvedSortTerm, SortExpressionParser
from course_library.observability.logging import get_logger

T = TypeVar("T")

_log = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class PreparedQuery:
    """Validated, per-request query plan."""

    parameters: ResourceQueryParameters
    sort_terms: tuple[ResolvedSortTerm, ...]
    fields: tuple[str, ...] = ()


class CollectionQueryPipeline(Generic[T]):
    """Order and page entities of one type exposed through one DTO type."""

    def __init__(
        self,
        mapping_service: PropertyMappingService,
        source: type,
        destination: type,
        *,
        property_checker: PropertyChecker | None = None,
    ) -> None:
        self._parser = SortExpressionParser(mapping_service.get_property_mapping(source, destination))
        self._checker = property_checker
        self._resource = source.__name__

    def prepare(self, parameters: ResourceQueryParameters) -> PreparedQuery:
        """Validate *parameters*; raises before any sorting or paging happens."""
        try:
            sort_terms = self._parser.parse(parameters.order_by)
        except InvalidSortExpressionError as exc:
            _log.warning(
                "collection_query.rejected",
                resource=self._resource,
                code=exc.code,
                order_by=parameters.order_by,
            )
            raise
        fields: tuple[str, ...] = ()
        if self._checker is not None:
            fields = self._checker.resolve(parameters.fields)
        return PreparedQuery(parameters=parameters, sort_terms=sort_terms, fields=fields)

    def execute(self, candidates: Sequence[T], prepared: PreparedQuery) -> PagedResult[T]:
        ordered = apply_sort(candidates, prepared.sort_terms)
        page = PagedResult.create(ordered, prepared.parameters.page_number, prepared.parameters.page_size)
        _log.debug(
            "collection_query.paged",
            resource=self._resource,
            total_count=page.total_count,
            current_page=page.current_page,
            total_pages=page.total_pages,
        )
        return page

    async def run(
        self,
        parameters: ResourceQueryParameters,
        fetch: Callable[[], Awaitable[Sequence[T]]],
    ) -> tuple[PreparedQuery, PagedResult[T]]:
        prepared = self.prepare(parameters)
        candidates = await fetch()
        return prepared, self.execute(candidates, prepared)


__all__ = ["CollectionQueryPipeline", "PreparedQuery"]

"""Authors resource – list, fetch, create, delete."""

from __future__ import annotations

import json
from uuid import UUID

from fastapi import APIRouter, Query, Request, Response, status
from fastapi.responses import JSONResponse

from course_library.adapters.fastapi import ResourceParametersDep, error_responses
from course_library.api.dependencies import MappingServiceDep, RepositoryDep
from course_library.api.mapping import AUTHOR_PROPERTIES, author_from_dto, author_to_dto
from course_library.api.schemas import AuthorDto, AuthorForCreationDto
from course_library.application.query import CollectionQueryPipeline, ResourceLinkBuilder, shape
from course_library.domain.entities import Author
from course_library.kernel.errors import NotFoundError
from course_library.kernel.types.ids import EntityId
from course_library.observability.logging import get_logger

_log = get_logger(__name__)

router = APIRouter(prefix="/api/authors", tags=["authors"])

PAGINATION_HEADER = "X-Pagination"


@router.api_route("", methods=["GET", "HEAD"], name="GetAuthors", responses=error_responses(400))
async def get_authors(
    request: Request,
    parameters: ResourceParametersDep,
    repository: RepositoryDep,
    mapping_service: MappingServiceDep,
) -> JSONResponse:
    pipeline: CollectionQueryPipeline[Author] = CollectionQueryPipeline(
        mapping_service, AuthorDto, Author, property_checker=AUTHOR_PROPERTIES
    )
    prepared, page = await pipeline.run(
        parameters,
        lambda: repository.get_authors(parameters.main_category, parameters.search_query),
    )

    links = ResourceLinkBuilder(str(request.url_for("GetAuthors")))
    previous_link, next_link = links.pagination_links(parameters, page)

    body = [
        shape(author_to_dto(author).model_dump(mode="json", by_alias=True), prepared.fields)
        for author in page.items
    ]
    return JSONResponse(
        content=body,
        headers={PAGINATION_HEADER: json.dumps(page.metadata(previous_link, next_link))},
    )


@router.options("", name="GetAuthorsOptions")
async def get_authors_options() -> Response:
    return Response(status_code=status.HTTP_200_OK, headers={"Allow": "GET,OPTIONS,POST"})


@router.get("/{author_id}", name="GetAuthor", responses=error_responses(400, 404))
async def get_author(
    author_id: UUID,
    repository: RepositoryDep,
    fields: str | None = Query(default=None),
) -> JSONResponse:
    names = AUTHOR_PROPERTIES.resolve(fields)
    author = await repository.get_author(EntityId.from_uuid(author_id))
    if author is None:
        raise NotFoundError("Author", str(author_id))
    return JSONResponse(content=shape(author_to_dto(author).model_dump(mode="json", by_alias=True), names))


@router.post("", name="CreateAuthor", status_code=status.HTTP_201_CREATED, response_model=AuthorDto)
async def create_author(
    author: AuthorForCreationDto,
    request: Request,
    response: Response,
    repository: RepositoryDep,
) -> AuthorDto:
    entity = author_from_dto(author)
    await repository.add_author(entity)
    await repository.save()

    _log.info("author.created", author_id=str(entity.id), courses=len(entity.courses))
    response.headers["Location"] = str(request.url_for("GetAuthor", author_id=str(entity.id)))
    return author_to_dto(entity)


@router.delete(
    "/{author_id}",
    name="DeleteAuthor",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=error_responses(404),
)
async def delete_author(author_id: UUID, repository: RepositoryDep) -> Response:
    author = await repository.get_author(EntityId.from_uuid(author_id))
    if author is None:
        raise NotFoundError("Author", str(author_id))

    await repository.delete_author(author)
    await repository.save()
    _log.info("author.deleted", author_id=str(author.id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]

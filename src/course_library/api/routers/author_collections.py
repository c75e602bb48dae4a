"""Author collections – fetch and create several authors in one request.

The multi-get path segment is ``(id1,id2,...)``.
"""

from __future__ import annotations

from fastapi import APIRouter, Request, Response, status

from course_library.adapters.fastapi import error_responses
from course_library.api.dependencies import RepositoryDep, author_ids_binder
from course_library.api.mapping import author_from_dto, author_to_dto
from course_library.api.schemas import AuthorDto, AuthorForCreationDto
from course_library.kernel.errors import NotFoundError
from course_library.observability.logging import get_logger

_log = get_logger(__name__)

router = APIRouter(prefix="/api/authorcollections", tags=["authors"])


@router.get(
    "/({ids})",
    name="GetAuthorCollection",
    response_model=list[AuthorDto],
    responses=error_responses(400, 404),
)
async def get_author_collection(ids: str, repository: RepositoryDep) -> list[AuthorDto]:
    author_ids = author_ids_binder.bind(ids)
    authors = await repository.get_authors_by_ids(author_ids)

    if len(author_ids) != len(authors):
        raise NotFoundError("Author collection", ids)

    return [author_to_dto(author) for author in authors]


@router.post(
    "",
    name="CreateAuthorCollection",
    status_code=status.HTTP_201_CREATED,
    response_model=list[AuthorDto],
)
async def create_author_collection(
    author_collection: list[AuthorForCreationDto],
    request: Request,
    response: Response,
    repository: RepositoryDep,
) -> list[AuthorDto]:
    entities = [author_from_dto(author) for author in author_collection]
    for entity in entities:
        await repository.add_author(entity)
    await repository.save()

    ids_as_string = ",".join(str(entity.id) for entity in entities)
    _log.info("author_collection.created", count=len(entities))
    response.headers["Location"] = str(request.url_for("GetAuthorCollection", ids=ids_as_string))
    return [author_to_dto(entity) for entity in entities]


__all__ = ["router"]

"""Courses of an author – list, fetch, create, full and partial update, delete.

PUT and PATCH upsert: targeting a course id that does not exist yet creates
the course under that id.
"""

from __future__ import annotations

from typing import Any
from uuid import UUID

import jsonpatch
import jsonpointer
from fastapi import APIRouter, Body, Request, Response, status
from pydantic import ValidationError as PydanticValidationError

from course_library.adapters.fastapi import error_responses, validation_problem
from course_library.api.dependencies import RepositoryDep
from course_library.api.mapping import (
    apply_course_update,
    course_from_dto,
    course_to_dto,
    course_to_update_dto,
)
from course_library.api.schemas import CourseDto, CourseForCreationDto, CourseForUpdateDto
from course_library.domain.entities import Course
from course_library.domain.repository import CourseLibraryRepository
from course_library.kernel.errors import BusinessRuleError, NotFoundError
from course_library.kernel.types.ids import EntityId
from course_library.observability.logging import get_logger

_log = get_logger(__name__)

router = APIRouter(prefix="/api/authors/{author_id}/courses", tags=["courses"])


async def _require_author(repository: CourseLibraryRepository, author_id: UUID) -> EntityId:
    key = EntityId.from_uuid(author_id)
    if not await repository.author_exists(key):
        raise NotFoundError("Author", str(author_id))
    return key


def _apply_patch(document: list[dict[str, Any]], course: CourseForUpdateDto) -> CourseForUpdateDto:
    """Apply an RFC 6902 patch to *course* and re-validate the result."""
    target = course.model_dump(mode="json", by_alias=True)
    try:
        patched = jsonpatch.apply_patch(target, document)
    except (jsonpatch.JsonPatchException, jsonpointer.JsonPointerException) as exc:
        raise BusinessRuleError(
            "One or more validation errors occurred.",
            code="validation_error",
            errors=[{"field": "CourseForUpdateDto", "message": str(exc)}],
            cause=exc,
        ) from exc
    try:
        return CourseForUpdateDto.model_validate(patched)
    except PydanticValidationError as exc:
        raise validation_problem(exc.errors(), resource="CourseForUpdateDto") from exc


async def _create_at(
    request: Request,
    response: Response,
    repository: CourseLibraryRepository,
    author_id: EntityId,
    course: Course,
) -> CourseDto:
    await repository.add_course(author_id, course)
    await repository.save()
    _log.info("course.created", author_id=str(author_id), course_id=str(course.id))
    response.status_code = status.HTTP_201_CREATED
    response.headers["Location"] = str(
        request.url_for("GetCourseForAuthor", author_id=str(author_id), course_id=str(course.id))
    )
    return course_to_dto(course)


@router.get("", name="GetCoursesForAuthor", response_model=list[CourseDto], responses=error_responses(404))
async def get_courses_for_author(author_id: UUID, repository: RepositoryDep) -> list[CourseDto]:
    key = await _require_author(repository, author_id)
    return [course_to_dto(course) for course in await repository.get_courses(key)]


@router.get(
    "/{course_id}",
    name="GetCourseForAuthor",
    response_model=CourseDto,
    responses=error_responses(404),
)
async def get_course_for_author(author_id: UUID, course_id: UUID, repository: RepositoryDep) -> CourseDto:
    key = await _require_author(repository, author_id)
    course = await repository.get_course(key, EntityId.from_uuid(course_id))
    if course is None:
        raise NotFoundError("Course", str(course_id))
    return course_to_dto(course)


@router.post(
    "",
    name="CreateCourseForAuthor",
    status_code=status.HTTP_201_CREATED,
    response_model=CourseDto,
    responses=error_responses(404, 422),
)
async def create_course_for_author(
    author_id: UUID,
    course: CourseForCreationDto,
    request: Request,
    response: Response,
    repository: RepositoryDep,
) -> CourseDto:
    key = await _require_author(repository, author_id)
    return await _create_at(request, response, repository, key, course_from_dto(course))


@router.put(
    "/{course_id}",
    name="UpdateCourseForAuthor",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses=error_responses(404, 422),
)
async def update_course_for_author(
    author_id: UUID,
    course_id: UUID,
    course: CourseForUpdateDto,
    request: Request,
    response: Response,
    repository: RepositoryDep,
) -> Any:
    key = await _require_author(repository, author_id)
    existing = await repository.get_course(key, EntityId.from_uuid(course_id))

    if existing is None:
        created = course_from_dto(course, EntityId.from_uuid(course_id))
        return await _create_at(request, response, repository, key, created)

    apply_course_update(course, existing)
    await repository.update_course(existing)
    await repository.save()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch(
    "/{course_id}",
    name="PartiallyUpdateCourseForAuthor",
    status_code=status.HTTP_204_NO_CONTENT,
    response_model=None,
    responses=error_responses(404, 422),
)
async def partially_update_course_for_author(
    author_id: UUID,
    course_id: UUID,
    request: Request,
    response: Response,
    repository: RepositoryDep,
    patch_document: list[dict[str, Any]] = Body(..., media_type="application/json-patch+json"),
) -> Any:
    key = await _require_author(repository, author_id)
    existing = await repository.get_course(key, EntityId.from_uuid(course_id))

    if existing is None:
        blank = CourseForUpdateDto.model_construct(title="", description="")
        patched = _apply_patch(patch_document, blank)
        created = course_from_dto(patched, EntityId.from_uuid(course_id))
        return await _create_at(request, response, repository, key, created)

    patched = _apply_patch(patch_document, course_to_update_dto(existing))
    apply_course_update(patched, existing)
    await repository.update_course(existing)
    await repository.save()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/{course_id}",
    name="DeleteCourseForAuthor",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=error_responses(404),
)
async def delete_course_for_author(author_id: UUID, course_id: UUID, repository: RepositoryDep) -> Response:
    key = await _require_author(repository, author_id)
    course = await repository.get_course(key, EntityId.from_uuid(course_id))
    if course is None:
        raise NotFoundError("Course", str(course_id))

    await repository.delete_course(course)
    await repository.save()
    _log.info("course.deleted", author_id=str(key), course_id=str(course.id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]

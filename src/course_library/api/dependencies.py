"""Request-scoped dependencies resolved from application state."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from course_library.application.query import CompositeKeyBinder, PropertyMappingService
from course_library.domain.repository import CourseLibraryRepository
from course_library.kernel.types.ids import EntityId


def get_repository(request: Request) -> CourseLibraryRepository:
    return request.app.state.repository


def get_mapping_service(request: Request) -> PropertyMappingService:
    return request.app.state.property_mapping_service


RepositoryDep = Annotated[CourseLibraryRepository, Depends(get_repository)]
MappingServiceDep = Annotated[PropertyMappingService, Depends(get_mapping_service)]

author_ids_binder: CompositeKeyBinder[EntityId] = CompositeKeyBinder(EntityId.parse)


__all__ = [
    "MappingServiceDep",
    "RepositoryDep",
    "author_ids_binder",
    "get_mapping_service",
    "get_repository",
]

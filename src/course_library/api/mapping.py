"""Entity ↔ DTO copying and the property mapping registrations."""

from __future__ import annotations

from course_library.application.query import (
    PropertyChecker,
    PropertyMapping,
    PropertyMappingService,
    PropertyMappingTable,
)
from course_library.api.schemas import (
    AuthorDto,
    AuthorForCreationDto,
    CourseDto,
    CourseForManipulationDto,
    CourseForUpdateDto,
    exposed_fields,
)
from course_library.domain.entities import Author, Course
from course_library.kernel.types.ids import EntityId

AUTHOR_PROPERTY_MAPPING = PropertyMappingTable(
    AuthorDto,
    Author,
    [
        PropertyMapping.of("Id", "id"),
        PropertyMapping.of("MainCategory", "main_category"),
        PropertyMapping.of("Age", "date_of_birth", revert=True),
        PropertyMapping.of("Name", "first_name", "last_name"),
    ],
    default_sort="Name",
)

AUTHOR_PROPERTIES = PropertyChecker(exposed_fields(AuthorDto))


def build_property_mapping_service() -> PropertyMappingService:
    """The single construction point for sort mappings, called at startup."""
    return PropertyMappingService([AUTHOR_PROPERTY_MAPPING])


def author_to_dto(author: Author) -> AuthorDto:
    return AuthorDto(
        id=str(author.id),
        name=author.name,
        age=author.age(),
        main_category=author.main_category,
    )


def course_to_dto(course: Course) -> CourseDto:
    return CourseDto(
        id=str(course.id),
        title=course.title,
        description=course.description,
        author_id=str(course.author_id),
    )


def course_from_dto(dto: CourseForManipulationDto, course_id: EntityId | None = None) -> Course:
    return Course(course_id or EntityId.generate(), dto.title, dto.description)


def author_from_dto(dto: AuthorForCreationDto) -> Author:
    return Author(
        EntityId.generate(),
        dto.first_name,
        dto.last_name,
        dto.date_of_birth,
        dto.main_category,
        courses=[course_from_dto(course) for course in dto.courses],
    )


def course_to_update_dto(course: Course) -> CourseForUpdateDto:
    """Current state of *course* as a patch target (validation deferred)."""
    return CourseForUpdateDto.model_construct(title=course.title, description=course.description)


def apply_course_update(dto: CourseForManipulationDto, course: Course) -> None:
    course.title = dto.title
    course.description = dto.description


__all__ = [
    "AUTHOR_PROPERTIES",
    "AUTHOR_PROPERTY_MAPPING",
    "apply_course_update",
    "author_from_dto",
    "author_to_dto",
    "build_property_mapping_service",
    "course_from_dto",
    "course_to_dto",
    "course_to_update_dto",
]

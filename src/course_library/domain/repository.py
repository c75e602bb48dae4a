"""Repository port – storage collaborator for authors and courses."""

from __future__ import annotations

import abc
from typing import Iterable

from course_library.domain.entities import Author, Course
from course_library.kernel.types.ids import EntityId


class CourseLibraryRepository(abc.ABC):
    """Port: storage for authors and their courses.

    Listing methods return fully materialised, already filtered
    candidate lists; ordering and paging happen in the query pipeline.
    Mutations are staged until :meth:`save` is awaited.
    """

    @abc.abstractmethod
    async def get_authors(
        self,
        main_category: str | None = None,
        search_query: str | None = None,
    ) -> list[Author]: ...

    @abc.abstractmethod
    async def get_authors_by_ids(self, author_ids: Iterable[EntityId]) -> list[Author]: ...

    @abc.abstractmethod
    async def get_author(self, author_id: EntityId) -> Author | None: ...

    @abc.abstractmethod
    async def author_exists(self, author_id: EntityId) -> bool: ...

    @abc.abstractmethod
    async def add_author(self, author: Author) -> None: ...

    @abc.abstractmethod
    async def delete_author(self, author: Author) -> None: ...

    @abc.abstractmethod
    async def get_courses(self, author_id: EntityId) -> list[Course]: ...

    @abc.abstractmethod
    async def get_course(self, author_id: EntityId, course_id: EntityId) -> Course | None: ...

    @abc.abstractmethod
    async def add_course(self, author_id: EntityId, course: Course) -> None: ...

    @abc.abstractmethod
    async def update_course(self, course: Course) -> None: ...

    @abc.abstractmethod
    async def delete_course(self, course: Course) -> None: ...

    @abc.abstractmethod
    async def save(self) -> bool: ...


__all__ = ["CourseLibraryRepository"]

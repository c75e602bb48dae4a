"""In-memory adapter – CourseLibraryRepository backed by dicts."""

from __future__ import annotations

from typing import Iterable

from course_library.domain.entities import Author, Course
from course_library.domain.repository import CourseLibraryRepository
from course_library.domain.specifications import author_filter
from course_library.kernel.types.ids import EntityId
from course_library.observability.logging import get_logger

_log = get_logger(__name__)


class InMemoryCourseLibraryRepository(CourseLibraryRepository):
    """Keeps authors (and their courses) in insertion order.

    Listings return new lists so callers may sort or slice them freely.
    Writes are applied immediately; :meth:`save` reports success.
    """

    def __init__(self, authors: Iterable[Author] = ()) -> None:
        self._authors: dict[EntityId, Author] = {}
        for author in authors:
            self._store_author(author)

    def _store_author(self, author: Author) -> None:
        for course in author.courses:
            course.author_id = author.id
        self._authors[author.id] = author

    # ------------------------------------------------------------------
    # Authors
    # ------------------------------------------------------------------

    async def get_authors(
        self,
        main_category: str | None = None,
        search_query: str | None = None,
    ) -> list[Author]:
        spec = author_filter(main_category, search_query)
        return [author for author in self._authors.values() if spec.is_satisfied_by(author)]

    async def get_authors_by_ids(self, author_ids: Iterable[EntityId]) -> list[Author]:
        # Requested order, duplicates collapsed.
        wanted = dict.fromkeys(author_ids)
        return [self._authors[author_id] for author_id in wanted if author_id in self._authors]

    async def get_author(self, author_id: EntityId) -> Author | None:
        return self._authors.get(author_id)

    async def author_exists(self, author_id: EntityId) -> bool:
        return author_id in self._authors

    async def add_author(self, author: Author) -> None:
        if author.id in self._authors:
            author.id = EntityId.generate()
        self._store_author(author)
        _log.debug("repository.author_added", author_id=str(author.id), courses=len(author.courses))

    async def delete_author(self, author: Author) -> None:
        self._authors.pop(author.id, None)
        _log.debug("repository.author_deleted", author_id=str(author.id))

    # ------------------------------------------------------------------
    # Courses
    # ------------------------------------------------------------------

    async def get_courses(self, author_id: EntityId) -> list[Course]:
        author = self._authors.get(author_id)
        if author is None:
            return []
        return sorted(author.courses, key=lambda c: c.title)

    async def get_course(self, author_id: EntityId, course_id: EntityId) -> Course | None:
        author = self._authors.get(author_id)
        if author is None:
            return None
        return next((c for c in author.courses if c.id == course_id), None)

    async def add_course(self, author_id: EntityId, course: Course) -> None:
        author = self._authors.get(author_id)
        if author is None:
            raise ValueError(f"author {author_id} does not exist")
        course.author_id = author_id
        author.courses.append(course)
        _log.debug("repository.course_added", author_id=str(author_id), course_id=str(course.id))

    async def update_course(self, course: Course) -> None:
        # Courses are updated in place; nothing to stage.
        _log.debug("repository.course_updated", course_id=str(course.id))

    async def delete_course(self, course: Course) -> None:
        if course.author_id is None:
            return
        author = self._authors.get(course.author_id)
        if author is not None:
            author.courses = [c for c in author.courses if c.id != course.id]
        _log.debug("repository.course_deleted", course_id=str(course.id))

    async def save(self) -> bool:
        return True


__all__ = ["InMemoryCourseLibraryRepository"]

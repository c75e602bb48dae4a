"""Author and Course entities."""

from __future__ import annotations

import datetime

from course_library.kernel.ddd.entity import Entity
from course_library.kernel.types.ids import EntityId


class Course(Entity):
    """A course written by a single author."""

    def __init__(
        self,
        id: EntityId,  # noqa: A002
        title: str,
        description: str | None = None,
        author_id: EntityId | None = None,
    ) -> None:
        super().__init__(id)
        self.title = title
        self.description = description
        self.author_id = author_id

    def __repr__(self) -> str:  # pragma: no cover
        return f"Course(id={self.id!r}, title={self.title!r})"


class Author(Entity):
    """An author and the courses they own."""

    def __init__(
        self,
        id: EntityId,  # noqa: A002
        first_name: str,
        last_name: str,
        date_of_birth: datetime.date,
        main_category: str,
        courses: list[Course] | None = None,
    ) -> None:
        super().__init__(id)
        self.first_name = first_name
        self.last_name = last_name
        self.date_of_birth = date_of_birth
        self.main_category = main_category
        self.courses: list[Course] = courses or []

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def age(self, today: datetime.date | None = None) -> int:
        """Age in whole years on *today* (defaults to the current date)."""
        today = today or datetime.date.today()
        years = today.year - self.date_of_birth.year
        if (today.month, today.day) < (self.date_of_birth.month, self.date_of_birth.day):
            years -= 1
        return years

    def __repr__(self) -> str:  # pragma: no cover
        return f"Author(id={self.id!r}, name={self.name!r})"


__all__ = ["Author", "Course"]

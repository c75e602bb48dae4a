"""Unit tests for the author/course domain."""

from __future__ import annotations

import datetime

from course_library.domain.entities import Author, Course
from course_library.domain.specifications import author_filter, in_main_category, matches_search
from course_library.kernel.types.ids import EntityId


def make_author(first: str = "Nancy", last: str = "Swashbuckler Rye", category: str = "Rum") -> Author:
    return Author(EntityId.generate(), first, last, datetime.date(1668, 5, 21), category)


class TestAuthor:
    def test_name_joins_first_and_last(self) -> None:
        assert make_author().name == "Nancy Swashbuckler Rye"

    def test_age_before_birthday(self) -> None:
        assert make_author().age(today=datetime.date(2024, 5, 20)) == 355

    def test_age_on_birthday(self) -> None:
        assert make_author().age(today=datetime.date(2024, 5, 21)) == 356

    def test_courses_default_to_empty_list(self) -> None:
        first, second = make_author(), make_author()
        first.courses.append(Course(EntityId.generate(), "Rum"))
        assert second.courses == []


class TestAuthorSpecifications:
    def test_main_category_is_exact(self) -> None:
        assert in_main_category("Rum").is_satisfied_by(make_author())
        assert not in_main_category("Ru").is_satisfied_by(make_author())

    def test_search_matches_any_name_part(self) -> None:
        author = make_author()
        assert matches_search("Swash").is_satisfied_by(author)
        assert matches_search("anc").is_satisfied_by(author)
        assert matches_search("Ru").is_satisfied_by(author)
        assert not matches_search("Maps").is_satisfied_by(author)

    def test_filter_combines(self) -> None:
        spec = author_filter("Rum", "Nancy")
        assert spec.is_satisfied_by(make_author())
        assert not spec.is_satisfied_by(make_author(first="Atherton", last="Crow"))

    def test_filter_without_criteria_accepts_all(self) -> None:
        assert author_filter(None, "").is_satisfied_by(make_author(category="Maps"))

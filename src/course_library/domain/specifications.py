"""Author filters used by the storage collaborator."""

from __future__ import annotations

from course_library.domain.entities import Author
from course_library.kernel.ddd.specification import AlwaysSatisfied, LambdaSpecification, Specification


def in_main_category(main_category: str) -> Specification[Author]:
    """Exact (trimmed) main category match."""
    wanted = main_category.strip()
    return LambdaSpecification(lambda a: a.main_category == wanted, name="in_main_category")


def matches_search(search_query: str) -> Specification[Author]:
    """Substring match on main category, first name or last name."""
    needle = search_query.strip()
    return LambdaSpecification(
        lambda a: needle in a.main_category or needle in a.first_name or needle in a.last_name,
        name="matches_search",
    )


def author_filter(main_category: str | None = None, search_query: str | None = None) -> Specification[Author]:
    """Combine the optional category filter and free-text search; blank values are ignored."""
    spec: Specification[Author] = AlwaysSatisfied()
    if main_category is not None and main_category.strip():
        spec = spec & in_main_category(main_category)
    if search_query is not None and search_query.strip():
        spec = spec & matches_search(search_query)
    return spec


__all__ = ["author_filter", "in_main_category", "matches_search"]

"""Sort expressions – ``"name, -mainCategory"`` to resolved storage sort terms."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from course_library.application.query.errors import InvalidSortExpressionError, UnknownFieldError

if TYPE_CHECKING:
    from course_library.application.query.mapping import PropertyMappingTable

DESCENDING_PREFIX = "-"
TERM_SEPARATOR = ","


@dataclasses.dataclass(frozen=True, slots=True)
class SortTerm:
    """An exposed property name with its requested direction."""

    exposed_name: str
    descending: bool = False


@dataclasses.dataclass(frozen=True, slots=True)
class ResolvedSortTerm:
    """A storage field with its final direction (requested XOR revert)."""

    field: str
    descending: bool = False


def parse_terms(expression: str | None) -> tuple[SortTerm, ...]:
    """Split *expression* into :class:`SortTerm` objects, left to right.

    A blank expression yields ``()``.  A term that is empty or consists of
    the descending prefix alone raises :class:`InvalidSortExpressionError`.
    """
    if expression is None or not expression.strip():
        return ()
    terms: list[SortTerm] = []
    for clause in expression.split(TERM_SEPARATOR):
        token = clause.strip()
        descending = token.startswith(DESCENDING_PREFIX)
        name = token[len(DESCENDING_PREFIX):].strip() if descending else token
        if not name:
            raise InvalidSortExpressionError(expression, reason="empty sort term")
        terms.append(SortTerm(name, descending))
    return tuple(terms)


class SortExpressionParser:
    """Resolve sort expressions against one :class:`PropertyMappingTable`."""

    def __init__(self, table: "PropertyMappingTable") -> None:
        self._table = table

    @property
    def table(self) -> "PropertyMappingTable":
        return self._table

    def parse(self, expression: str | None) -> tuple[ResolvedSortTerm, ...]:
        """Return storage-level sort terms in precedence order.

        Blank input falls back to the table's default property, ascending.
        """
        terms = parse_terms(expression) or (SortTerm(self._table.default_sort),)
        resolved: list[ResolvedSortTerm] = []
        for term in terms:
            try:
                targets = self._table.resolve(term.exposed_name)
            except UnknownFieldError as exc:
                raise InvalidSortExpressionError(
                    expression or "",
                    field=term.exposed_name,
                    cause=exc,
                ) from exc
            resolved.extend(
                ResolvedSortTerm(target.field, term.descending != target.revert)
                for target in targets
            )
        return tuple(resolved)


__all__ = [
    "DESCENDING_PREFIX",
    "ResolvedSortTerm",
    "SortExpressionParser",
    "SortTerm",
    "parse_terms",
]

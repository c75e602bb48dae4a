"""Ordering – stable multi-key sort from resolved sort terms.

Accessors are resolved once per call and folded into a single comparator,
so the first term decides and later terms only break ties.
"""
from __future__ import annotations

import functools
import operator
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Sequence, TypeVar

from course_library.application.query.sorting import ResolvedSortTerm

T = TypeVar("T")

Accessor = Callable[[Any], Any]
Comparator = Callable[[Any, Any], int]


def compare_values(left: Any, right: Any) -> int:
    """Natural three-way comparison; ``None`` sorts before any value."""
    if left is None or right is None:
        return (left is not None) - (right is not None)
    return (left > right) - (left < right)


def accessor_for(sample: Any) -> Callable[[str], Accessor]:
    """Pick item lookup for mappings and attribute lookup for everything else."""
    if isinstance(sample, Mapping):
        return operator.itemgetter
    return operator.attrgetter


def build_comparator(
    terms: Sequence[ResolvedSortTerm],
    accessor_factory: Callable[[str], Accessor] = operator.attrgetter,
) -> Comparator:
    """Compose one comparator from *terms* in precedence order."""
    keys = [(accessor_factory(term.field), -1 if term.descending else 1) for term in terms]

    def compare(left: Any, right: Any) -> int:
        for get, sign in keys:
            result = compare_values(get(left), get(right))
            if result:
                return result * sign
        return 0

    return compare


def apply_sort(items: Iterable[T], terms: Sequence[ResolvedSortTerm]) -> list[T]:
    """Return a new list of *items* ordered by *terms*.

    ``sorted`` is stable, so elements equal on every term keep their input
    order.  The input is never mutated.
    """
    materialised = list(items)
    if not terms or len(materialised) < 2:
        return materialised
    comparator = build_comparator(terms, accessor_for(materialised[0]))
    return sorted(materialised, key=functools.cmp_to_key(comparator))


__all__ = ["accessor_for", "apply_sort", "build_comparator", "compare_values"]

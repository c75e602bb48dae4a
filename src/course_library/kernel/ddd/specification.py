"""Specification pattern – composable boolean predicates over candidates."""

from __future__ import annotations

import abc
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class Specification(abc.ABC, Generic[T]):
    """Abstract base for specifications – combined with ``&``.

    Example::

        spec = in_main_category("Rum") & matches_search("ry")
        matching = [a for a in authors if spec.is_satisfied_by(a)]
    """

    @abc.abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __and__(self, other: "Specification[T]") -> "AndSpecification[T]":
        return AndSpecification(self, other)


class AndSpecification(Specification[T]):
    def __init__(self, left: Specification[T], right: Specification[T]) -> None:
        self._left = left
        self._right = right

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._left.is_satisfied_by(candidate) and self._right.is_satisfied_by(candidate)


class LambdaSpecification(Specification[T]):
    """Wraps a plain callable as a ``Specification``."""

    def __init__(self, predicate: Callable[[T], bool], *, name: str = "") -> None:
        self._predicate = predicate
        self.name: str = name or getattr(predicate, "__name__", "<lambda>")

    def is_satisfied_by(self, candidate: T) -> bool:
        return self._predicate(candidate)

    def __repr__(self) -> str:  # pragma: no cover
        return f"LambdaSpecification({self.name!r})"


class AlwaysSatisfied(Specification[T]):
    """Identity element for ``&``."""

    def is_satisfied_by(self, candidate: T) -> bool:  # noqa: ARG002
        return True


__all__ = [
    "AlwaysSatisfied",
    "AndSpecification",
    "LambdaSpecification",
    "Specification",
]

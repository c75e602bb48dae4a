"""Unit tests for DDD building blocks (Entity, Specification)."""

from __future__ import annotations

import pytest

from course_library.kernel.ddd import (
    AlwaysSatisfied,
    AndSpecification,
    Entity,
    LambdaSpecification,
)
from course_library.kernel.types.ids import EntityId


class Widget(Entity):
    pass


class Gadget(Entity):
    pass


class TestEntity:
    def test_equal_by_id(self) -> None:
        eid = EntityId.generate()
        assert Widget(eid) == Widget(eid)

    def test_different_ids_not_equal(self) -> None:
        assert Widget(EntityId.generate()) != Widget(EntityId.generate())

    def test_different_types_not_equal(self) -> None:
        eid = EntityId.generate()
        assert Widget(eid) != Gadget(eid)

    def test_hash_follows_id(self) -> None:
        eid = EntityId.generate()
        assert len({Widget(eid), Widget(eid)}) == 1

    def test_id_can_be_reassigned(self) -> None:
        w = Widget(EntityId.generate())
        new_id = EntityId.generate()
        w.id = new_id
        assert w.id == new_id


class TestSpecification:
    def test_lambda(self) -> None:
        even = LambdaSpecification(lambda n: n % 2 == 0)
        assert even.is_satisfied_by(4)
        assert not even.is_satisfied_by(3)

    def test_and(self) -> None:
        spec = LambdaSpecification(lambda n: n > 0) & LambdaSpecification(lambda n: n < 10)
        assert spec.is_satisfied_by(5)
        assert not spec.is_satisfied_by(11)

    def test_and_with_always_satisfied_is_identity(self) -> None:
        positive = LambdaSpecification(lambda n: n > 0)
        spec = AlwaysSatisfied() & positive
        assert isinstance(spec, AndSpecification)
        assert spec.is_satisfied_by(1)
        assert not spec.is_satisfied_by(-1)

    def test_only_conjunction_is_supported(self) -> None:
        spec = LambdaSpecification(lambda n: n > 0)
        with pytest.raises(TypeError):
            spec | spec  # noqa: B018
        with pytest.raises(TypeError):
            ~spec  # noqa: B018

    def test_always_satisfied(self) -> None:
        assert AlwaysSatisfied().is_satisfied_by(object())

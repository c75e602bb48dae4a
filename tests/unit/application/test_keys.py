"""Unit tests for composite key binding."""

from __future__ import annotations

import pytest

from course_library.application.query import CompositeKeyBinder, KeyFormat, MalformedKeyError
from course_library.kernel.types.ids import EntityId

IDS = (
    "d28888e9-2ba9-473a-a40f-e38cb54f9b35",
    "da2fd609-d754-4feb-8acd-c4f9ff13ba96",
)


class TestCompositeKeyBinder:
    def test_array_of_strings(self) -> None:
        assert CompositeKeyBinder(str).bind("a,b,c") == ("a", "b", "c")

    def test_tokens_are_trimmed(self) -> None:
        assert CompositeKeyBinder(int).bind(" 1, 2 ,3 ") == (1, 2, 3)

    def test_single_key(self) -> None:
        assert CompositeKeyBinder(str).bind("a") == ("a",)

    def test_empty_segment_inside(self) -> None:
        with pytest.raises(MalformedKeyError) as exc_info:
            CompositeKeyBinder(str).bind("a,,c")
        assert exc_info.value.token == ""

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_nothing_supplied(self, raw: str | None) -> None:
        with pytest.raises(MalformedKeyError):
            CompositeKeyBinder(str).bind(raw)

    def test_parse_failure(self) -> None:
        with pytest.raises(MalformedKeyError) as exc_info:
            CompositeKeyBinder(int).bind("1,two,3")
        assert exc_info.value.token == "two"

    def test_entity_ids(self) -> None:
        bound = CompositeKeyBinder(EntityId.parse).bind(",".join(IDS))
        assert bound == tuple(EntityId(raw) for raw in IDS)

    def test_invalid_entity_id(self) -> None:
        with pytest.raises(MalformedKeyError):
            CompositeKeyBinder(EntityId.parse).bind(f"{IDS[0]},not-a-guid")

    def test_custom_delimiter(self) -> None:
        assert CompositeKeyBinder(str, delimiter=";").bind("a;b") == ("a", "b")

    def test_blank_delimiter_rejected(self) -> None:
        with pytest.raises(ValueError):
            CompositeKeyBinder(str, delimiter="")

    def test_malformed_key_is_a_validation_error(self) -> None:
        from course_library.kernel.errors import ValidationError

        with pytest.raises(ValidationError):
            CompositeKeyBinder(str).bind("a,,b")


class TestCompositeFormat:
    def test_detect_array(self) -> None:
        assert CompositeKeyBinder(str).detect_format("1,2") is KeyFormat.ARRAY

    def test_detect_composite(self) -> None:
        assert CompositeKeyBinder(str).detect_format("a=1,b=2") is KeyFormat.COMPOSITE

    def test_mixed_formats_rejected(self) -> None:
        with pytest.raises(MalformedKeyError):
            CompositeKeyBinder(str).detect_format("a=1,2")

    def test_bind_pairs(self) -> None:
        assert CompositeKeyBinder(int).bind_pairs("courseId = 1, authorId=2") == (
            ("courseId", 1),
            ("authorId", 2),
        )

    def test_bind_pairs_incomplete(self) -> None:
        with pytest.raises(MalformedKeyError):
            CompositeKeyBinder(int).bind_pairs("courseId=,authorId=2")

    def test_bind_rejects_pairs(self) -> None:
        with pytest.raises(MalformedKeyError):
            CompositeKeyBinder(str).bind("a=1,b=2")

    def test_bind_pairs_rejects_array(self) -> None:
        with pytest.raises(MalformedKeyError):
            CompositeKeyBinder(str).bind_pairs("1,2")

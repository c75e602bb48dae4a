"""Unit tests for data shaping."""

from __future__ import annotations

import pytest

from course_library.application.query import InvalidFieldsError, PropertyChecker, parse_fields, shape

AUTHOR = {"id": "1", "name": "Nancy Swashbuckler Rye", "age": 356, "mainCategory": "Rum"}


class TestParseFields:
    def test_blank_means_everything(self) -> None:
        assert parse_fields(None) == ()
        assert parse_fields(" ") == ()

    def test_split_and_trim(self) -> None:
        assert parse_fields("id, name") == ("id", "name")


class TestPropertyChecker:
    checker = PropertyChecker(["id", "name", "age", "mainCategory"])

    def test_has_properties(self) -> None:
        assert self.checker.has_properties("id,NAME")
        assert self.checker.has_properties(None)
        assert not self.checker.has_properties("id,shoeSize")

    def test_resolve_returns_canonical_spelling(self) -> None:
        assert self.checker.resolve("MAINCATEGORY, id") == ("mainCategory", "id")

    def test_resolve_collapses_duplicates(self) -> None:
        assert self.checker.resolve("id,Id") == ("id",)

    def test_resolve_rejects_unknown(self) -> None:
        with pytest.raises(InvalidFieldsError) as exc_info:
            self.checker.resolve("id,shoeSize")
        assert exc_info.value.invalid == ["shoeSize"]
        assert exc_info.value.code == "invalid_fields"

    def test_resolve_rejects_empty_entry(self) -> None:
        with pytest.raises(InvalidFieldsError):
            self.checker.resolve("id,,name")

    def test_available(self) -> None:
        assert self.checker.available == ("id", "name", "age", "mainCategory")


class TestShape:
    def test_subset_in_requested_order(self) -> None:
        assert list(shape(AUTHOR, ("name", "id"))) == ["name", "id"]

    def test_empty_selection_keeps_everything(self) -> None:
        shaped = shape(AUTHOR, ())
        assert shaped == AUTHOR
        assert shaped is not AUTHOR

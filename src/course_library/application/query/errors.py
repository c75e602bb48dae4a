"""Collection-query errors."""

from __future__ import annotations

from typing import Any

from course_library.kernel.errors import DomainError, ValidationError


class InvalidSortExpressionError(ValidationError):
    """An ``orderBy`` expression names an unknown field or is malformed."""

    default_code = "invalid_sort_expression"

    def __init__(
        self,
        expression: str,
        *,
        field: str | None = None,
        reason: str = "unknown field",
        **kwargs: Any,
    ) -> None:
        message = f"Invalid sort expression {expression!r}: {reason}"
        if field is not None:
            message = f"Invalid sort expression {expression!r}: {reason} {field!r}"
        super().__init__(
            message,
            errors=[{"field": "orderBy", "message": message}],
            detail={"expression": expression, "field": field, "reason": reason},
            **kwargs,
        )
        self.expression = expression
        self.field = field
        self.reason = reason


class InvalidFieldsError(ValidationError):
    """A data-shaping ``fields`` list names a property the resource does not expose."""

    default_code = "invalid_fields"

    def __init__(self, fields: str, invalid: list[str], **kwargs: Any) -> None:
        message = f"Requested fields {invalid!r} do not exist on the resource"
        super().__init__(
            message,
            errors=[{"field": "fields", "message": message}],
            detail={"fields": fields, "invalid": invalid},
            **kwargs,
        )
        self.fields = fields
        self.invalid = invalid


class MalformedKeyError(ValidationError):
    """A token in a composite-key path segment does not parse."""

    default_code = "malformed_key"

    def __init__(self, segment: str, *, token: str | None = None, reason: str, **kwargs: Any) -> None:
        message = f"Malformed key segment {segment!r}: {reason}"
        super().__init__(
            message,
            errors=[{"field": "ids", "message": message}],
            detail={"segment": segment, "token": token, "reason": reason},
            **kwargs,
        )
        self.segment = segment
        self.token = token
        self.reason = reason


class UnknownFieldError(DomainError):
    """An exposed property name has no mapping in a property mapping table."""

    default_code = "unknown_field"

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(f"Key mapping for {name!r} is missing", detail={"field": name}, **kwargs)
        self.name = name


class UnknownMappingError(DomainError):
    """No property mapping table is registered for a (DTO, entity) pair."""

    default_code = "unknown_mapping"

    def __init__(self, source: type, destination: type, **kwargs: Any) -> None:
        super().__init__(
            f"Cannot find exact property mapping instance for <{source.__name__},{destination.__name__}>",
            detail={"source": source.__name__, "destination": destination.__name__},
            **kwargs,
        )
        self.source = source
        self.destination = destination


__all__ = [
    "InvalidFieldsError",
    "InvalidSortExpressionError",
    "MalformedKeyError",
    "UnknownFieldError",
    "UnknownMappingError",
]

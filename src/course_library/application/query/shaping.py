"""Data shaping – restrict a resource representation to requested fields."""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from course_library.application.query.errors import InvalidFieldsError

FIELD_SEPARATOR = ","


def parse_fields(fields: str | None) -> tuple[str, ...]:
    """Split a ``fields`` query value; blank means "all fields" and yields ``()``."""
    if fields is None or not fields.strip():
        return ()
    return tuple(name.strip() for name in fields.split(FIELD_SEPARATOR))


class PropertyChecker:
    """Validate requested field names against a resource's exposed names.

    Matching is case-insensitive; :meth:`resolve` returns the canonical
    spelling so shaped output uses the resource's own keys.
    """

    def __init__(self, available: Iterable[str]) -> None:
        self._canonical = {name.casefold(): name for name in available}

    @property
    def available(self) -> tuple[str, ...]:
        return tuple(self._canonical.values())

    def has_properties(self, fields: str | None) -> bool:
        return all(name and name.casefold() in self._canonical for name in parse_fields(fields))

    def resolve(self, fields: str | None) -> tuple[str, ...]:
        """Return canonical names for *fields* or raise :class:`InvalidFieldsError`."""
        names = parse_fields(fields)
        invalid = [name for name in names if not name or name.casefold() not in self._canonical]
        if invalid:
            raise InvalidFieldsError(fields or "", invalid)
        resolved: list[str] = []
        for name in names:
            canonical = self._canonical[name.casefold()]
            if canonical not in resolved:
                resolved.append(canonical)
        return tuple(resolved)


def shape(data: Mapping[str, Any], names: Sequence[str]) -> dict[str, Any]:
    """Copy *data* keeping only *names* (in that order); all keys when *names* is empty."""
    if not names:
        return dict(data)
    return {name: data[name] for name in names}


__all__ = ["PropertyChecker", "parse_fields", "shape"]

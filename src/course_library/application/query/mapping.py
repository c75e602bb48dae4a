"""Property mapping – exposed (DTO) property names to storage fields.

A :class:`PropertyMappingTable` is registered per ``(dto type, entity type)``
pair.  Each exposed name maps to one or more storage fields; a field marked
``revert`` sorts in the opposite direction of the one requested (``Age`` is
backed by ``date_of_birth``, so "oldest first" means "earliest date first").

Example::

    table = PropertyMappingTable(
        AuthorDto,
        Author,
        [
            PropertyMapping.of("Id", "id"),
            PropertyMapping.of("Name", "first_name", "last_name"),
            PropertyMapping.of("Age", "date_of_birth", revert=True),
        ],
        default_sort="Name",
    )
    service = PropertyMappingService([table])
    service.valid_mapping_exists_for("name, -age", AuthorDto, Author)  # True
"""
from __future__ import annotations

import dataclasses
from typing import Iterable, Iterator

from course_library.application.query.errors import (
    InvalidSortExpressionError,
    UnknownFieldError,
    UnknownMappingError,
)
from course_library.application.query.sorting import parse_terms


@dataclasses.dataclass(frozen=True, slots=True)
class PropertyTarget:
    """One storage field backing an exposed property."""

    field: str
    revert: bool = False


@dataclasses.dataclass(frozen=True)
class PropertyMapping:
    """Exposed name → ordered storage targets."""

    exposed_name: str
    targets: tuple[PropertyTarget, ...]

    def __post_init__(self) -> None:
        if not self.exposed_name.strip():
            raise ValueError("exposed_name must not be blank")
        if not self.targets:
            raise ValueError(f"mapping for {self.exposed_name!r} has no targets")

    @classmethod
    def of(cls, exposed_name: str, *fields: str, revert: bool = False) -> "PropertyMapping":
        """Map *exposed_name* to *fields*, all sharing the same *revert* flag."""
        return cls(exposed_name, tuple(PropertyTarget(f, revert) for f in fields))


def _key(name: str) -> str:
    return name.strip().casefold()


class PropertyMappingTable:
    """Immutable lookup of exposed names (case-insensitive) for one DTO/entity pair."""

    def __init__(
        self,
        source: type,
        destination: type,
        mappings: Iterable[PropertyMapping],
        *,
        default_sort: str,
    ) -> None:
        self._source = source
        self._destination = destination
        entries: dict[str, PropertyMapping] = {}
        for mapping in mappings:
            key = _key(mapping.exposed_name)
            if key in entries:
                raise ValueError(f"duplicate exposed name {mapping.exposed_name!r}")
            entries[key] = mapping
        if _key(default_sort) not in entries:
            raise ValueError(f"default sort {default_sort!r} is not a mapped name")
        self._entries = entries
        self._default_sort = default_sort

    @property
    def source(self) -> type:
        return self._source

    @property
    def destination(self) -> type:
        return self._destination

    @property
    def default_sort(self) -> str:
        return self._default_sort

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(m.exposed_name for m in self._entries.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _key(name) in self._entries

    def __iter__(self) -> Iterator[PropertyMapping]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def resolve(self, name: str) -> tuple[PropertyTarget, ...]:
        """Return the storage targets for *name* or raise :class:`UnknownFieldError`."""
        try:
            return self._entries[_key(name)].targets
        except KeyError:
            raise UnknownFieldError(name) from None

    def __repr__(self) -> str:  # pragma: no cover
        return (
            f"PropertyMappingTable(<{self._source.__name__},{self._destination.__name__}>, "
            f"names={list(self.names)!r})"
        )


class PropertyMappingService:
    """Registry of :class:`PropertyMappingTable` instances keyed by (source, destination).

    Built once at startup and read-only afterwards.
    """

    def __init__(self, tables: Iterable[PropertyMappingTable] = ()) -> None:
        registry: dict[tuple[type, type], PropertyMappingTable] = {}
        for table in tables:
            pair = (table.source, table.destination)
            if pair in registry:
                raise ValueError(
                    f"mapping for <{table.source.__name__},{table.destination.__name__}> registered twice"
                )
            registry[pair] = table
        self._tables = registry

    def exists(self, source: type, destination: type) -> bool:
        return (source, destination) in self._tables

    def get_property_mapping(self, source: type, destination: type) -> PropertyMappingTable:
        try:
            return self._tables[(source, destination)]
        except KeyError:
            raise UnknownMappingError(source, destination) from None

    def valid_mapping_exists_for(self, order_by: str | None, source: type, destination: type) -> bool:
        """Return ``True`` when every name in *order_by* is mapped (blank is valid)."""
        if not self.exists(source, destination):
            return False
        table = self._tables[(source, destination)]
        try:
            terms = parse_terms(order_by)
        except InvalidSortExpressionError:
            return False
        return all(term.exposed_name in table for term in terms)


__all__ = [
    "PropertyMapping",
    "PropertyMappingService",
    "PropertyMappingTable",
    "PropertyTarget",
]

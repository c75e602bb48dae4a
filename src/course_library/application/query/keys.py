"""Composite keys – typed identifiers from one delimited path segment.

Two formats are accepted, never mixed within one segment::

    array key:      1,2,3
    composite key:  key1=value1,key2=value2
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Generic, TypeVar

from course_library.application.query.errors import MalformedKeyError
from course_library.kernel.errors import ValidationError

T = TypeVar("T")

PAIR_SEPARATOR = "="


class KeyFormat(str, Enum):
    ARRAY = "array"
    COMPOSITE = "composite"


class CompositeKeyBinder(Generic[T]):
    """Parse a path segment into an ordered tuple of keys.

    Every token is trimmed and handed to *parse* on its own; if any token
    fails the whole bind fails with :class:`MalformedKeyError`.  Whether all
    keys were found is the caller's concern.

    Example::

        binder = CompositeKeyBinder(EntityId.parse)
        ids = binder.bind("d28888e9-2ba9-473a-a40f-e38cb54f9b35,da2fd609-...")
    """

    def __init__(self, parse: Callable[[str], T], delimiter: str = ",") -> None:
        if not delimiter:
            raise ValueError("delimiter must not be empty")
        self._parse = parse
        self._delimiter = delimiter

    def _tokens(self, raw: str | None) -> list[str]:
        if raw is None or not raw.strip():
            raise MalformedKeyError(raw or "", reason="no keys supplied")
        tokens = [token.strip() for token in raw.split(self._delimiter)]
        if not all(tokens):
            raise MalformedKeyError(raw, token="", reason="empty key")
        return tokens

    def _convert(self, raw: str, token: str) -> T:
        try:
            return self._parse(token)
        except MalformedKeyError:
            raise
        except (TypeError, ValueError, ValidationError) as exc:
            raise MalformedKeyError(raw, token=token, reason=f"cannot parse {token!r}", cause=exc) from exc

    def _classify(self, raw: str, tokens: list[str]) -> KeyFormat:
        pairs = [PAIR_SEPARATOR in token for token in tokens]
        if all(pairs):
            return KeyFormat.COMPOSITE
        if not any(pairs):
            return KeyFormat.ARRAY
        raise MalformedKeyError(raw, reason="mixed array and key=value formats")

    def detect_format(self, raw: str | None) -> KeyFormat:
        """Classify *raw*; a mix of plain and ``key=value`` tokens is rejected."""
        tokens = self._tokens(raw)
        return self._classify(raw or "", tokens)

    def bind(self, raw: str | None) -> tuple[T, ...]:
        """Bind an array-format segment (``id1,id2,id3``)."""
        tokens = self._tokens(raw)
        segment = raw or ""
        if self._classify(segment, tokens) is not KeyFormat.ARRAY:
            raise MalformedKeyError(segment, reason="expected a plain list of keys")
        return tuple(self._convert(segment, token) for token in tokens)

    def bind_pairs(self, raw: str | None) -> tuple[tuple[str, T], ...]:
        """Bind a composite-format segment (``k1=v1,k2=v2``) into ``(name, key)`` pairs."""
        tokens = self._tokens(raw)
        segment = raw or ""
        if self._classify(segment, tokens) is not KeyFormat.COMPOSITE:
            raise MalformedKeyError(segment, reason="expected key=value pairs")
        bound: list[tuple[str, T]] = []
        for token in tokens:
            name, _, value = token.partition(PAIR_SEPARATOR)
            name, value = name.strip(), value.strip()
            if not name or not value:
                raise MalformedKeyError(segment, token=token, reason="key=value pair is incomplete")
            bound.append((name, self._convert(segment, value)))
        return tuple(bound)


__all__ = ["CompositeKeyBinder", "KeyFormat"]

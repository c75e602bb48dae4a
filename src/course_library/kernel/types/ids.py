"""UUID-backed identifier value objects."""

from __future__ import annotations

import dataclasses
import uuid

from course_library.kernel.errors.domain import ValidationError


@dataclasses.dataclass(frozen=True, order=True, slots=True)
class EntityId:
    """Entity identifier holding a canonical (lower-case, hyphenated) UUID string.

    Examples::

        eid = EntityId.generate()
        eid = EntityId.parse("D28888E9-2BA9-473A-A40F-E38CB54F9B35")
        str(eid)  # 'd28888e9-2ba9-473a-a40f-e38cb54f9b35'
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValidationError(f"{type(self).__name__} must not be empty")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> "EntityId":
        """Return a new random ``EntityId``."""
        return cls(str(uuid.uuid4()))

    @classmethod
    def parse(cls, raw: str) -> "EntityId":
        """Parse *raw* as a UUID, raising :class:`ValidationError` when it is not one."""
        try:
            return cls(str(uuid.UUID(raw.strip())))
        except (AttributeError, ValueError) as exc:
            raise ValidationError(
                f"{raw!r} is not a valid {cls.__name__}",
                detail={"value": raw},
                cause=exc,
            ) from exc

    @classmethod
    def from_uuid(cls, value: uuid.UUID) -> "EntityId":
        return cls(str(value))

    def as_uuid(self) -> uuid.UUID:
        return uuid.UUID(self.value)


__all__ = ["EntityId"]

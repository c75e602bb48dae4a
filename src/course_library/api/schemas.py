"""Resource representations (DTOs) exchanged over HTTP.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1500
NAME_MAX_LENGTH = 50


class ApiModel(BaseModel):
    """Base for every DTO: camelCase aliases, population by either name."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AuthorDto(ApiModel):
    id: str
    name: str
    age: int
    main_category: str


class CourseDto(ApiModel):
    id: str
    title: str
    description: Optional[str] = None
    author_id: str


class CourseForManipulationDto(ApiModel):
    """Shared shape for course creation and update."""
    model_config = ConfigDict(extra="forbid")

    title: str = Field(min_length=1, max_length=TITLE_MAX_LENGTH, description="You should fill out a title.")
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)

    @model_validator(mode="after")
    def _description_differs_from_title(self) -> "CourseForManipulationDto":
        if self.title == self.description:
            raise ValueError("The provided description should be different from the title.")
        return self


class CourseForCreationDto(CourseForManipulationDto):
    pass


class CourseForUpdateDto(CourseForManipulationDto):
    description: str = Field(min_length=1, max_length=DESCRIPTION_MAX_LENGTH, description="You should fill out a description.")


class AuthorForCreationDto(ApiModel):
    model_config = ConfigDict(extra="forbid")

    first_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    last_name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    date_of_birth: datetime.date
    main_category: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    courses: list[CourseForCreationDto] = Field(default_factory=list)


def exposed_fields(model: type[BaseModel]) -> tuple[str, ...]:
    """Wire names of *model*'s fields, in declaration order."""
    return tuple(field.alias or to_camel(name) for name, field in model.model_fields.items())


__all__ = [
    "ApiModel",
    "AuthorDto",
    "AuthorForCreationDto",
    "CourseDto",
    "CourseForCreationDto",
    "CourseForManipulationDto",
    "CourseForUpdateDto",
    "exposed_fields",
]

"""DDD building blocks – public re-export surface."""

from course_library.kernel.ddd.entity import Entity
from course_library.kernel.ddd.specification import (
    AlwaysSatisfied,
    AndSpecification,
    LambdaSpecification,
    Specification,
)

__all__ = [
    "AlwaysSatisfied",
    "AndSpecification",
    "Entity",
    "LambdaSpecification",
    "Specification",
]

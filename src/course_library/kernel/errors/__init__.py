"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   │   └── BusinessRuleError
    │   └── NotFoundError
    └── ApplicationError     (application.py)
"""

from course_library.kernel.errors.application import ApplicationError
from course_library.kernel.errors.base import BaseError
from course_library.kernel.errors.domain import (
    BusinessRuleError,
    DomainError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "BusinessRuleError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]

"""Kernel value types."""
from course_library.kernel.types.ids import EntityId

__all__ = ["EntityId"]

"""In-memory storage adapter."""
from course_library.adapters.memory.repository import InMemoryCourseLibraryRepository
from course_library.adapters.memory.seed import sample_authors

__all__ = ["InMemoryCourseLibraryRepository", "sample_authors"]

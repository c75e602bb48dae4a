"""Domain – authors, courses and the storage port."""
from course_library.domain.entities import Author, Course
from course_library.domain.repository import CourseLibraryRepository

__all__ = ["Author", "Course", "CourseLibraryRepository"]

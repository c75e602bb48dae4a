"""HTTP routers for the course library API."""
from course_library.api.routers.author_collections import router as author_collections_router
from course_library.api.routers.authors import router as authors_router
from course_library.api.routers.courses import router as courses_router

__all__ = ["author_collections_router", "authors_router", "courses_router"]

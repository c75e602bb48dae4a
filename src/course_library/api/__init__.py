"""HTTP surface of the course library: DTOs, routers and the app factory."""
from course_library.api.app import create_app

__all__ = ["create_app"]

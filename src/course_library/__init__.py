"""
course_library – Authors & courses REST API.

Import path convention::

    from course_library.kernel.errors import NotFoundError
    from course_library.application.pagination import PagedResult, ResourceQueryParameters
    from course_library.application.query import PropertyMappingService, SortExpressionParser
    from course_library.api import create_app
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

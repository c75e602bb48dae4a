"""FastAPI adapter – middleware, exception mapper, health router, deps."""
from course_library.adapters.fastapi.deps import ResourceParametersDep, error_responses, resource_parameters
from course_library.adapters.fastapi.exception_mapper import FastAPIExceptionMapper, validation_problem
from course_library.adapters.fastapi.middleware import FastAPICorrelationIdMiddleware
from course_library.adapters.fastapi.routers import FastAPIHealthRouter

__all__ = [
    "FastAPICorrelationIdMiddleware",
    "FastAPIExceptionMapper",
    "FastAPIHealthRouter",
    "ResourceParametersDep",
    "error_responses",
    "resource_parameters",
    "validation_problem",
]

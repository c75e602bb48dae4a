"""Application factory – builds the FastAPI app and wires its collaborators."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from course_library import __version__
from course_library.adapters.fastapi import (
    FastAPICorrelationIdMiddleware,
    FastAPIExceptionMapper,
    FastAPIHealthRouter,
)
from course_library.adapters.memory import InMemoryCourseLibraryRepository, sample_authors
from course_library.api.mapping import build_property_mapping_service
from course_library.api.routers import author_collections_router, authors_router, courses_router
from course_library.config import ApiSettings, get_settings
from course_library.domain.repository import CourseLibraryRepository
from course_library.observability.logging import JsonLoggerFactory, get_logger

_log = get_logger(__name__)


def create_app(
    settings: ApiSettings | None = None,
    repository: CourseLibraryRepository | None = None,
) -> FastAPI:
    """Create the course library application.

    *settings* defaults to :func:`get_settings`; *repository* defaults to an
    in-memory store, seeded with sample authors when ``seed_data`` is on.
    """
    settings = settings or get_settings()
    JsonLoggerFactory.configure(settings.log_level, json=settings.json_logs)

    if repository is None:
        repository = InMemoryCourseLibraryRepository(sample_authors() if settings.seed_data else ())

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        openapi_tags=[
            {"name": "authors", "description": "Authors and author collections."},
            {"name": "courses", "description": "Courses of a single author."},
            {"name": "ops", "description": "Liveness and readiness probes."},
        ],
    )
    app.state.settings = settings
    app.state.repository = repository
    app.state.property_mapping_service = build_property_mapping_service()

    FastAPIExceptionMapper().register(app)
    app.add_middleware(FastAPICorrelationIdMiddleware)
    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Pagination", "Location", "X-Correlation-ID"],
        )

    async def storage() -> bool:
        await repository.get_authors()
        return True

    app.include_router(FastAPIHealthRouter(readiness_checks=[storage]))
    app.include_router(authors_router)
    app.include_router(author_collections_router)
    app.include_router(courses_router)

    _log.info("app.created", app_name=settings.app_name, seed_data=settings.seed_data)
    return app


__all__ = ["create_app"]

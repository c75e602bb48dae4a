"""Fixtures for HTTP-level tests against a freshly seeded application."""
from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from course_library.adapters.memory import InMemoryCourseLibraryRepository, sample_authors
from course_library.api import create_app
from course_library.config import ApiSettings



@pytest.fixture()
def settings() -> ApiSettings:
    return ApiSettings(log_level="WARNING", json_logs=False)


@pytest.fixture()
def app(settings: ApiSettings) -> FastAPI:
    return create_app(settings, InMemoryCourseLibraryRepository(sample_authors()))


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)

"""Run the API with uvicorn: ``python -m course_library``."""
from __future__ import annotations

import uvicorn

from course_library.api import create_app
from course_library.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()

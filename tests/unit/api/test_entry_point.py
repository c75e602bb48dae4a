"""Tests for the ``course-library`` entry point."""
from __future__ import annotations

from typing import Any

import pytest

from course_library import __main__ as entry_point
from course_library.config import ApiSettings


class TestMain:
    def test_serves_on_configured_host_and_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        settings = ApiSettings(log_level="WARNING", json_logs=False, host="0.0.0.0", port=9001)
        calls: list[dict[str, Any]] = []

        def fake_run(app: Any, **kwargs: Any) -> None:
            calls.append({"app": app, **kwargs})

        monkeypatch.setattr(entry_point, "get_settings", lambda: settings)
        monkeypatch.setattr(entry_point.uvicorn, "run", fake_run)

        entry_point.main()

        assert len(calls) == 1
        assert calls[0]["host"] == "0.0.0.0"
        assert calls[0]["port"] == 9001
        assert calls[0]["app"].state.settings is settings

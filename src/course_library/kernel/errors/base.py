"""Root error class – every error course-library raises on purpose.

The HTTP layer renders an error from its ``to_dict()`` payload, so ``code``
is what API clients match on (``not_found``, ``invalid_sort_expression``).
"""

from __future__ import annotations

import json
from typing import Any


class BaseError(Exception):
    """An expected failure with a stable machine-readable ``code``.

    Args:
        message: Sentence shown to the API client.
        code: Slug returned in the error body; subclasses set ``default_code``.
        detail: Extra context for the body, e.g. the rejected ``orderBy`` value.
        cause: Lower-level exception, logged but never sent to the client.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        """The ``to_dict()`` payload as one JSON line."""
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Error body fields: ``code``, ``message``, ``detail`` and ``cause`` when set."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


__all__ = ["BaseError"]

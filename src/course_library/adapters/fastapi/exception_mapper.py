"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from course_library.kernel.errors import (
    ApplicationError,
    BaseError,
    BusinessRuleError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from course_library.observability.correlation import CorrelationContext
from course_library.observability.logging import get_logger

_log = get_logger(__name__)

VALIDATION_PROBLEM_MESSAGE = "One or more validation errors occurred."


def validation_problem(errors: Iterable[Mapping[str, Any]], *, resource: str | None = None) -> BusinessRuleError:
    """Convert pydantic-style error dicts (``loc``/``msg``) into a :class:`BusinessRuleError`.

    Model-level errors (no field in ``loc``) are reported against *resource*.
    """
    converted: list[dict[str, Any]] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(loc) or resource or "body"
        converted.append({"field": field, "message": str(error.get("msg", ""))})
    return BusinessRuleError(VALIDATION_PROBLEM_MESSAGE, code="validation_error", errors=converted)


class FastAPIExceptionMapper:
    """Register course_library error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "not_found", "message": "...", "detail": {...}, "correlation_id": "..."}

    Mappings
    --------
    ``RequestValidationError`` → 422 (same body as ``BusinessRuleError``)
    ``BusinessRuleError``      → 422
    ``ValidationError``        → 400
    ``NotFoundError``          → 404
    ``DomainError``            → 422
    ``ApplicationError``       → 500
    """

    def __init__(self) -> None:
        # ORDER MATTERS for status_for(): more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (BusinessRuleError, 422),
            (ValidationError, 400),
            (NotFoundError, 404),
            (DomainError, 422),
            (ApplicationError, 500),
        ]

    @property
    def mappings(self) -> list[tuple[type[Exception], int]]:
        return list(self._map)

    def status_for(self, exc: BaseException) -> int:
        if isinstance(exc, RequestValidationError):
            return 422
        for exc_type, status in self._map:
            if isinstance(exc, exc_type):
                return status
        return 500

    def render(self, request: Any, exc: BaseException, status: int) -> JSONResponse:
        ctx = CorrelationContext.get()
        correlation_id = ctx.correlation_id if ctx is not None else None

        if isinstance(exc, RequestValidationError):
            exc = validation_problem(exc.errors())
        if isinstance(exc, BaseError):
            body = exc.to_dict()
            body.pop("cause", None)
        else:
            body = {"code": "error", "message": str(exc)}

        log = _log.error if status >= 500 else _log.warning
        log("request.rejected", status=status, code=body.get("code"), path=str(request.url.path))
        body["correlation_id"] = correlation_id
        return JSONResponse(status_code=status, content=body)

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        for exc_type, status in [(RequestValidationError, 422), *self._map]:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:
                    return self.render(request, exc, code)

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["FastAPIExceptionMapper", "VALIDATION_PROBLEM_MESSAGE", "validation_problem"]

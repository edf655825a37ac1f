"""FastAPI adapter – FastAPIExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable

from fleetlist.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InternalError,
    ValidationError,
)


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError("Install 'fleetlist[fastapi]' to use the FastAPI adapter") from exc


# Starlette resolves handlers along the exception's MRO, so a subclass
# listed here always wins over its base.
_STATUS_BY_ERROR: tuple[tuple[type[BaseError], int], ...] = (
    (ValidationError, 400),
    (DomainError, 422),
    (InternalError, 500),
    (ApplicationError, 500),
    (InfrastructureError, 503),
)


class FastAPIExceptionMapper:
    """Turn fleetlist errors into JSON error responses.

    Body: ``BaseError.to_dict()``, e.g.
    ``{"code": "validation_error", "message": ..., "detail": {...}, "errors": [...]}``.
    Server-side (5xx) bodies omit ``cause`` so driver messages never reach
    clients; the cause is still logged where the error was raised.
    """

    def __init__(self) -> None:
        _require_fastapi()

    @property
    def mappings(self) -> list[tuple[type[BaseError], int]]:
        return list(_STATUS_BY_ERROR)

    def register(self, app: Any) -> None:
        for error_type, status in _STATUS_BY_ERROR:
            app.add_exception_handler(error_type, self._handler(status))

    @staticmethod
    def _handler(status: int) -> Callable[[Any, BaseError], Any]:
        from fastapi.responses import JSONResponse

        def handle(request: Any, exc: BaseError) -> Any:  # noqa: ARG001
            body = exc.to_dict()
            if status >= 500:
                body.pop("cause", None)
            return JSONResponse(status_code=status, content=body)

        return handle


__all__ = ["FastAPIExceptionMapper"]

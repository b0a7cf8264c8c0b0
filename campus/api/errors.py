"""Map service failures to HTTP responses.

Services raise typed CampusError subclasses and know nothing about HTTP.
One exception handler translates them, so endpoints stay free of
try/except boilerplate:

  NotFoundError       -> 404
  AlreadyExistsError  -> 409
  UnauthorizedError   -> 403  (401 is reserved for a missing/bad token)
  ValidationError     -> 422
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from campus.core.metrics import OPERATION_FAILURES
from campus.services import errors

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[errors.CampusError], int] = {
    errors.NotFoundError: status.HTTP_404_NOT_FOUND,
    errors.AlreadyExistsError: status.HTTP_409_CONFLICT,
    errors.UnauthorizedError: status.HTTP_403_FORBIDDEN,
    errors.ValidationError: status.HTTP_422_UNPROCESSABLE_ENTITY,
}


def status_for(exc: errors.CampusError) -> int:
    for error_type, status_code in _STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_400_BAD_REQUEST


async def campus_error_handler(
    request: Request, exc: errors.CampusError
) -> JSONResponse:
    status_code = status_for(exc)
    OPERATION_FAILURES.labels(kind=exc.kind).inc()
    logger.warning(
        "%s %s rejected: %s (%s)",
        request.method,
        request.url.path,
        exc,
        exc.kind,
        extra={"error_kind": exc.kind, "status_code": status_code},
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "kind": exc.kind},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(errors.CampusError, campus_error_handler)

# backend/hrdash/errors.py
"""
Domain errors raised by the services and their HTTP mapping.

- NotFoundError           -> 404 (unknown employee / schedule id)
- ConflictError           -> 409 (duplicate employee_id or email)
- InvalidTransitionError  -> 409 (illegal promotion status move)

Malformed input never reaches the services: FastAPI rejects it with 422.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class HRDashError(Exception):
    status_code = 400
    kind = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(HRDashError):
    status_code = 404
    kind = "not_found"


class ConflictError(HRDashError):
    status_code = 409
    kind = "conflict"


class InvalidTransitionError(HRDashError):
    status_code = 409
    kind = "invalid_transition"

    def __init__(self, current: str, requested: str):
        super().__init__(f"Cannot move promotion schedule from '{current}' to '{requested}'")
        self.current = current
        self.requested = requested


async def _hrdash_error_handler(request: Request, exc: HRDashError) -> JSONResponse:
    logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.kind, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.kind},
    )


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("%s %s -> validation: %d error(s)", request.method, request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors()), "error": "validation"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(HRDashError, _hrdash_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)

"""
Taxonomía de errores de dominio y handlers globales para respuestas consistentes.

Cuerpo de error: {"error": true, "message": ..., "request_id": ...}.
"""
import logging
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class AppError(Exception):
    """Error base con status HTTP asociado."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request"


class NoChanges(ValidationError):
    default_message = "No changes provided"


class InvalidQuery(ValidationError):
    default_message = "Search query is required"


class DuplicateKey(AppError):
    status_code = 400
    default_message = "User already exists"


class InvalidCredentials(AppError):
    # No distingue "usuario inexistente" de "password incorrecto"
    status_code = 400
    default_message = "Invalid credentials"


class Unauthorized(AppError):
    status_code = 401
    default_message = "Unauthorized"


class NotFound(AppError):
    status_code = 404
    default_message = "Note not found"


class InternalError(AppError):
    status_code = 500
    default_message = "Internal server error"


def _req_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", object()), "request_id", None)


def _body(request: Request, message: str, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": True, "message": message, **extra}
    rid = _req_id(request)
    if rid:
        body["request_id"] = rid
    return body


def register_exception_handlers(app: FastAPI) -> None:
    log = logging.getLogger("notes.errors")

    @app.exception_handler(AppError)
    async def _app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            log.error("%s request_id=%s: %s", type(exc).__name__, _req_id(request), exc.message)
        return JSONResponse(status_code=exc.status_code, content=_body(request, exc.message))

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content=_body(request, exc.detail or "HTTP error"))

    @app.exception_handler(RequestValidationError)
    async def _validation_handler(request: Request, exc: RequestValidationError):
        # JSON malformado o tipos incorrectos: se reporta como 400 (ValidationError)
        errors = [
            {"loc": list(e.get("loc", ())), "msg": e.get("msg"), "type": e.get("type")}
            for e in exc.errors()
        ]
        return JSONResponse(status_code=400, content=_body(request, "Validation error", errors=errors))

    @app.exception_handler(Exception)
    async def _generic_handler(request: Request, exc: Exception):
        rid = _req_id(request)
        log.exception("Unhandled error request_id=%s", rid)
        return JSONResponse(status_code=500, content=_body(request, InternalError.default_message))

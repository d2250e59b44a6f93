"""
Error translation for the HTTP layer.

Recognized domain errors become {"success": false, "error": {...}} responses with
their own status code. Anything else is logged in full and reported as a generic
500; the traceback is only included when settings.debug is on.
"""
import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from miniblog.config import settings
from miniblog.core.errors import MiniBlogError, TokenRejected

logger = logging.getLogger("uvicorn.error")


def error_body(code: str, message: str, **extra) -> dict:
    return {"success": False, "error": {"code": code, "message": message, **extra}}


def register_error_handlers(app: FastAPI) -> None:
    """Attach the domain error handler and the catch-all middleware."""

    @app.exception_handler(MiniBlogError)
    async def handle_domain_error(request: Request, exc: MiniBlogError):
        extra = {}
        if isinstance(exc, TokenRejected):
            extra["reason"] = exc.reason.value
        if exc.status_code >= 500:
            logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message, exc_info=exc)
        else:
            logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message)
        return JSONResponse(status_code=exc.status_code, content=error_body(exc.code, exc.message, **extra))

    @app.middleware("http")
    async def catch_unhandled(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception:
            logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
            extra = {"details": traceback.format_exc()} if settings.debug else {}
            return JSONResponse(
                status_code=500,
                content=error_body(
                    "INTERNAL_ERROR",
                    "An internal server error occurred. Please try again later.",
                    **extra,
                ),
            )

# common/error_handlers.py
import logging
import time

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from common.exceptions import AppException
from common.utils import serialize, utcnow

logger = logging.getLogger(__name__)


def error_body(request: Request, status_code: int, message: str, error_code: str, details=None) -> dict:
    return {
        "statusCode": status_code,
        "message": message,
        "errorCode": error_code,
        "details": serialize(details),
        "timestamp": utcnow().isoformat(),
        "path": request.url.path,
    }


def validation_details(errors) -> dict:
    """Group pydantic errors by field: {"email": ["Value error, ..."], ...}."""
    details = {}
    for error in errors:
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location) or "general"
        details.setdefault(field, []).append(error.get("msg", "Invalid value"))
    return details


def register_exception_handlers(app: FastAPI):
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        logger.error(f"{request.method} {request.url.path} - {exc.status_code} - {exc.message}")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(request, exc.status_code, exc.message, exc.error_code, exc.details),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        details = validation_details(exc.errors())
        logger.error(f"{request.method} {request.url.path} - 400 - Validation failed: {details}")
        return JSONResponse(
            status_code=400,
            content=error_body(request, 400, "Validation failed", "VALIDATION_ERROR", details),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.error(f"{request.method} {request.url.path} - {exc.status_code} - {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(request, exc.status_code, str(exc.detail), f"HTTP_{exc.status_code}"),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"{request.method} {request.url.path} - 500 - {exc}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content=error_body(request, 500, "Internal server error", "INTERNAL_SERVER_ERROR"),
        )


def register_request_logging(app: FastAPI):
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        logger.info(f"{request.method} {request.url.path} - Request received")
        response = await call_next(request)
        elapsed = round((time.perf_counter() - start) * 1000)
        response.headers["X-Response-Time"] = f"{elapsed}ms"
        logger.info(f"{request.method} {request.url.path} - {response.status_code} - {elapsed} ms")
        return response

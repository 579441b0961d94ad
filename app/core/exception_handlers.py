import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import AppError

logger = logging.getLogger(__name__)

def error_envelope(message: str, code: str | None = None, **extra) -> dict:
    content = {"success": False, "message": message}
    if code:
        content["code"] = code
    content.update(extra)
    return content

async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=error_envelope(exc.message, exc.code))

async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """
    Terminal fallback for requests that matched no route.
    """
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=error_envelope(f"Not Found - {request.url.path}", "NOT_FOUND"),
    )

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # A known path with the wrong method is still an unmatched route
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return await not_found_handler(request, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )

async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        # Get the field name from the last element of 'loc'
        field = str(error["loc"][-1]) if error["loc"] else "unknown"
        errors.append({"field": field, "message": error["msg"]})

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope("Validation Error", "VALIDATION_ERROR", errors=errors),
    )

async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning("Rate limit exceeded for %s: %s", request.url.path, exc.detail)
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=error_envelope(f"Rate limit exceeded: {exc.detail}", "RATE_LIMITED"),
    )

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

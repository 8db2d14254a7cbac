# schools_api/errors.py
"""
Error taxonomy and the single place that turns a failure into an HTTP response.

Route handlers only detect problems and raise; status code, body shape and
log severity are all decided by error_response().
"""

import logging
from enum import Enum
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from schools_api.data.loader import DataLoadError
from schools_api.models.errors import ErrorDetail, ErrorOut

DEFAULT_ERROR_MESSAGE = "Internal server error"


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    ROUTE_NOT_FOUND = "route_not_found"
    INTERNAL = "internal"


STATUS_BY_KIND = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.ROUTE_NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class ApiError(Exception):
    def __init__(self, kind: ErrorKind, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code or STATUS_BY_KIND[kind]


def validation_error(message: str) -> ApiError:
    return ApiError(ErrorKind.VALIDATION, message)


def not_found_error(message: str) -> ApiError:
    return ApiError(ErrorKind.NOT_FOUND, message)


def route_not_found_error(method: str, target: str) -> ApiError:
    return ApiError(ErrorKind.ROUTE_NOT_FOUND, f"Route not found: {method} {target}")


def request_target(request: Request) -> str:
    """Path plus query string, as the client sent it."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


def get_request_id(request: Request) -> Optional[str]:
    return getattr(request.state, "request_id", None)


def error_response(request: Request, exc: Exception, logger: logging.Logger) -> JSONResponse:
    """
    Map any exception to the error envelope:

        {"error": {"message": ..., "statusCode": ..., "requestId": ...}}

    The status comes from the exception's status_code when it has one,
    otherwise 500. 4xx are logged as warnings, 5xx as errors with traceback.
    """
    status_code = getattr(exc, "status_code", None) or 500
    message = getattr(exc, "message", None) or str(exc) or DEFAULT_ERROR_MESSAGE
    request_id = get_request_id(request)
    kind = getattr(exc, "kind", None)

    if status_code >= 500:
        logger.error("Error [%s]: %s", request_id, message, exc_info=exc)
    elif kind is not ErrorKind.ROUTE_NOT_FOUND:
        logger.warning("Error [%s]: %s", request_id, message)

    body = ErrorOut(
        error=ErrorDetail(message=message, status_code=status_code, request_id=request_id)
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


def register_error_handlers(app: FastAPI, logger: logging.Logger) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return error_response(request, exc, logger)

    @app.exception_handler(DataLoadError)
    async def data_load_error_handler(request: Request, exc: DataLoadError):
        return error_response(request, exc, logger)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # The router raises 404 for unknown paths and 405 for a known path
        # with the wrong method; both are reported as an unknown route.
        if exc.status_code in (404, 405):
            exc = route_not_found_error(request.method, request_target(request))
        else:
            kind = ErrorKind.VALIDATION if exc.status_code < 500 else ErrorKind.INTERNAL
            exc = ApiError(kind, str(exc.detail), status_code=exc.status_code)
        return error_response(request, exc, logger)

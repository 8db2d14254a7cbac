# schools_api/middleware.py
"""
Request tracing: one correlation id per request, echoed in X-Request-ID,
and one access log line once the response is ready.
"""

import logging
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from schools_api.errors import error_response, request_target

REQUEST_ID_HEADER = "X-Request-ID"


def generate_request_id() -> str:
    return str(uuid.uuid4())


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """
    Outermost stage of the request pipeline.

    Anything that escapes the routes and the registered exception handlers
    still ends up as an error envelope, so every response carries the header.
    """

    def __init__(self, app, logger: logging.Logger):
        super().__init__(app)
        self.logger = logger

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = generate_request_id()
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception as e:
            response = error_response(request, e, self.logger)

        response.headers[REQUEST_ID_HEADER] = request_id

        self.logger.info(
            "%s %s %s [%s]",
            response.status_code,
            request.method,
            request_target(request),
            request_id,
        )
        return response

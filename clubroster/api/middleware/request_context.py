"""
Request Context Middleware

Binds a request id (and later the acting user) to every log line emitted
while a request is handled.

    X-Request-ID: taken from the request when present, generated otherwise,
                  and echoed on the response
"""

import uuid

from fastapi import FastAPI, Request

from clubroster.shared.core.logging import clear_log_context, log_context


REQUEST_ID_HEADER = "X-Request-ID"


def setup_request_context(app: FastAPI) -> None:
    """Register the request-context middleware on the application."""

    @app.middleware("http")
    async def bind_request_context(request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

        clear_log_context()
        log_context(request_id=request_id, method=request.method, path=request.url.path)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response

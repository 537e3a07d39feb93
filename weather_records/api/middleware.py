from __future__ import annotations

import time
import uuid

import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .deps import INVALID_COORDINATE

log = structlog.get_logger()


class RequestIDMiddleware:
    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        request_id = uuid.uuid4().hex
        scope.setdefault("state", {})
        scope["state"]["request_id"] = request_id

        start = time.perf_counter()
        status = {"code": 500}
        structlog.contextvars.bind_contextvars(request_id=request_id)

        async def send_wrapper(message):
            if message.get("type") == "http.response.start":
                status["code"] = message["status"]
                headers = message.setdefault("headers", [])
                headers.append((b"x-request-id", request_id.encode()))
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            dur_ms = int((time.perf_counter() - start) * 1000)
            log.info(
                "request_completed",
                method=scope.get("method", ""),
                path=scope.get("path", ""),
                status=status["code"],
                duration_ms=dur_ms,
            )
            structlog.contextvars.unbind_contextvars("request_id")


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    # Malformed input is a 400 here, not FastAPI's default 422
    if any(err.get("loc", ("",))[0] == "body" for err in errors):
        message = "Invalid data"
    else:
        message = INVALID_COORDINATE
    log.info("request_invalid", path=request.url.path, errors=len(errors))
    return _error(400, message)


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log.error("unhandled_error", path=request.url.path, exc_info=exc)
    return _error(500, "Internal server error")

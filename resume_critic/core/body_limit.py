from __future__ import annotations

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import Headers

from resume_critic.core.config import settings


class RequestBodyTooLarge(HTTPException):
    def __init__(self, limit: int):
        super().__init__(status_code=413, detail="Request body too large")
        self.limit = limit


def _too_large_response(limit: int) -> JSONResponse:
    return JSONResponse(
        status_code=413,
        content={
            "success": False,
            "error": "Request body too large",
            "details": f"Maximum allowed size is {limit // (1024 * 1024)} MB.",
        },
    )


async def body_too_large_handler(request: Request, exc: RequestBodyTooLarge) -> JSONResponse:
    return _too_large_response(exc.limit)


class BodySizeLimitMiddleware:
    """Reject request bodies above ``settings.max_body_bytes``.

    A declared ``Content-Length`` is checked up front. Chunked bodies are
    counted as they are received; crossing the limit raises
    :class:`RequestBodyTooLarge` inside the application's body read.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        limit = settings.max_body_bytes
        declared = Headers(scope=scope).get("content-length", "").strip()
        if declared.isdigit() and int(declared) > limit:
            await _too_large_response(limit)(scope, receive, send)
            return

        received = 0

        async def limited_receive():
            nonlocal received
            message = await receive()
            if message["type"] == "http.request":
                received += len(message.get("body", b""))
                if received > limit:
                    raise RequestBodyTooLarge(limit)
            return message

        await self.app(scope, limited_receive, send)

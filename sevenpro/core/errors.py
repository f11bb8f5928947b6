"""Error taxonomy and the JSON error envelope shared by every endpoint.

Every response body carries an ``ok`` flag and a human readable ``message``.
Handlers registered here make sure failures keep that shape regardless of
where they are raised.
"""
import logging
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """Client data failed the required-field checks."""
    status_code = 400


class ServerError(ApiError):
    """Persistence or unexpected fault. The message is generic on purpose."""
    status_code = 500


class NotifierFailure(Exception):
    """Mail delivery fault. Never leaves the notifier."""


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"ok": False, "message": message})


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info(f"Rejected body for {request.method} {request.url.path}: {exc.errors()}")
        return error_response(400, "Invalid request body.")

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail))


class UnhandledErrorMiddleware:
    """Turns unexpected faults into the JSON envelope.

    Installed inside the CORS middleware so allowed origins can still read
    the 500 body. Faults raised after the response has started are re-raised.
    """

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as e:
            logger.error(f"Unhandled error on {scope['method']} {scope['path']}: {e}")
            if response_started:
                raise
            await error_response(500, "Server error.")(scope, receive, send)

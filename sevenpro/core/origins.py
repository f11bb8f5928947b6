from typing import Optional, Sequence
from starlette.datastructures import Headers
from starlette.middleware.cors import CORSMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

ALLOWED_ORIGINS = (
    "http://localhost:4000",
    "http://127.0.0.1:4000",
    "null",  # index.html opened from file://
)


def is_origin_allowed(origin: Optional[str], allowed: Sequence[str] = ALLOWED_ORIGINS) -> bool:
    # no Origin header means same-origin or a non-browser client
    if not origin:
        return True
    return origin in allowed


class OriginGuardMiddleware(CORSMiddleware):
    """CORS headers only for allow-listed origins.

    Denied origins still reach the route handler; the browser blocks the
    response because the allow-origin header is missing. A denied preflight
    gets an empty 204 without any allow headers.
    """

    def __init__(self, app: ASGIApp, allowed_origins: Sequence[str] = ALLOWED_ORIGINS):
        super().__init__(
            app,
            allow_origins=list(allowed_origins),
            allow_methods=["*"],
            allow_headers=["*"],
        )
        self.allowed_origins = tuple(allowed_origins)

    def is_allowed_origin(self, origin: str) -> bool:
        return is_origin_allowed(origin, self.allowed_origins)

    def preflight_response(self, request_headers: Headers) -> Response:
        if not self.is_allowed_origin(origin=request_headers["origin"]):
            return Response(status_code=204)
        return super().preflight_response(request_headers=request_headers)

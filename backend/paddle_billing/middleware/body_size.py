from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared body is larger than ``max_body_size`` bytes."""

    def __init__(self, app, max_body_size: int = 1_048_576):
        super().__init__(app)
        self.max_body_size = max_body_size

    async def dispatch(self, request: Request, call_next) -> Response:
        content_length = request.headers.get("content-length")
        if content_length:
            if not content_length.isdigit():
                return JSONResponse({"detail": "Invalid Content-Length"}, status_code=400)
            if int(content_length) > self.max_body_size:
                return JSONResponse({"detail": "Payload too large"}, status_code=413)
        return await call_next(request)

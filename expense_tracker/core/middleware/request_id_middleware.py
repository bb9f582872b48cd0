import logging
import uuid
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from typing import Callable, Awaitable

REQUEST_ID_TOKEN_HEADER = "x-request-id"

logger = logging.getLogger(__name__)


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Tags every request and its response with a request id."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_TOKEN_HEADER) or str(uuid.uuid4())
        request.state.request_id = request_id
        logger.debug(f"[{request_id}] {request.method} {request.url.path}")

        response: Response = await call_next(request)
        response.headers[REQUEST_ID_TOKEN_HEADER] = request_id
        return response

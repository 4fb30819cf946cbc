from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from state_compare.utils.logging import get_logger

logger = get_logger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """
    Allow any origin on every response.

    OPTIONS requests are answered here with an empty 200 and never reach
    the routers, whether or not they carry preflight headers.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        if request.method == "OPTIONS":
            logger.debug(f"Preflight for {request.url.path} answered by CORS middleware")
            return Response(status_code=200, headers=CORS_HEADERS)

        response = await call_next(request)
        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response

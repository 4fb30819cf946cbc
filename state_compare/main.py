"""
FastAPI application entry point for the State Compare backend.

This module creates the FastAPI app instance and registers all routers.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from state_compare import __version__
from state_compare.config import settings
from state_compare.middleware import PermissiveCORSMiddleware
from state_compare.routes.health import router as health_router
from state_compare.routes.recommendations import METHOD_NOT_ALLOWED_MESSAGE
from state_compare.routes.recommendations import router as recommendations_router
from state_compare.utils.logging import LOG_FORMAT, resolve_level

# Configure logging
logging.basicConfig(
    level=resolve_level(settings.LOG_LEVEL),
    format=LOG_FORMAT
)

logger = logging.getLogger(__name__)


# Create FastAPI app
app = FastAPI(
    title="State Compare API",
    description="Gemini-powered recommendation comparing two US states for relocation",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(StarletteHTTPException)
async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """
    Answer 405 in the same `message` shape as the endpoints, for every method.

    Other HTTP errors (404, ...) keep FastAPI's default body.
    """
    if exc.status_code != status.HTTP_405_METHOD_NOT_ALLOWED:
        return await http_exception_handler(request, exc)

    logger.info(f"{request.method} {request.url.path} rejected (405)")

    return JSONResponse(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        content={"message": METHOD_NOT_ALLOWED_MESSAGE},
        headers=exc.headers
    )


if settings.CORS_ENABLED:
    app.add_middleware(PermissiveCORSMiddleware)
    logger.info("CORS pass-through enabled: allowing all origins")

# Register routers
app.include_router(health_router)
app.include_router(recommendations_router)

logger.info(f"FastAPI app initialized successfully (environment={settings.ENVIRONMENT})")

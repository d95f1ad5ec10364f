"""Podcast Feed API - Main application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from app.api import health_router, podcast_router
from app.errors import FeedError, UnsupportedMethodError
from app.logging import setup_logging

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add permissive CORS headers to all responses.

    Unlike Starlette's CORSMiddleware, the headers are set whether or not the
    request carries an Origin header, including on error responses. Exceptions
    no handler caught become a plain-text 500 here, before they can reach
    Starlette's ServerErrorMiddleware, which would answer without the headers.
    """

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"Unhandled error: {request.method} {request.url.path}")
            error = FeedError()
            response = PlainTextResponse(error.message, status_code=error.status_code)

        for name, value in CORS_HEADERS.items():
            response.headers[name] = value

        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"

        return response


async def feed_error_handler(request: Request, exc: FeedError) -> PlainTextResponse:
    """Convert pipeline failures into plain-text responses."""
    headers = None
    if isinstance(exc, UnsupportedMethodError):
        headers = {"Allow": CORS_HEADERS["Access-Control-Allow-Methods"]}
    return PlainTextResponse(exc.message, status_code=exc.status_code, headers=headers)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
    """Serve routing 405s as UnsupportedMethodError; defer everything else."""
    if exc.status_code == 405:
        return await feed_error_handler(request, UnsupportedMethodError(request.method))
    return await http_exception_handler(request, exc)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    setup_logging()
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Podcast Feed API",
        description="Serve the episodes of a podcast RSS feed as JSON",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Pipeline errors and routing 405s become plain-text responses
    app.add_exception_handler(FeedError, feed_error_handler)
    app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    app.add_middleware(CORSHeadersMiddleware)

    # Include routers
    app.include_router(health_router)
    app.include_router(podcast_router)

    return app


app = create_app()


def main():
    """Entry point for running the application."""
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()

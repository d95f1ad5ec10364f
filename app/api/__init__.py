"""API routers for the Podcast Feed API."""

from app.api.routes_health import router as health_router
from app.api.routes_podcast import router as podcast_router

__all__ = [
    "health_router",
    "podcast_router",
]

"""Health check endpoints for the Podcast Feed API."""

from fastapi import APIRouter, Depends

from app.config import Settings, get_settings

router = APIRouter(tags=["health"])


@router.get("/healthz")
async def health_check():
    """Liveness probe; never touches the upstream feed."""
    return {"ok": True}


@router.get("/readyz")
async def readiness_check(settings: Settings = Depends(get_settings)):
    """
    Readiness check endpoint.

    Settings are resolved here, so a misconfigured environment fails the
    probe instead of the first feed request.

    Returns:
        A status object with the configured feed URL
    """
    return {"ok": True, "feed_url": settings.feed_url}

"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


def _get_venue_api_health_check():
    """Lazy import to avoid startup failures."""
    from ...services.venues.client import check_health as venue_api_health_check
    return venue_api_health_check


@router.get("/health/venue-api", status_code=status.HTTP_200_OK)
def health_venue_api() -> dict:
    """Check that the upstream venue API is reachable."""
    try:
        venue_api_health_check = _get_venue_api_health_check()
        return {"service": "venue-api", "healthy": venue_api_health_check()}
    except Exception as e:
        return {"service": "venue-api", "healthy": False, "error": str(e)}

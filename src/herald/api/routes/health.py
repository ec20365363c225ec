"""Health check endpoints."""

from fastapi import APIRouter

from herald import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """Return service health status."""
    return {"status": "healthy", "service": "herald", "version": __version__}


@router.get("/health/live")
async def liveness():
    """Kubernetes liveness probe, always 200 while the process is running."""
    return {"status": "alive"}

"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/api/health")
async def health() -> dict[str, str]:
    """Liveness check.

    Returns:
        200 OK always (application is running)
    """
    return {"status": "ok", "message": "Travel App API Server is running"}

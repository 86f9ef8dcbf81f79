"""Health Check Controller."""

from fastapi import APIRouter

from bins.setup.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check 엔드포인트."""
    return {"status": "healthy", "service": get_settings().service_name}


@router.get("/ping")
async def ping() -> dict[str, bool]:
    """Liveness 엔드포인트."""
    return {"pong": True}

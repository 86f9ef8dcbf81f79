"""HTTP Controllers."""

from bins.presentation.http.controllers.bins import router as bins_router
from bins.presentation.http.controllers.health import router as health_router

__all__ = ["bins_router", "health_router"]

"""API routers."""

from app.routers.applications import router as applications_router
from app.routers.system import router as system_router

__all__ = ["applications_router", "system_router"]

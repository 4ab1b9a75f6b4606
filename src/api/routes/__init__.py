"""API route modules."""

from .health import router as health_router
from .life import router as life_router
from .schedule import router as schedule_router
from .timeline import router as timeline_router

__all__ = ["health_router", "schedule_router", "life_router", "timeline_router"]

from .summary import router as summary_router
from .training import router as training_router
from .calendar import router as calendar_router
from .dashboard import router as dashboard_router

__all__ = [
    "summary_router",
    "training_router",
    "calendar_router",
    "dashboard_router",
]

"""API route modules."""
from .feedings import router as feedings_router
from .sleep import router as sleep_router
from .meals import router as meals_router
from .tasks import router as tasks_router
from .notes import router as notes_router
from .summary import router as summary_router
from .user import router as user_router

__all__ = [
    "feedings_router",
    "sleep_router",
    "meals_router",
    "tasks_router",
    "notes_router",
    "summary_router",
    "user_router",
]

"""API routes module."""
from gymlog.api.routes.exercises import router as exercises_router
from gymlog.api.routes.workouts import router as workouts_router
from gymlog.api.routes.log_groups import router as log_groups_router

__all__ = [
    "exercises_router",
    "workouts_router",
    "log_groups_router",
]

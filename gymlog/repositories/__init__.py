"""Repositories package."""
from gymlog.repositories.base import Repository
from gymlog.repositories.exercise_repository import ExerciseRepository
from gymlog.repositories.workout_repository import (
    WorkoutExerciseRepository,
    WorkoutRepository,
)
from gymlog.repositories.workout_log_repository import (
    WorkoutLogGroupRepository,
    WorkoutLogRepository,
)

__all__ = [
    "Repository",
    "ExerciseRepository",
    "WorkoutRepository",
    "WorkoutExerciseRepository",
    "WorkoutLogGroupRepository",
    "WorkoutLogRepository",
]

"""Database models."""
from gymlog.models.exercise import Exercise
from gymlog.models.workout import Workout
from gymlog.models.workout_exercise import WorkoutExercise
from gymlog.models.workout_log import WorkoutLog, WorkoutLogGroup

__all__ = [
    "Exercise",
    "Workout",
    "WorkoutExercise",
    "WorkoutLog",
    "WorkoutLogGroup",
]

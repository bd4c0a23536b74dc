from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.core.exceptions import BusinessRuleError, NotFoundError
from gymlog.core.logging import get_logger
from gymlog.models.workout import Workout
from gymlog.models.workout_exercise import WorkoutExercise
from gymlog.repositories.workout_log_repository import WorkoutLogRepository
from gymlog.repositories.workout_repository import (
    WorkoutExerciseRepository,
    WorkoutRepository,
)
from gymlog.schemas.pagination import PaginatedResult, PaginationParams
from gymlog.schemas.workout import (
    WorkoutCreate,
    WorkoutExerciseCreate,
    WorkoutExerciseUpdate,
    WorkoutFilter,
    WorkoutUpdate,
)
from gymlog.services.base import BaseService

logger = get_logger(__name__)

REQUIRED_FIELDS = ("name", "active")
REQUIRED_EXERCISE_FIELDS = (
    "name",
    "code",
    "sets_target",
    "reps_or_seconds_target",
    "working_weight",
    "rest_period_seconds",
    "tempo",
    "emom",
    "equipments",
    "bands",
)


class WorkoutService(BaseService):
    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self._repository = WorkoutRepository(session)
        self._exercises = WorkoutExerciseRepository(session)
        self._logs = WorkoutLogRepository(session)

    async def create_workout(self, data: WorkoutCreate) -> Workout:
        workout = await self._repository.create(Workout(**data.model_dump()))
        logger.info("workout_created", workout_id=workout.id, name=workout.name)
        return workout

    async def get_workout(self, workout_id: int) -> Workout:
        return await self._get_or_404(self._repository, workout_id)

    async def update_workout(self, workout_id: int, data: WorkoutUpdate) -> Workout:
        await self._get_or_404(self._repository, workout_id)
        updates = self._collect_updates(data, REQUIRED_FIELDS)
        workout = await self._repository.update(workout_id, updates)
        logger.info("workout_updated", workout_id=workout_id, fields=sorted(updates))
        return workout

    async def delete_workout(self, workout_id: int) -> None:
        """Delete a workout and its exercises; refused once sets were logged against it."""
        await self._get_or_404(self._repository, workout_id)
        logged = await self._logs.count_for_workout(workout_id)
        if logged:
            raise BusinessRuleError(
                f"Workout {workout_id} has {logged} logged sets and cannot be deleted",
                code="BR_WORKOUT_001",
                details={"id": workout_id, "logged_sets": logged},
            )
        await self._repository.delete(workout_id)
        logger.info("workout_deleted", workout_id=workout_id)

    async def list_workouts(
        self, filter: WorkoutFilter | None, pagination: PaginationParams
    ) -> PaginatedResult[Workout]:
        return await self._repository.list(filter, pagination)

    # ---- Prescribed exercises ----

    async def add_workout_exercise(
        self, workout_id: int, data: WorkoutExerciseCreate
    ) -> WorkoutExercise:
        await self._get_or_404(self._repository, workout_id)
        workout_exercise = await self._exercises.create(
            WorkoutExercise(workout_id=workout_id, **data.model_dump(mode="json"))
        )
        logger.info(
            "workout_exercise_added",
            workout_id=workout_id,
            workout_exercise_id=workout_exercise.id,
            code=workout_exercise.code,
        )
        return workout_exercise

    async def get_workout_exercise(self, workout_id: int, workout_exercise_id: int) -> WorkoutExercise:
        workout_exercise = await self._exercises.get(workout_exercise_id)
        if not workout_exercise or workout_exercise.workout_id != workout_id:
            raise NotFoundError(
                "workout_exercise",
                f"Workout exercise {workout_exercise_id} not found in workout {workout_id}",
                {"id": workout_exercise_id, "workout_id": workout_id},
            )
        return workout_exercise

    async def list_workout_exercises(self, workout_id: int) -> list[WorkoutExercise]:
        await self._get_or_404(self._repository, workout_id)
        return await self._exercises.list_by_workout(workout_id)

    async def update_workout_exercise(
        self, workout_id: int, workout_exercise_id: int, data: WorkoutExerciseUpdate
    ) -> WorkoutExercise:
        await self.get_workout_exercise(workout_id, workout_exercise_id)
        updates = self._collect_updates(data, REQUIRED_EXERCISE_FIELDS)
        workout_exercise = await self._exercises.update(workout_exercise_id, updates)
        logger.info(
            "workout_exercise_updated",
            workout_exercise_id=workout_exercise_id,
            fields=sorted(updates),
        )
        return workout_exercise

    async def delete_workout_exercise(self, workout_id: int, workout_exercise_id: int) -> None:
        await self.get_workout_exercise(workout_id, workout_exercise_id)
        logged = await self._logs.count_for_workout_exercise(workout_exercise_id)
        if logged:
            raise BusinessRuleError(
                f"Workout exercise {workout_exercise_id} has {logged} logged sets and cannot be deleted",
                code="BR_WORKOUT_EXERCISE_001",
                details={"id": workout_exercise_id, "logged_sets": logged},
            )
        await self._exercises.delete(workout_exercise_id)
        logger.info("workout_exercise_deleted", workout_exercise_id=workout_exercise_id)

"""Exercise library operations."""
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.core.exceptions import BusinessRuleError, ConflictError
from gymlog.core.logging import get_logger
from gymlog.models.exercise import Exercise
from gymlog.repositories.exercise_repository import ExerciseRepository
from gymlog.repositories.workout_log_repository import WorkoutLogRepository
from gymlog.schemas.exercise import ExerciseCreate, ExerciseFilter, ExerciseUpdate
from gymlog.schemas.pagination import PaginatedResult, PaginationParams
from gymlog.services.base import BaseService

logger = get_logger(__name__)

REQUIRED_FIELDS = ("name", "dynamic_or_static", "upper_or_lower", "compound_or_isolation")


class ExerciseService(BaseService):
    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self._repository = ExerciseRepository(session)
        self._logs = WorkoutLogRepository(session)

    async def create_exercise(self, data: ExerciseCreate) -> Exercise:
        if await self._repository.get_by_name(data.name):
            raise ConflictError(
                f"An exercise named {data.name!r} already exists",
                code="CF_EXERCISE_001",
                details={"name": data.name},
            )
        exercise = await self._repository.create(Exercise(**data.model_dump()))
        logger.info("exercise_created", exercise_id=exercise.id, name=exercise.name)
        return exercise

    async def get_exercise(self, exercise_id: int) -> Exercise:
        return await self._get_or_404(self._repository, exercise_id)

    async def update_exercise(self, exercise_id: int, data: ExerciseUpdate) -> Exercise:
        await self._get_or_404(self._repository, exercise_id)
        updates = self._collect_updates(data, REQUIRED_FIELDS)
        exercise = await self._repository.update(exercise_id, updates)
        logger.info("exercise_updated", exercise_id=exercise_id, fields=sorted(updates))
        return exercise

    async def delete_exercise(self, exercise_id: int) -> None:
        await self._get_or_404(self._repository, exercise_id)
        logged = await self._logs.count_for_exercise(exercise_id)
        if logged:
            raise BusinessRuleError(
                f"Exercise {exercise_id} has {logged} logged sets and cannot be deleted",
                code="BR_EXERCISE_001",
                details={"id": exercise_id, "logged_sets": logged},
            )
        await self._repository.delete(exercise_id)
        logger.info("exercise_deleted", exercise_id=exercise_id)

    async def list_exercises(
        self, filter: ExerciseFilter | None, pagination: PaginationParams
    ) -> PaginatedResult[Exercise]:
        return await self._repository.list(filter, pagination)

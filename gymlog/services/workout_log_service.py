"""Training log operations: log groups (training days) and the sets under them."""
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.core.exceptions import BusinessRuleError, NotFoundError
from gymlog.core.logging import get_logger
from gymlog.models.workout_log import WorkoutLog, WorkoutLogGroup
from gymlog.repositories.exercise_repository import ExerciseRepository
from gymlog.repositories.workout_log_repository import (
    WorkoutLogGroupRepository,
    WorkoutLogRepository,
)
from gymlog.repositories.workout_repository import (
    WorkoutExerciseRepository,
    WorkoutRepository,
)
from gymlog.schemas.pagination import PaginatedResult, PaginationParams
from gymlog.schemas.workout_log import (
    WorkoutLogCreate,
    WorkoutLogGroupCreate,
    WorkoutLogGroupFilter,
)
from gymlog.services.base import BaseService

logger = get_logger(__name__)


class WorkoutLogService(BaseService):
    def __init__(self, session: AsyncSession):
        super().__init__(session)
        self._groups = WorkoutLogGroupRepository(session)
        self._logs = WorkoutLogRepository(session)
        self._workouts = WorkoutRepository(session)
        self._workout_exercises = WorkoutExerciseRepository(session)
        self._exercises = ExerciseRepository(session)

    async def create_log_group(self, data: WorkoutLogGroupCreate) -> WorkoutLogGroup:
        group = await self._groups.create(WorkoutLogGroup(**data.model_dump()))
        logger.info("log_group_created", log_group_id=group.id, date=str(group.date))
        return group

    async def get_log_group(self, group_id: int) -> WorkoutLogGroup:
        return await self._get_or_404(self._groups, group_id)

    async def delete_log_group(self, group_id: int) -> None:
        await self._get_or_404(self._groups, group_id)
        await self._groups.delete(group_id)
        logger.info("log_group_deleted", log_group_id=group_id)

    async def list_log_groups(
        self, filter: WorkoutLogGroupFilter | None, pagination: PaginationParams
    ) -> PaginatedResult[WorkoutLogGroup]:
        return await self._groups.list(filter, pagination)

    async def add_log(self, group_id: int, data: WorkoutLogCreate) -> WorkoutLog:
        """Log one set under an existing training day.

        A referenced workout exercise must belong to the referenced workout.
        """
        await self._get_or_404(self._groups, group_id)
        if data.workout_id is not None and not await self._workouts.get(data.workout_id):
            raise NotFoundError("workout", f"Workout {data.workout_id} not found", {"id": data.workout_id})
        if data.exercise_id is not None and not await self._exercises.get(data.exercise_id):
            raise NotFoundError("exercise", f"Exercise {data.exercise_id} not found", {"id": data.exercise_id})
        if data.workout_exercise_id is not None:
            workout_exercise = await self._workout_exercises.get(data.workout_exercise_id)
            if not workout_exercise:
                raise NotFoundError(
                    "workout_exercise",
                    f"Workout exercise {data.workout_exercise_id} not found",
                    {"id": data.workout_exercise_id},
                )
            if data.workout_id is not None and workout_exercise.workout_id != data.workout_id:
                raise BusinessRuleError(
                    f"Workout exercise {workout_exercise.id} is not part of workout {data.workout_id}",
                    code="BR_WORKOUT_EXERCISE_002",
                    details={"workout_exercise_id": workout_exercise.id, "workout_id": data.workout_id},
                )

        log = await self._logs.create(WorkoutLog(workout_log_group_id=group_id, **data.model_dump()))
        logger.info(
            "set_logged",
            log_group_id=group_id,
            workout_log_id=log.id,
            set_number=log.set_number,
        )
        return log

    async def get_log(self, group_id: int, log_id: int) -> WorkoutLog:
        log = await self._logs.get(log_id)
        if not log or log.workout_log_group_id != group_id:
            raise NotFoundError(
                "workout_log",
                f"Workout log {log_id} not found in log group {group_id}",
                {"id": log_id, "log_group_id": group_id},
            )
        return log

    async def delete_log(self, group_id: int, log_id: int) -> None:
        await self.get_log(group_id, log_id)
        await self._logs.delete(log_id)
        logger.info("set_deleted", log_group_id=group_id, workout_log_id=log_id)

    async def get_logs_for_group(self, group_id: int) -> list[WorkoutLog]:
        await self._get_or_404(self._groups, group_id)
        return await self._logs.list_by_group(group_id)

from __future__ import annotations
from sqlalchemy import delete, func, or_, select

from gymlog.models.workout_exercise import WorkoutExercise
from gymlog.models.workout_log import WorkoutLog, WorkoutLogGroup
from gymlog.repositories.base import Repository


class WorkoutLogGroupRepository(Repository[WorkoutLogGroup, int]):
    model = WorkoutLogGroup

    async def delete(self, id: int) -> bool:
        """Delete a training day together with every set logged under it."""
        group = await self.get(id)
        if not group:
            return False
        await self._session.execute(
            delete(WorkoutLog).where(WorkoutLog.workout_log_group_id == id)
        )
        await self._session.delete(group)
        await self._session.flush()
        return True


class WorkoutLogRepository(Repository[WorkoutLog, int]):
    model = WorkoutLog

    async def list_by_group(self, workout_log_group_id: int) -> list[WorkoutLog]:
        """All sets logged for one training day, in the order they were logged."""
        result = await self._session.execute(
            select(WorkoutLog)
            .where(WorkoutLog.workout_log_group_id == workout_log_group_id)
            .order_by(WorkoutLog.id)
        )
        return list(result.scalars().all())

    async def count_for_workout(self, workout_id: int) -> int:
        """Sets logged against a workout directly or through one of its exercises."""
        prescribed = select(WorkoutExercise.id).where(WorkoutExercise.workout_id == workout_id)
        return await self._count(
            or_(
                WorkoutLog.workout_id == workout_id,
                WorkoutLog.workout_exercise_id.in_(prescribed),
            )
        )

    async def count_for_workout_exercise(self, workout_exercise_id: int) -> int:
        return await self._count(WorkoutLog.workout_exercise_id == workout_exercise_id)

    async def count_for_exercise(self, exercise_id: int) -> int:
        return await self._count(WorkoutLog.exercise_id == exercise_id)

    async def _count(self, condition) -> int:
        result = await self._session.execute(
            select(func.count()).select_from(WorkoutLog).where(condition)
        )
        return result.scalar_one()

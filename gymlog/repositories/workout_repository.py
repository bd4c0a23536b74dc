from __future__ import annotations
from sqlalchemy import delete, select

from gymlog.models.workout import Workout
from gymlog.models.workout_exercise import WorkoutExercise
from gymlog.repositories.base import Repository


class WorkoutRepository(Repository[Workout, int]):
    model = Workout

    async def delete(self, id: int) -> bool:
        """Delete a workout together with the exercises it prescribes."""
        workout = await self.get(id)
        if not workout:
            return False
        await self._session.execute(
            delete(WorkoutExercise).where(WorkoutExercise.workout_id == id)
        )
        await self._session.delete(workout)
        await self._session.flush()
        return True


class WorkoutExerciseRepository(Repository[WorkoutExercise, int]):
    model = WorkoutExercise

    async def list_by_workout(self, workout_id: int) -> list[WorkoutExercise]:
        """A workout's exercises in superset order (A1, A2, B1 ...)."""
        result = await self._session.execute(
            select(WorkoutExercise)
            .where(WorkoutExercise.workout_id == workout_id)
            .order_by(WorkoutExercise.code, WorkoutExercise.id)
        )
        return list(result.scalars().all())

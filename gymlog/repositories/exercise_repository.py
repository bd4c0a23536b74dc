from __future__ import annotations
from sqlalchemy import select

from gymlog.models.exercise import Exercise
from gymlog.repositories.base import Repository


class ExerciseRepository(Repository[Exercise, int]):
    model = Exercise

    async def get_by_name(self, name: str) -> Exercise | None:
        result = await self._session.execute(
            select(Exercise).where(Exercise.name == name)
        )
        return result.scalars().first()

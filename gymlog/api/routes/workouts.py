"""API routes for workouts."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.api.routes.dependencies import get_pagination_params
from gymlog.db.database import get_db
from gymlog.schemas.pagination import PaginatedResult, PaginationParams
from gymlog.schemas.workout import (
    WorkoutCreate,
    WorkoutExerciseCreate,
    WorkoutExerciseResponse,
    WorkoutExerciseUpdate,
    WorkoutFilter,
    WorkoutResponse,
    WorkoutUpdate,
)
from gymlog.services.workout_service import WorkoutService

router = APIRouter()
logger = logging.getLogger(__name__)


def get_workout_filter(
    name: Optional[str] = Query(None),
    description: Optional[str] = Query(None),
    active: Optional[bool] = Query(None),
) -> WorkoutFilter:
    return WorkoutFilter(name=name, description=description, active=active)


@router.get("", response_model=PaginatedResult[WorkoutResponse])
async def list_workouts(
    filters: WorkoutFilter = Depends(get_workout_filter),
    pagination: PaginationParams = Depends(get_pagination_params),
    db: AsyncSession = Depends(get_db),
):
    page = await WorkoutService(db).list_workouts(filters, pagination)
    return page.map(WorkoutResponse.model_validate)


@router.post("", response_model=WorkoutResponse, status_code=status.HTTP_201_CREATED)
async def create_workout(data: WorkoutCreate, db: AsyncSession = Depends(get_db)):
    logger.info("create_workout called: name=%s", data.name)
    return await WorkoutService(db).create_workout(data)


@router.get("/{workout_id}", response_model=WorkoutResponse)
async def get_workout(workout_id: int, db: AsyncSession = Depends(get_db)):
    return await WorkoutService(db).get_workout(workout_id)


@router.put("/{workout_id}", response_model=WorkoutResponse)
async def update_workout(
    workout_id: int, data: WorkoutUpdate, db: AsyncSession = Depends(get_db)
):
    return await WorkoutService(db).update_workout(workout_id, data)


@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_workout(workout_id: int, db: AsyncSession = Depends(get_db)):
    await WorkoutService(db).delete_workout(workout_id)


# ============== Prescribed exercises ==============

@router.get("/{workout_id}/exercises", response_model=list[WorkoutExerciseResponse])
async def list_workout_exercises(workout_id: int, db: AsyncSession = Depends(get_db)):
    """Exercises of a workout ordered by their superset code."""
    return await WorkoutService(db).list_workout_exercises(workout_id)


@router.post(
    "/{workout_id}/exercises",
    response_model=WorkoutExerciseResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_workout_exercise(
    workout_id: int, data: WorkoutExerciseCreate, db: AsyncSession = Depends(get_db)
):
    logger.info("add_workout_exercise called: workout_id=%s code=%s", workout_id, data.code)
    return await WorkoutService(db).add_workout_exercise(workout_id, data)


@router.get("/{workout_id}/exercises/{workout_exercise_id}", response_model=WorkoutExerciseResponse)
async def get_workout_exercise(
    workout_id: int, workout_exercise_id: int, db: AsyncSession = Depends(get_db)
):
    return await WorkoutService(db).get_workout_exercise(workout_id, workout_exercise_id)


@router.put("/{workout_id}/exercises/{workout_exercise_id}", response_model=WorkoutExerciseResponse)
async def update_workout_exercise(
    workout_id: int,
    workout_exercise_id: int,
    data: WorkoutExerciseUpdate,
    db: AsyncSession = Depends(get_db),
):
    return await WorkoutService(db).update_workout_exercise(workout_id, workout_exercise_id, data)


@router.delete(
    "/{workout_id}/exercises/{workout_exercise_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_workout_exercise(
    workout_id: int, workout_exercise_id: int, db: AsyncSession = Depends(get_db)
):
    await WorkoutService(db).delete_workout_exercise(workout_id, workout_exercise_id)

"""API routes for the exercise library."""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.api.routes.dependencies import get_pagination_params
from gymlog.db.database import get_db
from gymlog.models.enums import (
    CompoundOrIsolation,
    DynamicOrStatic,
    Grip,
    GripWidth,
    LeverVariation,
    PushOrPull,
    SquatOrHinge,
    StraightOrBentArm,
    UpperOrLower,
)
from gymlog.schemas.exercise import (
    ExerciseCreate,
    ExerciseFilter,
    ExerciseResponse,
    ExerciseUpdate,
)
from gymlog.schemas.pagination import PaginatedResult, PaginationParams
from gymlog.services.exercise_service import ExerciseService

router = APIRouter()
logger = logging.getLogger(__name__)


def get_exercise_filter(
    name: Optional[str] = Query(None, description="Substring of the exercise name"),
    push_or_pull: Optional[list[PushOrPull]] = Query(None),
    dynamic_or_static: Optional[list[DynamicOrStatic]] = Query(None),
    straight_or_bent: Optional[list[StraightOrBentArm]] = Query(None),
    squat_or_hinge: Optional[list[SquatOrHinge]] = Query(None),
    upper_or_lower: Optional[list[UpperOrLower]] = Query(None),
    compound_or_isolation: Optional[list[CompoundOrIsolation]] = Query(None),
    lever_variation: Optional[list[LeverVariation]] = Query(None),
    grip: Optional[list[Grip]] = Query(None),
    grip_width: Optional[list[GripWidth]] = Query(None),
) -> ExerciseFilter:
    return ExerciseFilter(
        name=name,
        push_or_pull=push_or_pull,
        dynamic_or_static=dynamic_or_static,
        straight_or_bent=straight_or_bent,
        squat_or_hinge=squat_or_hinge,
        upper_or_lower=upper_or_lower,
        compound_or_isolation=compound_or_isolation,
        lever_variation=lever_variation,
        grip=grip,
        grip_width=grip_width,
    )


@router.get("", response_model=PaginatedResult[ExerciseResponse])
async def list_exercises(
    filters: ExerciseFilter = Depends(get_exercise_filter),
    pagination: PaginationParams = Depends(get_pagination_params),
    db: AsyncSession = Depends(get_db),
):
    """List the exercise library one keyset page at a time."""
    page = await ExerciseService(db).list_exercises(filters, pagination)
    return page.map(ExerciseResponse.model_validate)


@router.post("", response_model=ExerciseResponse, status_code=status.HTTP_201_CREATED)
async def create_exercise(data: ExerciseCreate, db: AsyncSession = Depends(get_db)):
    logger.info("create_exercise called: name=%s", data.name)
    return await ExerciseService(db).create_exercise(data)


@router.get("/{exercise_id}", response_model=ExerciseResponse)
async def get_exercise(exercise_id: int, db: AsyncSession = Depends(get_db)):
    return await ExerciseService(db).get_exercise(exercise_id)


@router.put("/{exercise_id}", response_model=ExerciseResponse)
async def update_exercise(
    exercise_id: int, data: ExerciseUpdate, db: AsyncSession = Depends(get_db)
):
    return await ExerciseService(db).update_exercise(exercise_id, data)


@router.delete("/{exercise_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_exercise(exercise_id: int, db: AsyncSession = Depends(get_db)):
    await ExerciseService(db).delete_exercise(exercise_id)

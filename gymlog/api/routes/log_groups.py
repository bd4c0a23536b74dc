"""API routes for training days and the sets logged under them."""
import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from gymlog.api.routes.dependencies import get_pagination_params
from gymlog.core.exceptions import ValidationError
from gymlog.db.database import get_db
from gymlog.schemas.pagination import PaginatedResult, PaginationParams
from gymlog.schemas.workout_log import (
    WorkoutLogCreate,
    WorkoutLogGroupCreate,
    WorkoutLogGroupFilter,
    WorkoutLogGroupResponse,
    WorkoutLogResponse,
)
from gymlog.services.workout_log_service import WorkoutLogService

router = APIRouter()
logger = logging.getLogger(__name__)


def get_log_group_filter(
    notes: Optional[str] = Query(None),
    date_from: Optional[date] = Query(None),
    date_to: Optional[date] = Query(None),
) -> WorkoutLogGroupFilter:
    try:
        return WorkoutLogGroupFilter(notes=notes, date_from=date_from, date_to=date_to)
    except PydanticValidationError as e:
        raise ValidationError("date_range", e.errors()[0]["msg"]) from e


@router.get("", response_model=PaginatedResult[WorkoutLogGroupResponse])
async def list_log_groups(
    filters: WorkoutLogGroupFilter = Depends(get_log_group_filter),
    pagination: PaginationParams = Depends(get_pagination_params),
    db: AsyncSession = Depends(get_db),
):
    page = await WorkoutLogService(db).list_log_groups(filters, pagination)
    return page.map(WorkoutLogGroupResponse.model_validate)


@router.post("", response_model=WorkoutLogGroupResponse, status_code=status.HTTP_201_CREATED)
async def create_log_group(data: WorkoutLogGroupCreate, db: AsyncSession = Depends(get_db)):
    logger.info("create_log_group called: date=%s", data.date)
    return await WorkoutLogService(db).create_log_group(data)


@router.get("/{group_id}", response_model=WorkoutLogGroupResponse)
async def get_log_group(group_id: int, db: AsyncSession = Depends(get_db)):
    return await WorkoutLogService(db).get_log_group(group_id)


@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_log_group(group_id: int, db: AsyncSession = Depends(get_db)):
    await WorkoutLogService(db).delete_log_group(group_id)


@router.get("/{group_id}/logs", response_model=list[WorkoutLogResponse])
async def list_logs(group_id: int, db: AsyncSession = Depends(get_db)):
    return await WorkoutLogService(db).get_logs_for_group(group_id)


@router.post(
    "/{group_id}/logs",
    response_model=WorkoutLogResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_log(group_id: int, data: WorkoutLogCreate, db: AsyncSession = Depends(get_db)):
    return await WorkoutLogService(db).add_log(group_id, data)


@router.get("/{group_id}/logs/{log_id}", response_model=WorkoutLogResponse)
async def get_log(group_id: int, log_id: int, db: AsyncSession = Depends(get_db)):
    return await WorkoutLogService(db).get_log(group_id, log_id)


@router.delete("/{group_id}/logs/{log_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_log(group_id: int, log_id: int, db: AsyncSession = Depends(get_db)):
    await WorkoutLogService(db).delete_log(group_id, log_id)

import datetime as dt
from typing import Iterator, Optional

from pydantic import BaseModel, Field, model_validator

from gymlog.schemas.filtering import FilterExpression, FilterSpec, at_least, at_most, contains


# ============== Log Group Schemas ==============

class WorkoutLogGroupCreate(BaseModel):
    """One training day."""
    date: dt.date
    notes: str | None = None


class WorkoutLogGroupResponse(BaseModel):
    id: int
    created_at: dt.datetime | None = None
    date: dt.date
    notes: str | None = None

    class Config:
        from_attributes = True


class WorkoutLogGroupFilter(FilterSpec):
    """Log groups by notes substring and an inclusive date range."""
    notes: Optional[str] = None
    date_from: Optional[dt.date] = None
    date_to: Optional[dt.date] = None

    @model_validator(mode="after")
    def _check_range(self) -> "WorkoutLogGroupFilter":
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValueError("date_from must not be after date_to")
        return self

    def expressions(self) -> Iterator[Optional[FilterExpression]]:
        yield contains("notes", self.notes)
        yield at_least("date", self.date_from)
        yield at_most("date", self.date_to)


# ============== Logged Set Schemas ==============

class WorkoutLogCreate(BaseModel):
    workout_id: int | None = None
    workout_exercise_id: int | None = None
    exercise_id: int | None = None
    set_number: int = Field(ge=1)
    rep_number_or_seconds: int = Field(ge=0)
    weight: int = Field(default=0, ge=0)
    description: str | None = None


class WorkoutLogResponse(BaseModel):
    id: int
    workout_log_group_id: int
    workout_id: int | None = None
    workout_exercise_id: int | None = None
    exercise_id: int | None = None
    set_number: int
    rep_number_or_seconds: int
    weight: int
    description: str | None = None

    class Config:
        from_attributes = True

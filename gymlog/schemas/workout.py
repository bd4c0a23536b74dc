from datetime import datetime
from typing import Iterator, Optional

from pydantic import BaseModel, Field

from gymlog.models.enums import Band, Equipment
from gymlog.schemas.filtering import FilterExpression, FilterSpec, contains, equals


# ============== Workout Schemas ==============

class WorkoutCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    description: str | None = None
    active: bool = True


class WorkoutUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    active: bool | None = None


class WorkoutResponse(BaseModel):
    id: int
    created_at: datetime | None = None
    name: str
    description: str | None = None
    active: bool

    class Config:
        from_attributes = True


class WorkoutFilter(FilterSpec):
    name: Optional[str] = None
    description: Optional[str] = None
    active: Optional[bool] = None

    def expressions(self) -> Iterator[Optional[FilterExpression]]:
        yield contains("name", self.name)
        yield contains("description", self.description)
        yield equals("active", self.active)


# ============== Workout Exercise Schemas ==============

class WorkoutExerciseCreate(BaseModel):
    """An exercise prescribed by a workout; the workout comes from the URL."""
    name: str = Field(min_length=1, max_length=200)
    code: str = Field(min_length=1, max_length=16, description="Superset label, e.g. A1")
    sets_target: int = Field(ge=1)
    reps_or_seconds_target: int = Field(ge=0)
    working_weight: int = Field(default=0, ge=0)
    rest_period_seconds: int = Field(default=0, ge=0)
    tempo: str = Field(default="", max_length=32)
    emom: bool = False
    equipments: list[Equipment] = Field(default_factory=list)
    bands: list[Band] = Field(default_factory=list)
    description: str | None = None


class WorkoutExerciseUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    code: str | None = Field(default=None, min_length=1, max_length=16)
    sets_target: int | None = Field(default=None, ge=1)
    reps_or_seconds_target: int | None = Field(default=None, ge=0)
    working_weight: int | None = Field(default=None, ge=0)
    rest_period_seconds: int | None = Field(default=None, ge=0)
    tempo: str | None = Field(default=None, max_length=32)
    emom: bool | None = None
    equipments: list[Equipment] | None = None
    bands: list[Band] | None = None
    description: str | None = None


class WorkoutExerciseResponse(BaseModel):
    id: int
    workout_id: int
    created_at: datetime | None = None
    name: str
    code: str
    sets_target: int
    reps_or_seconds_target: int
    working_weight: int
    rest_period_seconds: int
    tempo: str
    emom: bool
    equipments: list[Equipment]
    bands: list[Band]
    description: str | None = None

    class Config:
        from_attributes = True

from typing import Iterator, Optional

from pydantic import BaseModel, Field

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
from gymlog.schemas.filtering import FilterExpression, FilterSpec, contains, one_of


# ============== Exercise Schemas ==============

class ExerciseCreate(BaseModel):
    """Schema for adding an exercise to the library."""
    name: str = Field(min_length=1, max_length=200)
    push_or_pull: PushOrPull | None = None
    dynamic_or_static: DynamicOrStatic
    straight_or_bent: StraightOrBentArm | None = None
    squat_or_hinge: SquatOrHinge | None = None
    upper_or_lower: UpperOrLower
    compound_or_isolation: CompoundOrIsolation
    lever_variation: LeverVariation | None = None
    grip: Grip | None = None
    grip_width: GripWidth | None = None
    description: str | None = None


class ExerciseUpdate(BaseModel):
    """Partial update; only fields that are set are written."""
    name: str | None = Field(default=None, min_length=1, max_length=200)
    push_or_pull: PushOrPull | None = None
    dynamic_or_static: DynamicOrStatic | None = None
    straight_or_bent: StraightOrBentArm | None = None
    squat_or_hinge: SquatOrHinge | None = None
    upper_or_lower: UpperOrLower | None = None
    compound_or_isolation: CompoundOrIsolation | None = None
    lever_variation: LeverVariation | None = None
    grip: Grip | None = None
    grip_width: GripWidth | None = None
    description: str | None = None


class ExerciseResponse(BaseModel):
    id: int
    name: str
    push_or_pull: PushOrPull | None = None
    dynamic_or_static: DynamicOrStatic
    straight_or_bent: StraightOrBentArm | None = None
    squat_or_hinge: SquatOrHinge | None = None
    upper_or_lower: UpperOrLower
    compound_or_isolation: CompoundOrIsolation
    lever_variation: LeverVariation | None = None
    grip: Grip | None = None
    grip_width: GripWidth | None = None
    description: str | None = None

    class Config:
        from_attributes = True


# ============== Exercise Filters ==============

TAXONOMY_FIELDS = (
    "push_or_pull",
    "dynamic_or_static",
    "straight_or_bent",
    "squat_or_hinge",
    "upper_or_lower",
    "compound_or_isolation",
    "lever_variation",
    "grip",
    "grip_width",
)


class ExerciseFilter(FilterSpec):
    """Exercise library filter: name substring plus any taxonomy selection."""
    name: Optional[str] = None
    push_or_pull: Optional[list[PushOrPull]] = None
    dynamic_or_static: Optional[list[DynamicOrStatic]] = None
    straight_or_bent: Optional[list[StraightOrBentArm]] = None
    squat_or_hinge: Optional[list[SquatOrHinge]] = None
    upper_or_lower: Optional[list[UpperOrLower]] = None
    compound_or_isolation: Optional[list[CompoundOrIsolation]] = None
    lever_variation: Optional[list[LeverVariation]] = None
    grip: Optional[list[Grip]] = None
    grip_width: Optional[list[GripWidth]] = None

    def expressions(self) -> Iterator[Optional[FilterExpression]]:
        yield contains("name", self.name)
        for field in TAXONOMY_FIELDS:
            yield one_of(field, getattr(self, field))

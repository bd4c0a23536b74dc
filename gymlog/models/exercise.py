from sqlalchemy import Column, Enum, Integer, String, Text

from gymlog.db.database import Base
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


def _enum_column(enum_cls, nullable: bool = True) -> Column:
    return Column(
        Enum(
            enum_cls,
            native_enum=False,
            length=32,
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=nullable,
        index=True,
    )


class Exercise(Base):
    """An entry in the exercise library."""

    __tablename__ = "exercise_library"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False, index=True)

    push_or_pull = _enum_column(PushOrPull)
    dynamic_or_static = _enum_column(DynamicOrStatic, nullable=False)
    straight_or_bent = _enum_column(StraightOrBentArm)
    squat_or_hinge = _enum_column(SquatOrHinge)
    upper_or_lower = _enum_column(UpperOrLower, nullable=False)
    compound_or_isolation = _enum_column(CompoundOrIsolation, nullable=False)
    lever_variation = _enum_column(LeverVariation)
    grip = _enum_column(Grip)
    grip_width = _enum_column(GripWidth)

    description = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Exercise id={self.id} name={self.name!r}>"

"""Exercises prescribed by a workout, e.g. A1 pull ups 5x5 with 90s rest."""
from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from gymlog.db.database import Base


class WorkoutExercise(Base):
    __tablename__ = "workout_exercises"

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    workout_id = Column(
        Integer,
        ForeignKey("workouts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name = Column(String(200), nullable=False)
    # Superset label entered by the user: A1, A2, B1 ...
    code = Column(String(16), nullable=False)
    sets_target = Column(Integer, nullable=False)
    reps_or_seconds_target = Column(Integer, nullable=False)
    working_weight = Column(Integer, nullable=False, default=0)
    rest_period_seconds = Column(Integer, nullable=False, default=0)
    tempo = Column(String(32), nullable=False, default="")
    emom = Column(Boolean, nullable=False, default=False)
    # Lists of Equipment / Band values
    equipments = Column(JSON, nullable=False, default=list)
    bands = Column(JSON, nullable=False, default=list)
    description = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<WorkoutExercise id={self.id} workout_id={self.workout_id} code={self.code!r}>"

"""Training log models.

A ``WorkoutLogGroup`` is one training day; each ``WorkoutLog`` row under it
is a single logged set.
"""
from datetime import datetime, timezone

from sqlalchemy import Column, Date, DateTime, ForeignKey, Integer, Text

from gymlog.db.database import Base


class WorkoutLogGroup(Base):
    __tablename__ = "workout_log_groups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    date = Column(Date, nullable=False, index=True)
    notes = Column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<WorkoutLogGroup id={self.id} date={self.date}>"


class WorkoutLog(Base):
    __tablename__ = "workout_logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    workout_log_group_id = Column(
        Integer,
        ForeignKey("workout_log_groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Logged history pins what it refers to: those rows cannot be deleted.
    workout_id = Column(
        Integer, ForeignKey("workouts.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    workout_exercise_id = Column(
        Integer, ForeignKey("workout_exercises.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    exercise_id = Column(
        Integer, ForeignKey("exercise_library.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    set_number = Column(Integer, nullable=False)
    rep_number_or_seconds = Column(Integer, nullable=False)
    weight = Column(Integer, nullable=False, default=0)
    description = Column(Text, nullable=True)

from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from .database import Base


class Workout(Base):
    __tablename__ = "workouts"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    # YYYY-MM-DD, kept as text so it sorts lexically
    date = Column(String, nullable=False, index=True)
    name = Column(String(255), nullable=False)
    duration = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    exercises = relationship(
        "Exercise",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="Exercise.id",
    )

    def __repr__(self):
        return "<Workout(id=%s, name='%s', date=%s)>" % (self.id, self.name, self.date)


class Exercise(Base):
    __tablename__ = "exercises"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    workout_id = Column(Integer, ForeignKey("workouts.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    type = Column(String(16), nullable=False, default="strength", server_default="strength")

    # strength
    sets = Column(Integer, nullable=True)
    reps = Column(Integer, nullable=True)
    weight = Column(Float, nullable=True)
    # cardio
    distance = Column(Float, nullable=True)
    duration = Column(Integer, nullable=True)

    workout = relationship("Workout", back_populates="exercises")

    def __repr__(self):
        return "<Exercise(id=%s, workout_id=%s, name='%s', type=%s)>" % (
            self.id,
            self.workout_id,
            self.name,
            self.type,
        )

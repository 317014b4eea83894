from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func

from app.db.base import Base


class Exercise(Base):
    """Catalog entry. Seeded once, never mutated by the app."""
    __tablename__ = "exercises"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")

    # One of ExerciseCategory (app/exercises/content.py)
    category = Column(String(64), nullable=False)

    # 1..5, shown as stars
    difficulty = Column(Integer, nullable=False, default=1, index=True)

    xp_reward = Column(Integer, nullable=False)
    duration_minutes = Column(Integer, nullable=False, default=5)

    # Tagged by content["type"]; decoded with app.exercises.content.parse_content
    content = Column(JSON, nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())


class UserExercise(Base):
    """Append-only completion log. Repeats are allowed."""
    __tablename__ = "user_exercises"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    exercise_id = Column(Integer, ForeignKey("exercises.id"), nullable=False)

    xp_earned = Column(Integer, nullable=False)

    completed_at = Column(DateTime(timezone=True), server_default=func.now())

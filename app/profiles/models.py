from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey
from sqlalchemy.sql import func

from app.db.base import Base


class Profile(Base):
    """
    Per-user gamification state.

    Invariants kept by the gamification engine:
      - current_level == total_xp // XP_PER_LEVEL + 1
      - longest_streak >= current_streak
    """
    __tablename__ = "profiles"

    # Same id as the owning user
    id = Column(Integer, ForeignKey("users.id"), primary_key=True)

    username = Column(String, nullable=False)

    current_level = Column(Integer, nullable=False, default=1)
    total_xp = Column(Integer, nullable=False, default=0)

    current_streak = Column(Integer, nullable=False, default=0)
    longest_streak = Column(Integer, nullable=False, default=0)

    # Calendar day of the last streak-qualifying activity; NULL before the first one
    last_activity_date = Column(Date, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

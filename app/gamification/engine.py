"""
Level and streak rules. Pure functions, no DB access.
Core rules:
  - level = total_xp // XP_PER_LEVEL + 1
  - Level L spans total XP [(L-1)*XP_PER_LEVEL, L*XP_PER_LEVEL); the next
    level is reached at L*XP_PER_LEVEL total XP
  - Streak counts consecutive calendar days with activity
  - A mood check-in already recorded today blocks the streak update
"""
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from app.core.config import XP_PER_LEVEL


# ---------------------------------------------------------------------------
# LEVELS
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class LevelProgress:
    level: int
    total_xp: int
    xp_into_level: int
    xp_for_next_level: int   # total XP at which the next level starts
    xp_remaining: int
    fraction: float          # 0 <= fraction < 1


def level_for_xp(total_xp: int) -> int:
    if total_xp < 0:
        raise ValueError(f"total_xp must be >= 0, got {total_xp}")
    return total_xp // XP_PER_LEVEL + 1


def xp_for_next_level(level: int) -> int:
    """Total XP needed to leave `level`. Strictly increasing in level."""
    return level * XP_PER_LEVEL


def level_progress(total_xp: int) -> LevelProgress:
    level = level_for_xp(total_xp)
    level_start = (level - 1) * XP_PER_LEVEL
    into = total_xp - level_start
    next_at = xp_for_next_level(level)
    return LevelProgress(
        level=level,
        total_xp=total_xp,
        xp_into_level=into,
        xp_for_next_level=next_at,
        xp_remaining=next_at - total_xp,
        fraction=into / XP_PER_LEVEL,
    )


# ---------------------------------------------------------------------------
# STREAKS
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StreakUpdate:
    current_streak: int
    longest_streak: int
    last_activity_date: date


def next_streak(
    last_activity_date: Optional[date],
    current_streak: int,
    longest_streak: int,
    today: date,
    checked_in_today: bool,
) -> Optional[StreakUpdate]:
    """
    Streak state after a qualifying activity on `today`.

    Returns None when today's mood check-in already exists: the day is
    treated as counted and nothing is written.
    """
    if checked_in_today:
        return None

    yesterday = today - timedelta(days=1)

    if last_activity_date is None:
        new_streak = 1
    elif last_activity_date == yesterday:
        new_streak = current_streak + 1
    elif last_activity_date != today:
        # gap of 2+ days (or a date in the future)
        new_streak = 1
    else:
        new_streak = current_streak

    return StreakUpdate(
        current_streak=new_streak,
        longest_streak=max(new_streak, longest_streak),
        last_activity_date=today,
    )

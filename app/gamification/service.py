"""
Exercise completion: award XP, log the completion, advance the streak.

All three writes share one transaction. If any of them fails the session is
rolled back, so XP, the completion log and the streak never diverge.
"""
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.checkins.store import find_checkin
from app.core.deps import UserContext
from app.core.errors import RequestFailed
from app.exercises.store import get_exercise, insert_completion
from app.gamification.engine import StreakUpdate, level_for_xp, next_streak
from app.profiles.models import Profile
from app.profiles.store import read_profile, write_profile


@dataclass
class CompletionResult:
    exercise_id: int
    completion_id: int
    xp_earned: int
    previous_level: int
    new_level: int
    previous_streak: int
    streak_updated: bool
    profile: Profile

    @property
    def leveled_up(self) -> bool:
        return self.new_level > self.previous_level


def apply_streak(db: Session, ctx: UserContext, profile: Profile) -> Optional[StreakUpdate]:
    """Run the streak rules for ctx.today and write the outcome, if any."""
    checked_in_today = find_checkin(db, ctx.user_id, ctx.today) is not None

    update = next_streak(
        last_activity_date=profile.last_activity_date,
        current_streak=profile.current_streak,
        longest_streak=profile.longest_streak,
        today=ctx.today,
        checked_in_today=checked_in_today,
    )
    if update is None:
        print(f"[STREAK] user={ctx.user_id} skipped: mood check-in already recorded {ctx.today}", flush=True)
        return None

    old_streak = profile.current_streak
    write_profile(
        db,
        ctx.user_id,
        current_streak=update.current_streak,
        longest_streak=update.longest_streak,
        last_activity_date=update.last_activity_date,
    )
    print(
        f"[STREAK] user={ctx.user_id} {old_streak} -> {update.current_streak} "
        f"(longest {update.longest_streak})",
        flush=True,
    )
    return update


def complete_exercise(db: Session, ctx: UserContext, exercise_id: int) -> CompletionResult:
    exercise = get_exercise(db, exercise_id)
    profile = read_profile(db, ctx.user_id)

    xp_earned = exercise.xp_reward
    previous_level = profile.current_level
    previous_streak = profile.current_streak

    try:
        completion = insert_completion(db, ctx.user_id, exercise.id, xp_earned)
        # Added in SQL so a concurrent completion's reward is not overwritten;
        # the flushed attribute is expired and re-read below.
        write_profile(db, ctx.user_id, total_xp=Profile.total_xp + xp_earned)
        write_profile(db, ctx.user_id, current_level=level_for_xp(profile.total_xp))
        streak = apply_streak(db, ctx, profile)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        print(f"[XP] user={ctx.user_id} exercise={exercise_id} completion failed: {exc!r}", flush=True)
        raise RequestFailed() from exc

    db.refresh(profile)
    print(
        f"[XP] user={ctx.user_id} exercise={exercise.id} +{xp_earned} XP "
        f"total={profile.total_xp} level {previous_level} -> {profile.current_level}",
        flush=True,
    )

    return CompletionResult(
        exercise_id=exercise.id,
        completion_id=completion.id,
        xp_earned=xp_earned,
        previous_level=previous_level,
        new_level=profile.current_level,
        previous_streak=previous_streak,
        streak_updated=streak is not None,
        profile=profile,
    )

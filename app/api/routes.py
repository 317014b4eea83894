"""
API routes for the dashboard: profile, level progress and today's status.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.checkins.store import find_checkin
from app.core.deps import UserContext, get_user_context
from app.db.session import get_db
from app.exercises.store import count_completions
from app.profiles.store import read_profile
from app.profiles.views import profile_to_dict

router = APIRouter(prefix="/api", tags=["api"])


@router.get("/me/progress")
def get_me_progress(
    db: Session = Depends(get_db),
    ctx: UserContext = Depends(get_user_context),
):
    """
    Return profile, level progress bar data and whether the mood check-in
    prompt should be shown today.
    """
    profile = read_profile(db, ctx.user_id)
    checked_in = find_checkin(db, ctx.user_id, ctx.today) is not None
    return {
        "date": ctx.today.isoformat(),
        "profile": profile_to_dict(profile),
        "show_mood_checkin": not checked_in,
        "exercises_completed": count_completions(db, ctx.user_id),
    }

from app.gamification.engine import level_progress
from app.profiles.models import Profile


def profile_to_dict(profile: Profile) -> dict:
    """Profile fields plus level-progress data for the progress bar."""
    progress = level_progress(profile.total_xp)
    return {
        "id": profile.id,
        "username": profile.username,
        "current_level": profile.current_level,
        "total_xp": profile.total_xp,
        "current_streak": profile.current_streak,
        "longest_streak": profile.longest_streak,
        "last_activity_date": profile.last_activity_date.isoformat() if profile.last_activity_date else None,
        "level_progress": {
            "xp_into_level": progress.xp_into_level,
            "xp_for_next_level": progress.xp_for_next_level,
            "xp_remaining": progress.xp_remaining,
            "percent": round(progress.fraction * 100, 1),
        },
    }

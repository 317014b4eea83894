from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.deps import UserContext, get_user_context
from app.db.session import get_db
from app.exercises.content import dump_content, parse_content
from app.exercises.models import Exercise, UserExercise
from app.exercises.store import get_exercise, list_completions, list_exercises
from app.gamification.service import complete_exercise
from app.profiles.views import profile_to_dict

router = APIRouter(prefix="/exercises", tags=["exercises"])


def exercise_to_dict(exercise: Exercise) -> dict:
    content = parse_content(exercise.content, exercise.id)
    return {
        "id": exercise.id,
        "title": exercise.title,
        "description": exercise.description,
        "category": exercise.category,
        "difficulty": exercise.difficulty,
        "xp_reward": exercise.xp_reward,
        "duration_minutes": exercise.duration_minutes,
        "content": dump_content(content),
    }


def _completion_to_dict(completion: UserExercise) -> dict:
    return {
        "id": completion.id,
        "exercise_id": completion.exercise_id,
        "xp_earned": completion.xp_earned,
        "completed_at": completion.completed_at.isoformat() if completion.completed_at else None,
    }


# ======================================================
# CATALOG
# ======================================================
@router.get("")
def get_exercises(
    db: Session = Depends(get_db),
    ctx: UserContext = Depends(get_user_context),
):
    """All exercises, sorted by difficulty (easiest first)."""
    return {"exercises": [exercise_to_dict(e) for e in list_exercises(db)]}


# Declared before /{exercise_id} so "completions" is not parsed as an id
@router.get("/completions")
def get_completions(
    limit: int = Query(default=20, ge=1, le=100),
    db: Session = Depends(get_db),
    ctx: UserContext = Depends(get_user_context),
):
    """The user's most recent completions, newest first."""
    rows = list_completions(db, ctx.user_id, limit=limit)
    return {"completions": [_completion_to_dict(c) for c in rows]}


@router.get("/{exercise_id}")
def get_one_exercise(
    exercise_id: int,
    db: Session = Depends(get_db),
    ctx: UserContext = Depends(get_user_context),
):
    return exercise_to_dict(get_exercise(db, exercise_id))


# ======================================================
# COMPLETE
# ======================================================
@router.post("/{exercise_id}/complete")
def post_complete_exercise(
    exercise_id: int,
    db: Session = Depends(get_db),
    ctx: UserContext = Depends(get_user_context),
):
    result = complete_exercise(db, ctx, exercise_id)
    return {
        "exercise_id": result.exercise_id,
        "completion_id": result.completion_id,
        "xp_earned": result.xp_earned,
        "previous_level": result.previous_level,
        "new_level": result.new_level,
        "leveled_up": result.leveled_up,
        "previous_streak": result.previous_streak,
        "streak_updated": result.streak_updated,
        "profile": profile_to_dict(result.profile),
    }

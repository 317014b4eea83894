from sqlalchemy.orm import Session

from app.core.errors import ExerciseNotFound
from app.exercises.models import Exercise, UserExercise


def list_exercises(db: Session) -> list[Exercise]:
    """Whole catalog, easiest first."""
    return (
        db.query(Exercise)
        .order_by(Exercise.difficulty.asc(), Exercise.id.asc())
        .all()
    )


def get_exercise(db: Session, exercise_id: int) -> Exercise:
    exercise = db.query(Exercise).filter(Exercise.id == exercise_id).first()
    if exercise is None:
        raise ExerciseNotFound(exercise_id)
    return exercise


def insert_completion(db: Session, user_id: int, exercise_id: int, xp_earned: int) -> UserExercise:
    """Append a completion row. Flushed only; the caller commits."""
    completion = UserExercise(
        user_id=user_id,
        exercise_id=exercise_id,
        xp_earned=xp_earned,
    )
    db.add(completion)
    db.flush()
    return completion


def list_completions(db: Session, user_id: int, limit: int = 20) -> list[UserExercise]:
    return (
        db.query(UserExercise)
        .filter(UserExercise.user_id == user_id)
        .order_by(UserExercise.completed_at.desc(), UserExercise.id.desc())
        .limit(limit)
        .all()
    )


def count_completions(db: Session, user_id: int) -> int:
    return db.query(UserExercise).filter(UserExercise.user_id == user_id).count()

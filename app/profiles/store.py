"""
Profile store: read and partially update per-user gamification state.

Writes are flushed, not committed; the caller owns the transaction.
"""
from sqlalchemy.orm import Session

from app.core.errors import ProfileNotFound
from app.profiles.models import Profile

# Fields the gamification engine is allowed to overwrite
WRITABLE_FIELDS = frozenset({
    "current_level",
    "total_xp",
    "current_streak",
    "longest_streak",
    "last_activity_date",
})


def create_profile(db: Session, user_id: int, username: str) -> Profile:
    profile = Profile(
        id=user_id,
        username=username,
        current_level=1,
        total_xp=0,
        current_streak=0,
        longest_streak=0,
        last_activity_date=None,
    )
    db.add(profile)
    db.flush()
    return profile


def read_profile(db: Session, user_id: int) -> Profile:
    profile = db.query(Profile).filter(Profile.id == user_id).first()
    if profile is None:
        raise ProfileNotFound(user_id)
    return profile


def write_profile(db: Session, user_id: int, **fields) -> Profile:
    """
    Overwrite only the given fields. Anything not passed keeps its value.
    Raises ValueError for fields outside WRITABLE_FIELDS.
    """
    unknown = set(fields) - WRITABLE_FIELDS
    if unknown:
        raise ValueError(f"Cannot write profile fields: {sorted(unknown)}")

    profile = read_profile(db, user_id)
    for name, value in fields.items():
        setattr(profile, name, value)
    db.flush()
    return profile

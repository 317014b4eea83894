from datetime import date
from typing import Optional

from sqlalchemy.orm import Session

from app.checkins.models import DailyCheckin
from app.core.errors import CheckinAlreadyRecorded


def find_checkin(db: Session, user_id: int, day: date) -> Optional[DailyCheckin]:
    """The user's check-in for `day`, or None."""
    return (
        db.query(DailyCheckin)
        .filter(
            DailyCheckin.user_id == user_id,
            DailyCheckin.checkin_date == day,
        )
        .first()
    )


def insert_checkin(db: Session, user_id: int, mood_rating: int, day: date) -> DailyCheckin:
    """
    Record the day's mood. A second insert for the same day is rejected;
    the (user_id, checkin_date) unique constraint covers concurrent inserts.
    """
    if find_checkin(db, user_id, day) is not None:
        raise CheckinAlreadyRecorded(day)

    checkin = DailyCheckin(
        user_id=user_id,
        checkin_date=day,
        mood_rating=mood_rating,
    )
    db.add(checkin)
    db.flush()
    return checkin

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.checkins.models import DailyCheckin
from app.checkins.store import find_checkin, insert_checkin
from app.core.deps import UserContext
from app.core.errors import CheckinAlreadyRecorded, RequestFailed, ValidationFailed

MOOD_LABELS = {
    5: "Amazing",
    4: "Good",
    3: "Okay",
    2: "Not Great",
    1: "Struggling",
}


def checkin_to_dict(checkin: DailyCheckin) -> dict:
    return {
        "id": checkin.id,
        "checkin_date": checkin.checkin_date.isoformat(),
        "mood_rating": checkin.mood_rating,
        "mood_label": MOOD_LABELS.get(checkin.mood_rating),
    }


def submit_checkin(db: Session, ctx: UserContext, mood_rating: int) -> DailyCheckin:
    if mood_rating not in MOOD_LABELS:
        raise ValidationFailed(f"mood_rating must be between 1 and 5, got {mood_rating}.")

    try:
        checkin = insert_checkin(db, ctx.user_id, mood_rating, ctx.today)
        db.commit()
    except IntegrityError as exc:
        # Lost a race with another insert for the same day
        db.rollback()
        raise CheckinAlreadyRecorded(ctx.today) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        print(f"[CHECKIN] user={ctx.user_id} insert failed: {exc!r}", flush=True)
        raise RequestFailed() from exc

    print(f"[CHECKIN] user={ctx.user_id} day={ctx.today} mood={mood_rating}", flush=True)
    return checkin


def today_status(db: Session, ctx: UserContext) -> dict:
    """Whether today's mood was logged; the client shows the prompt when it wasn't."""
    checkin = find_checkin(db, ctx.user_id, ctx.today)
    return {
        "date": ctx.today.isoformat(),
        "checked_in": checkin is not None,
        "show_mood_checkin": checkin is None,
        "checkin": checkin_to_dict(checkin) if checkin else None,
    }

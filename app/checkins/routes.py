from fastapi import APIRouter, Depends, Form
from sqlalchemy.orm import Session

from app.checkins.service import checkin_to_dict, submit_checkin, today_status
from app.core.deps import UserContext, get_user_context
from app.db.session import get_db

router = APIRouter(prefix="/checkins", tags=["checkins"])


# =========================
# SUBMIT TODAY'S MOOD
# =========================
@router.post("", status_code=201)
def create_checkin(
    mood_rating: int = Form(...),
    db: Session = Depends(get_db),
    ctx: UserContext = Depends(get_user_context),
):
    checkin = submit_checkin(db, ctx, mood_rating)
    return checkin_to_dict(checkin)


# =========================
# TODAY'S STATUS
# =========================
@router.get("/today")
def get_today_checkin(
    db: Session = Depends(get_db),
    ctx: UserContext = Depends(get_user_context),
):
    return today_status(db, ctx)

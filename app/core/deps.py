from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from fastapi import Request, Depends, HTTPException
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.auth.models import User
from app.core.config import APP_TZ
from app.core.security import decode_access_token


@dataclass(frozen=True)
class UserContext:
    """
    Who is acting and on which calendar day.
    Passed explicitly into every service call instead of a global user.
    """
    user_id: int
    username: str
    today: date


def get_today() -> date:
    """Current calendar date in APP_TIMEZONE. Overridden in tests."""
    return datetime.now(APP_TZ).date()


def _extract_token(request: Request) -> Optional[str]:
    # An explicit header wins over the browser cookie
    token = request.headers.get("authorization") or request.cookies.get("access_token")
    if not token:
        return None

    # Cookie and header both carry "Bearer <token>"; accept the raw value too.
    if token.lower().startswith("bearer "):
        token = token[7:].strip()
    return token or None


def get_current_user(
    request: Request,
    db: Session = Depends(get_db),
) -> User:
    token = _extract_token(request)
    if not token:
        print(f"[AUTH] reject reason=missing_token path={request.url.path}", flush=True)
        raise HTTPException(status_code=401, detail="Not authenticated")

    payload = decode_access_token(token)
    if not payload:
        print(f"[AUTH] reject reason=invalid_token path={request.url.path}", flush=True)
        raise HTTPException(status_code=401, detail="Invalid token")

    username = payload.get("sub")
    if not username:
        print(f"[AUTH] reject reason=no_username_in_token path={request.url.path}", flush=True)
        raise HTTPException(status_code=401, detail="Invalid token payload")

    user = db.query(User).filter(User.username == username).first()
    if not user:
        print(f"[AUTH] reject reason=user_not_found username={username} path={request.url.path}", flush=True)
        raise HTTPException(status_code=401, detail="User not found")

    return user


def get_user_context(
    user: User = Depends(get_current_user),
    today: date = Depends(get_today),
) -> UserContext:
    return UserContext(user_id=user.id, username=user.username, today=today)

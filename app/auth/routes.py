from fastapi import APIRouter, Depends, HTTPException, Form
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.auth.models import User
from app.core.config import COOKIE_SECURE, MIN_PASSWORD_LENGTH
from app.core.deps import UserContext, get_user_context
from app.core.errors import RequestFailed, ValidationFailed
from app.core.security import hash_password, verify_password, create_access_token
from app.profiles.store import create_profile, read_profile
from app.profiles.views import profile_to_dict

router = APIRouter(prefix="/auth", tags=["auth"])


# =========================
# SIGNUP
# =========================
@router.post("/signup", status_code=201)
def signup(
    email: str = Form(...),
    username: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    email = email.strip().lower()
    username = username.strip()

    if not username:
        raise ValidationFailed("Username is required.")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationFailed(f"Password must be at least {MIN_PASSWORD_LENGTH} characters.")

    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=400, detail="Email already registered")

    if db.query(User).filter(User.username == username).first():
        raise HTTPException(status_code=400, detail="Username already taken")

    user = User(
        email=email,
        username=username,
        password_hash=hash_password(password),
    )

    try:
        db.add(user)
        db.flush()
        # Every account starts at level 1 with no XP and no streak
        create_profile(db, user.id, username)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        print(f"[AUTH] signup failed for {username}: {exc!r}", flush=True)
        raise RequestFailed() from exc

    db.refresh(user)
    print(f"[AUTH] signup user={user.id} username={user.username}", flush=True)
    return {"message": "Signup successful", "user_id": user.id}


# =========================
# LOGIN
# =========================
@router.post("/login")
def login(
    email_or_username: str = Form(...),
    password: str = Form(...),
    db: Session = Depends(get_db),
):
    ident = email_or_username.strip()
    # Try to find user by email first, then by username
    user = db.query(User).filter(User.email == ident.lower()).first()

    if not user:
        user = db.query(User).filter(User.username == ident).first()

    if not user or not verify_password(password, user.password_hash):
        print("[AUTH] Invalid credentials for:", ident, flush=True)
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token(user.username)
    print("[AUTH] Login successful for:", user.username, flush=True)

    response = JSONResponse({"access_token": token, "token_type": "bearer"})
    response.set_cookie(
        key="access_token",
        value=f"Bearer {token}",
        httponly=True,
        secure=COOKIE_SECURE,
        samesite="lax",
        path="/",
    )
    return response


# =========================
# LOGOUT
# =========================
@router.post("/logout")
def logout():
    response = JSONResponse({"message": "Logged out"})
    response.delete_cookie(key="access_token", path="/")
    return response


# =========================
# CURRENT PROFILE
# =========================
@router.get("/me")
def me(
    db: Session = Depends(get_db),
    ctx: UserContext = Depends(get_user_context),
):
    return profile_to_dict(read_profile(db, ctx.user_id))

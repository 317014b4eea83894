from fastapi import FastAPI, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.db.base import Base, engine
from app.db.session import get_db
from app.core.errors import WellnessError, wellness_error_handler

# Import models so create_all picks them up
from app.auth.models import User  # noqa: F401
from app.profiles.models import Profile  # noqa: F401
from app.exercises.models import Exercise, UserExercise  # noqa: F401
from app.checkins.models import DailyCheckin  # noqa: F401

from app.auth.routes import router as auth_router
from app.exercises.routes import router as exercise_router
from app.checkins.routes import router as checkin_router
from app.api.routes import router as api_router


app = FastAPI(title="Wellness Quest", version="0.1.0")

# Create database tables (still useful in dev; in production prefer Alembic)
Base.metadata.create_all(bind=engine)

app.add_exception_handler(WellnessError, wellness_error_handler)

# Include routers
app.include_router(auth_router)
app.include_router(exercise_router)
app.include_router(checkin_router)
app.include_router(api_router)


@app.get("/health", tags=["health"])
def health(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        print("[DB] health check failed:", repr(exc), flush=True)
        return JSONResponse(status_code=503, content={"status": "error", "db": "unreachable"})
    return {"status": "ok", "db": "ok"}

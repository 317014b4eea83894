"""
Application error taxonomy.

Every error carries an HTTP status and a machine-readable `code` so clients
can branch without parsing English messages. Rendered as
{"detail": ..., "code": ...} to stay compatible with FastAPI's own
HTTPException bodies.
"""
from __future__ import annotations

from datetime import date

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette import status


class WellnessError(Exception):
    """Base class for all application-level errors."""
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"detail": self.message, "code": self.code}


# ---------------------------------------------------------------------------
# NotFound
# ---------------------------------------------------------------------------

class NotFound(WellnessError):
    http_status = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"


class ProfileNotFound(NotFound):
    code = "PROFILE_NOT_FOUND"

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"Profile for user {user_id} not found.")


class ExerciseNotFound(NotFound):
    code = "EXERCISE_NOT_FOUND"

    def __init__(self, exercise_id: int):
        self.exercise_id = exercise_id
        super().__init__(f"Exercise {exercise_id} not found.")


# ---------------------------------------------------------------------------
# RequestFailed
# ---------------------------------------------------------------------------

class RequestFailed(WellnessError):
    """A store read/write failed. The cause is logged, not shown."""
    http_status = status.HTTP_503_SERVICE_UNAVAILABLE
    code = "REQUEST_FAILED"

    def __init__(self, message: str = "Something went wrong. Please try again."):
        super().__init__(message)


# ---------------------------------------------------------------------------
# ValidationFailed
# ---------------------------------------------------------------------------

class ValidationFailed(WellnessError):
    http_status = 422
    code = "VALIDATION_FAILED"


class CheckinAlreadyRecorded(WellnessError):
    http_status = status.HTTP_409_CONFLICT
    code = "CHECKIN_ALREADY_RECORDED"

    def __init__(self, day: date):
        self.day = day
        super().__init__(f"Mood check-in for {day} is already recorded.")


class InvalidExerciseContent(WellnessError):
    code = "INVALID_EXERCISE_CONTENT"

    def __init__(self, exercise_id: int | None, reason: str):
        self.exercise_id = exercise_id
        super().__init__(f"Exercise {exercise_id} has invalid content: {reason}")


async def wellness_error_handler(request: Request, exc: WellnessError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())

"""
Exercise content payloads.

Each exercise stores a JSON object tagged by "type". Every tag has its own
model carrying only the fields that tag uses; decoding is exhaustive, so an
unknown tag or a missing field is an error rather than an empty exercise.

    breathing     instructions, rounds
    reflection    prompt, fields
    guided        instructions, duration (optional)
    affirmations  statements
    observation   instructions
    checkin       questions
"""
from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from app.core.errors import InvalidExerciseContent


class ExerciseCategory(str, Enum):
    BREATHING = "Breathing"
    GRATITUDE = "Gratitude"
    MEDITATION = "Meditation"
    AFFIRMATIONS = "Affirmations"
    MINDFULNESS = "Mindfulness"
    SELF_AWARENESS = "Self-Awareness"


class _Content(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class BreathingContent(_Content):
    type: Literal["breathing"] = "breathing"
    instructions: List[str] = Field(min_length=1)
    rounds: int = Field(gt=0)


class ReflectionContent(_Content):
    type: Literal["reflection"] = "reflection"
    prompt: str = Field(min_length=1)
    # Number of free-text answers the user is asked for
    fields: int = Field(default=3, gt=0)


class GuidedContent(_Content):
    type: Literal["guided"] = "guided"
    instructions: List[str] = Field(min_length=1)
    duration: Optional[int] = Field(default=None, gt=0)


class AffirmationsContent(_Content):
    type: Literal["affirmations"] = "affirmations"
    statements: List[str] = Field(min_length=1)


class ObservationContent(_Content):
    type: Literal["observation"] = "observation"
    instructions: List[str] = Field(min_length=1)


class CheckinContent(_Content):
    type: Literal["checkin"] = "checkin"
    questions: List[str] = Field(min_length=1)


ExerciseContent = Annotated[
    Union[
        BreathingContent,
        ReflectionContent,
        GuidedContent,
        AffirmationsContent,
        ObservationContent,
        CheckinContent,
    ],
    Field(discriminator="type"),
]

_content_adapter = TypeAdapter(ExerciseContent)


def parse_content(raw, exercise_id=None):
    """Decode a stored content dict into its tagged model."""
    try:
        return _content_adapter.validate_python(raw)
    except ValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in err['loc']) or 'content'}: {err['msg']}"
            for err in exc.errors()
        )
        raise InvalidExerciseContent(exercise_id, errors) from exc


def dump_content(content) -> dict:
    """Encode a content model for the JSON column, dropping unset optionals."""
    return content.model_dump(exclude_none=True)

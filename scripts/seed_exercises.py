"""
Seed the exercise catalog.

Purpose:
- Insert the default self-care exercises
- SAFE to run multiple times (matches on title, won't duplicate entries)

Every content payload is validated against its tagged model before insert,
so a typo in this file fails loudly instead of storing an unusable exercise.
"""
import sys
import os

# Add the parent directory to the path so we can import app modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from sqlalchemy.orm import Session

from app.db.base import Base, engine
from app.db.session import SessionLocal
from app.exercises.content import ExerciseCategory, dump_content, parse_content
from app.exercises.models import Exercise

# Imported so create_all knows every table the foreign keys point at
from app.auth.models import User  # noqa: F401
from app.profiles.models import Profile  # noqa: F401
from app.checkins.models import DailyCheckin  # noqa: F401


DEFAULT_EXERCISES = [
    {
        "title": "Box Breathing",
        "description": "A calming four-count breathing pattern.",
        "category": ExerciseCategory.BREATHING,
        "difficulty": 1,
        "xp_reward": 10,
        "duration_minutes": 3,
        "content": {
            "type": "breathing",
            "instructions": [
                "Breathe in slowly for 4 counts",
                "Hold your breath for 4 counts",
                "Breathe out slowly for 4 counts",
                "Hold empty for 4 counts",
            ],
            "rounds": 4,
        },
    },
    {
        "title": "Three Good Things",
        "description": "Notice what went well today.",
        "category": ExerciseCategory.GRATITUDE,
        "difficulty": 1,
        "xp_reward": 15,
        "duration_minutes": 5,
        "content": {
            "type": "reflection",
            "prompt": "Write down three things you are grateful for today.",
            "fields": 3,
        },
    },
    {
        "title": "Kind Words",
        "description": "Read positive statements about yourself.",
        "category": ExerciseCategory.AFFIRMATIONS,
        "difficulty": 1,
        "xp_reward": 10,
        "duration_minutes": 2,
        "content": {
            "type": "affirmations",
            "statements": [
                "I am doing the best I can",
                "I deserve rest and care",
                "My feelings are valid",
                "I am growing every day",
            ],
        },
    },
    {
        "title": "5-4-3-2-1 Grounding",
        "description": "Use your senses to come back to the present.",
        "category": ExerciseCategory.MINDFULNESS,
        "difficulty": 2,
        "xp_reward": 20,
        "duration_minutes": 5,
        "content": {
            "type": "observation",
            "instructions": [
                "Name 5 things you can see",
                "Name 4 things you can touch",
                "Name 3 things you can hear",
                "Name 2 things you can smell",
                "Name 1 thing you can taste",
            ],
        },
    },
    {
        "title": "Body Scan",
        "description": "Slowly move your attention through your body.",
        "category": ExerciseCategory.MEDITATION,
        "difficulty": 3,
        "xp_reward": 25,
        "duration_minutes": 10,
        "content": {
            "type": "guided",
            "instructions": [
                "Sit or lie down comfortably and close your eyes",
                "Bring attention to your feet and notice any sensations",
                "Move slowly up through your legs, belly and chest",
                "Notice your shoulders, arms and hands",
                "Finish at the top of your head, then take three deep breaths",
            ],
            "duration": 10,
        },
    },
    {
        "title": "Evening Check-in",
        "description": "Reflect on how your day went.",
        "category": ExerciseCategory.SELF_AWARENESS,
        "difficulty": 2,
        "xp_reward": 20,
        "duration_minutes": 5,
        "content": {
            "type": "checkin",
            "questions": [
                "What emotion did you feel most today?",
                "What drained your energy?",
                "What gave you energy?",
            ],
        },
    },
]


def seed_exercises():
    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()

    try:
        created = 0
        skipped = 0

        for entry in DEFAULT_EXERCISES:
            existing = db.query(Exercise).filter(Exercise.title == entry["title"]).first()
            if existing:
                skipped += 1
                continue

            content = parse_content(entry["content"])
            db.add(Exercise(
                title=entry["title"],
                description=entry["description"],
                category=entry["category"].value,
                difficulty=entry["difficulty"],
                xp_reward=entry["xp_reward"],
                duration_minutes=entry["duration_minutes"],
                content=dump_content(content),
            ))
            created += 1

        db.commit()

        print("✅ Exercise seeding complete")
        print(f"   Created: {created}")
        print(f"   Skipped (already existed): {skipped}")

    except Exception as e:
        db.rollback()
        print("❌ Error while seeding exercises")
        print(str(e))
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_exercises()

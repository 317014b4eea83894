"""
Store-level tests run directly against a session, no HTTP.
"""
from datetime import date

import pytest

from app.auth.models import User
from app.checkins.store import find_checkin, insert_checkin
from app.core.errors import CheckinAlreadyRecorded, ExerciseNotFound, ProfileNotFound
from app.exercises.store import get_exercise, insert_completion, list_completions, list_exercises
from app.profiles.store import create_profile, read_profile, write_profile
from conftest import add_exercise

DAY = date(2026, 5, 1)


@pytest.fixture()
def user(db):
    u = User(email="store@example.com", username="store", password_hash="x:y")
    db.add(u)
    db.flush()
    create_profile(db, u.id, u.username)
    db.commit()
    return u


class TestProfileStore:

    def test_read_missing_profile(self, db):
        with pytest.raises(ProfileNotFound):
            read_profile(db, 12345)

    def test_partial_write_keeps_other_fields(self, db, user):
        write_profile(db, user.id, total_xp=250, current_level=3, current_streak=4, longest_streak=4)
        db.commit()

        write_profile(db, user.id, current_streak=1)
        db.commit()
        db.expire_all()

        profile = read_profile(db, user.id)
        assert profile.current_streak == 1
        assert profile.longest_streak == 4
        assert profile.total_xp == 250
        assert profile.current_level == 3

    def test_unknown_field_rejected(self, db, user):
        with pytest.raises(ValueError):
            write_profile(db, user.id, username="hacker")


class TestExerciseStore:

    def test_sorted_by_difficulty_then_id(self, db):
        b = add_exercise(db, "B", difficulty=2)
        a = add_exercise(db, "A", difficulty=1)
        c = add_exercise(db, "C", difficulty=2)
        assert [e.id for e in list_exercises(db)] == [a.id, b.id, c.id]

    def test_missing_exercise(self, db):
        with pytest.raises(ExerciseNotFound):
            get_exercise(db, 77)

    def test_completions_newest_first(self, db, user):
        ex = add_exercise(db)
        first = insert_completion(db, user.id, ex.id, 10)
        second = insert_completion(db, user.id, ex.id, 10)
        db.commit()
        ids = [c.id for c in list_completions(db, user.id)]
        assert ids[0] == second.id
        assert set(ids) == {first.id, second.id}


class TestCheckinStore:

    def test_find_returns_none_when_absent(self, db, user):
        assert find_checkin(db, user.id, DAY) is None

    def test_insert_then_find(self, db, user):
        insert_checkin(db, user.id, 4, DAY)
        db.commit()
        found = find_checkin(db, user.id, DAY)
        assert found is not None
        assert found.mood_rating == 4

    def test_duplicate_day_rejected(self, db, user):
        insert_checkin(db, user.id, 4, DAY)
        db.commit()
        with pytest.raises(CheckinAlreadyRecorded):
            insert_checkin(db, user.id, 2, DAY)

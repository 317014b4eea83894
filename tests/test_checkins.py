from datetime import timedelta

from app.checkins.models import DailyCheckin
from conftest import TODAY, signup_and_login


def test_submit_mood(client, set_today):
    headers = signup_and_login(client)
    r = client.post("/checkins", data={"mood_rating": 5}, headers=headers)
    assert r.status_code == 201
    body = r.json()
    assert body["mood_rating"] == 5
    assert body["mood_label"] == "Amazing"
    assert body["checkin_date"] == TODAY.isoformat()


def test_second_checkin_same_day_rejected(client, db, set_today):
    headers = signup_and_login(client)
    assert client.post("/checkins", data={"mood_rating": 3}, headers=headers).status_code == 201

    r = client.post("/checkins", data={"mood_rating": 1}, headers=headers)
    assert r.status_code == 409
    assert r.json()["code"] == "CHECKIN_ALREADY_RECORDED"

    rows = db.query(DailyCheckin).all()
    assert len(rows) == 1
    assert rows[0].mood_rating == 3


def test_next_day_allows_new_checkin(client, db, set_today):
    headers = signup_and_login(client)
    assert client.post("/checkins", data={"mood_rating": 2}, headers=headers).status_code == 201

    set_today(TODAY + timedelta(days=1))
    assert client.post("/checkins", data={"mood_rating": 4}, headers=headers).status_code == 201
    assert db.query(DailyCheckin).count() == 2


def test_checkins_are_per_user(client, db, set_today):
    alice = signup_and_login(client, "alice")
    bob = signup_and_login(client, "bob")
    assert client.post("/checkins", data={"mood_rating": 4}, headers=alice).status_code == 201
    assert client.post("/checkins", data={"mood_rating": 2}, headers=bob).status_code == 201


def test_mood_out_of_range(client, set_today):
    headers = signup_and_login(client)
    for rating in (0, 6, -1):
        r = client.post("/checkins", data={"mood_rating": rating}, headers=headers)
        assert r.status_code == 422
        assert r.json()["code"] == "VALIDATION_FAILED"


def test_checkin_does_not_touch_profile(client, set_today):
    headers = signup_and_login(client)
    client.post("/checkins", data={"mood_rating": 4}, headers=headers)
    profile = client.get("/auth/me", headers=headers).json()
    assert profile["current_streak"] == 0
    assert profile["last_activity_date"] is None


def test_today_status(client, set_today):
    headers = signup_and_login(client)

    r = client.get("/checkins/today", headers=headers)
    assert r.json()["checked_in"] is False
    assert r.json()["show_mood_checkin"] is True
    assert r.json()["checkin"] is None

    client.post("/checkins", data={"mood_rating": 1}, headers=headers)

    r = client.get("/checkins/today", headers=headers)
    assert r.json()["checked_in"] is True
    assert r.json()["show_mood_checkin"] is False
    assert r.json()["checkin"]["mood_label"] == "Struggling"


def test_progress_dashboard(client, set_today):
    headers = signup_and_login(client, "dash")
    r = client.get("/api/me/progress", headers=headers)
    assert r.status_code == 200
    body = r.json()
    assert body["date"] == TODAY.isoformat()
    assert body["profile"]["username"] == "dash"
    assert body["profile"]["level_progress"]["xp_for_next_level"] == 100
    assert body["show_mood_checkin"] is True
    assert body["exercises_completed"] == 0

    client.post("/checkins", data={"mood_rating": 4}, headers=headers)
    assert client.get("/api/me/progress", headers=headers).json()["show_mood_checkin"] is False

"""
Time zone handling for "today", and password/token helpers.
"""
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from jose import jwt

import app.core.deps as deps
from app.core.config import load_timezone
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class _LateEveningUTC(datetime):
    """Clock pinned to 2026-03-10 23:30 UTC."""

    @classmethod
    def now(cls, tz=None):
        instant = datetime(2026, 3, 10, 23, 30, tzinfo=timezone.utc)
        return instant.astimezone(tz) if tz is not None else instant.replace(tzinfo=None)


class TestToday:

    def test_unknown_zone_fails_fast(self):
        with pytest.raises(RuntimeError, match="Mars/Olympus"):
            load_timezone("Mars/Olympus")

    def test_known_zone_loads(self):
        assert load_timezone("Europe/Berlin") == ZoneInfo("Europe/Berlin")

    def test_today_in_utc(self, monkeypatch):
        monkeypatch.setattr(deps, "datetime", _LateEveningUTC)
        monkeypatch.setattr(deps, "APP_TZ", ZoneInfo("UTC"))
        assert deps.get_today() == date(2026, 3, 10)

    def test_today_follows_configured_zone(self, monkeypatch):
        # UTC+14: already the next calendar day
        monkeypatch.setattr(deps, "datetime", _LateEveningUTC)
        monkeypatch.setattr(deps, "APP_TZ", ZoneInfo("Pacific/Kiritimati"))
        assert deps.get_today() == date(2026, 3, 11)

    def test_today_behind_utc(self, monkeypatch):
        monkeypatch.setattr(deps, "datetime", _LateEveningUTC)
        monkeypatch.setattr(deps, "APP_TZ", ZoneInfo("America/Los_Angeles"))
        assert deps.get_today() == date(2026, 3, 10)


class TestPasswords:

    def test_hash_and_verify(self):
        stored = hash_password("secret123")
        assert stored.startswith("pbkdf2_sha256$")
        assert verify_password("secret123", stored)
        assert not verify_password("secret124", stored)

    def test_same_password_gets_new_salt(self):
        assert hash_password("secret123") != hash_password("secret123")

    def test_unreadable_hash_never_verifies(self):
        for stored in ("", "x:y", "pbkdf2_sha256$abc$00$00", "md5$1$00$00"):
            assert verify_password("secret123", stored) is False


class TestTokens:

    def test_token_carries_username(self):
        claims = decode_access_token(create_access_token("calm_user"))
        assert claims["sub"] == "calm_user"

    def test_expired_token_rejected(self):
        token = create_access_token("calm_user", expires_in=timedelta(seconds=-5))
        assert decode_access_token(token) is None

    def test_token_signed_with_other_key_rejected(self):
        forged = jwt.encode({"sub": "calm_user"}, "some-other-key", algorithm="HS256")
        assert decode_access_token(forged) is None

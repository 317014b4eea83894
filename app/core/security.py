"""
Password hashes and access tokens.

Stored hash format: "pbkdf2_sha256$<iterations>$<salt hex>$<hash hex>".
The iteration count travels with the hash, so raising PBKDF2_ITERATIONS
does not lock out existing accounts.
"""
import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from app.core.config import ACCESS_TOKEN_EXPIRE_MINUTES, ALGORITHM, SECRET_KEY

PBKDF2_ITERATIONS = 200_000
_SCHEME = "pbkdf2_sha256"


def _derive(password: str, salt: bytes, iterations: int) -> bytes:
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)


def hash_password(password: str) -> str:
    salt = secrets.token_bytes(16)
    digest = _derive(password, salt, PBKDF2_ITERATIONS)
    return f"{_SCHEME}${PBKDF2_ITERATIONS}${salt.hex()}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    """False for a wrong password or an unreadable stored hash."""
    parts = stored.split("$")
    if len(parts) != 4 or parts[0] != _SCHEME:
        return False
    try:
        iterations = int(parts[1])
        salt = bytes.fromhex(parts[2])
        expected = bytes.fromhex(parts[3])
    except ValueError:
        return False
    return hmac.compare_digest(_derive(password, salt, iterations), expected)


def create_access_token(username: str, expires_in: Optional[timedelta] = None) -> str:
    """Signed token whose subject is the username."""
    now = datetime.now(timezone.utc)
    lifetime = expires_in if expires_in is not None else timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {"sub": username, "iat": now, "exp": now + lifetime}
    return jwt.encode(claims, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Claims of a valid token, or None when the token is expired or forged."""
    try:
        return jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except JWTError as exc:
        print(f"[AUTH] rejected token: {type(exc).__name__}", flush=True)
        return None
